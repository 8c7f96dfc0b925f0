"""
Notifier - remote action triggered by a button press

Two phases, so diagnostics can tell them apart:
1. Resolve the host name. Failure → UnresolvableHostError, nothing is run.
2. Run the remote command over SSH. Non-zero exit → NotifyActionError.

Both map to the same error LED signal in the press handler.
"""

import socket
import subprocess
from typing import Callable, List, Protocol
from models.errors import UnresolvableHostError, NotifyActionError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.NOTIFY)

DEFAULT_IDENTITY = "/etc/dropbear/dropbear_ecdsa_host_key"
DEFAULT_URL = "https://www.google.com.au/search?q=set+timer+5+min"


class INotifier(Protocol):

    def notify(self, host: str, user: str) -> None:
        """Perform the action; raise NotifyError on failure"""
        ...


class SSHNotifier(INotifier):
    """
    Opens a URL on the user's desktop via SSH.

    Args:
        identity: Private key passed to ssh -i
        url: URL opened with xdg-open on the remote display
        resolver: Name resolution function (socket.getaddrinfo signature)
        runner: Command runner (subprocess.run signature)
    """

    def __init__(
        self,
        identity: str = DEFAULT_IDENTITY,
        url: str = DEFAULT_URL,
        resolver: Callable = socket.getaddrinfo,
        runner: Callable = subprocess.run,
    ):
        self.identity = identity
        self.url = url
        self._resolver = resolver
        self._runner = runner

    def build_command(self, host: str, user: str) -> List[str]:
        remote = f"DISPLAY=:0 xdg-open '{self.url}'"
        return ["ssh", "-y", "-i", self.identity, f"{user}@{host}", remote]

    def resolve(self, host: str) -> None:
        """
        Quick check that the host is known before spending time on SSH.

        Raises:
            UnresolvableHostError: If name resolution fails
        """
        try:
            self._resolver(host, None)
        except (socket.gaierror, UnicodeError) as e:
            log.error("Resolving host failed", host=host, error=e)
            raise UnresolvableHostError(host, str(e)) from e

    def notify(self, host: str, user: str) -> None:
        self.resolve(host)

        cmd = self.build_command(host, user)
        log.debug("Running notification command", command=" ".join(cmd))

        try:
            result = self._runner(cmd, check=False)
        except OSError as e:
            log.error("Notification command could not be started", host=host, error=e)
            raise NotifyActionError(host, None, str(e)) from e

        if result.returncode != 0:
            log.error("Notifying user failed", host=host, status=result.returncode)
            raise NotifyActionError(host, result.returncode)

        log.info("User notified", target=f"{user}@{host}")
