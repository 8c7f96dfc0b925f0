"""
Background mode (-B / --background).

Detaches from the controlling terminal but keeps stdout/stderr attached, so
an init script (or an ssh session that started us) still sees the log.
stdin is pointed at /dev/null first; otherwise ssh would block waiting for
user input.
"""

import os
import sys
from models.errors import DaemonizeError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)

STDIN_FILENO = 0


def redirect_stdin_to_devnull() -> None:
    try:
        null = os.open(os.devnull, os.O_RDWR)
    except OSError as e:
        raise DaemonizeError("open /dev/null", e) from e

    # With fd 0 already closed, open() hands back fd 0 itself
    if null == STDIN_FILENO:
        return

    try:
        os.dup2(null, STDIN_FILENO)
    except OSError as e:
        raise DaemonizeError("dup2 /dev/null", e) from e
    finally:
        os.close(null)


def daemonize(chdir: bool = True) -> None:
    """
    Fork into the background and start a new session.

    The parent exits immediately with status 0; only the child returns.

    Raises:
        DaemonizeError: If any step fails (the caller exits non-zero)
    """
    redirect_stdin_to_devnull()

    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()

    try:
        pid = os.fork()
    except OSError as e:
        raise DaemonizeError("fork", e) from e

    if pid > 0:
        os._exit(0)

    try:
        os.setsid()
        if chdir:
            os.chdir("/")
    except OSError as e:
        raise DaemonizeError("setsid/chdir", e) from e

    log.info("Running in background", pid=os.getpid())
