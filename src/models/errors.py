"""
Daemon error taxonomy

Every error carries a stable code, a human readable message and optional
details so the bootstrap can print one consistent diagnostic.

- ConfigError:   missing/invalid environment, inaccessible GPIO path (fatal)
- GpioIOError:   open/seek/read failure on a GPIO line (fatal for the button)
- PollError:     button descriptor invalid/hung up, or waiting failed (fatal)
- NotifyError:   remote notification failed (non-fatal, shown on error LED)
- DaemonizeError: detaching into the background failed (fatal)
"""

from typing import Optional


class DaemonError(Exception):
    """Base class for daemon errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(DaemonError):
    """Missing or invalid environment configuration"""
    def __init__(self, message: str, variable: Optional[str] = None, **details):
        if variable is not None:
            details["variable"] = variable
        super().__init__(
            code="CONFIG_ERROR",
            message=message,
            details=details,
        )
        self.variable = variable


class GpioIOError(DaemonError):
    """GPIO pseudo-file could not be opened, seeked or read"""
    def __init__(self, message: str, path: str, cause: Optional[BaseException] = None):
        details = {"path": path}
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(
            code="GPIO_IO_ERROR",
            message=message,
            details=details,
        )
        self.path = path


class PollError(DaemonError):
    """Waiting on the button descriptor failed or it became unusable"""
    def __init__(self, message: str, revents: Optional[int] = None):
        details = {}
        if revents is not None:
            details["revents"] = revents
        super().__init__(
            code="POLL_ERROR",
            message=message,
            details=details,
        )
        self.revents = revents


class NotifyError(DaemonError):
    """Base class for notification failures"""
    def __init__(self, code: str, message: str, host: str, **details):
        details["host"] = host
        super().__init__(code=code, message=message, details=details)
        self.host = host


class UnresolvableHostError(NotifyError):
    """Name resolution failed, the remote action was never attempted"""
    def __init__(self, host: str, reason: str):
        super().__init__(
            code="UNRESOLVABLE_HOST",
            message=f"Could not resolve host '{host}': {reason}",
            host=host,
            reason=reason,
        )


class NotifyActionError(NotifyError):
    """The remote action ran (or tried to) and failed"""
    def __init__(self, host: str, status: Optional[int], reason: str = ""):
        message = f"Notifying '{host}' failed"
        if status is not None:
            message += f" (exit status {status})"
        if reason:
            message += f": {reason}"
        super().__init__(
            code="NOTIFY_ACTION_FAILED",
            message=message,
            host=host,
            status=status,
        )
        self.status = status


class DaemonizeError(DaemonError):
    """Detaching from the controlling terminal failed"""
    def __init__(self, step: str, cause: BaseException):
        super().__init__(
            code="DAEMONIZE_FAILED",
            message=f"Failed to daemonize ({step}): {cause}",
            details={"step": step},
        )
        self.step = step
