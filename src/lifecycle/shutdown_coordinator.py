"""
Shutdown coordinator for the single-threaded daemon.

Turns SIGINT/SIGTERM into a ShutdownRequested exception raised on the main
thread (interrupting the blocking wait or the active-window sleep), then
runs the registered handlers in priority order.
"""

import signal
from typing import List, Optional
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class ShutdownRequested(Exception):
    """Raised from the signal handler; carries the signal number."""

    def __init__(self, signum: int):
        self.signum = signum
        super().__init__(f"Signal {signal.Signals(signum).name} received")

    @property
    def exit_code(self) -> int:
        """Conventional shell exit status for death-by-signal."""
        return 128 + self.signum


class ShutdownCoordinator:
    """
    Coordinates shutdown of the daemon's components.

    Example:
        coordinator = ShutdownCoordinator()
        coordinator.register(LEDShutdownHandler(active_led))
        coordinator.register(GPIOShutdownHandler(button))
        coordinator.setup_signal_handlers()

        try:
            loop.run()
        except ShutdownRequested as e:
            coordinator.shutdown_all(reason=str(e))
    """

    def __init__(self):
        self._handlers: List = []
        self._done = False

    def register(self, handler) -> None:
        """
        Register a shutdown handler.

        Handler must have:
        - shutdown_priority property (int)
        - shutdown() method

        Args:
            handler: Object implementing IShutdownHandler protocol
        """
        if not hasattr(handler, "shutdown_priority"):
            raise ValueError(f"Handler {handler} missing shutdown_priority property")
        if not hasattr(handler, "shutdown"):
            raise ValueError(f"Handler {handler} missing shutdown() method")

        self._handlers.append(handler)
        log.debug(f"Registered shutdown handler: {handler.__class__.__name__}")

    def setup_signal_handlers(self) -> None:
        """Install SIGINT/SIGTERM handlers (main thread only)."""

        def signal_handler(signum, _frame) -> None:
            raise ShutdownRequested(signum)

        for sig in HANDLED_SIGNALS:
            signal.signal(sig, signal_handler)

        log.debug("Signal handlers installed (SIGINT, SIGTERM)")

    def shutdown_all(self, reason: Optional[str] = None) -> None:
        """
        Run every handler once, highest priority first.

        A failing handler is logged and does not stop the others.
        """
        if self._done:
            return
        self._done = True

        log.info("Shutting down", reason=reason or "UNKNOWN")

        sorted_handlers = sorted(
            self._handlers, key=lambda h: h.shutdown_priority, reverse=True
        )

        for handler in sorted_handlers:
            handler_name = handler.__class__.__name__
            try:
                log.debug(f"Shutting down {handler_name} (priority={handler.shutdown_priority})...")
                handler.shutdown()
            except Exception as e:
                log.error(f"Error shutting down {handler_name}", error=e)

        log.info("Shutdown sequence complete")

    def get_handler(self, handler_type: type):
        """
        Get a registered handler by type.

        Args:
            handler_type: The handler class to find

        Returns:
            Handler instance or None if not found
        """
        for handler in self._handlers:
            if isinstance(handler, handler_type):
                return handler
        return None
