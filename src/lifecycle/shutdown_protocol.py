"""
Shutdown handler protocol for component-based shutdown.

Each component that needs cleanup implements IShutdownHandler to take part
in the shutdown sequence run after SIGINT/SIGTERM.
"""

from typing import Protocol


class IShutdownHandler(Protocol):
    """
    Protocol for components that need cleanup on shutdown.

    The ShutdownCoordinator calls shutdown() on each handler in priority
    order (highest first).

    Example:
        class LEDShutdownHandler:
            @property
            def shutdown_priority(self) -> int:
                return 100  # Shutdown first

            def shutdown(self) -> None:
                self.active_led.off()
    """

    @property
    def shutdown_priority(self) -> int:
        """
        Higher priority shuts down earlier.
        """
        ...

    def shutdown(self) -> None:
        """
        Called during coordinated shutdown.
        """
        ...
