"""
Lifecycle subsystem
-------------------

Exports the public API for:
- background mode (daemonize)
- signal-driven shutdown
- shutdown handlers

External code should import from:
    from lifecycle import ShutdownCoordinator, daemonize
    from lifecycle.handlers import LEDShutdownHandler
"""

from .background import daemonize
from .shutdown_coordinator import ShutdownCoordinator, ShutdownRequested
from .shutdown_protocol import IShutdownHandler
from . import handlers

__all__ = [
    "daemonize",
    "ShutdownCoordinator",
    "ShutdownRequested",
    "IShutdownHandler",
    "handlers",
]
