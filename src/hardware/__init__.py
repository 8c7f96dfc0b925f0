"""
Hardware Layer

Low-level device access only:

- GPIO lines (sysfs value pseudo-files)
- Edge waiting on the button line
- Status LEDs

"""
from .gpio import IGPIOLine, SysfsGPIOLine, MockGPIOLine, gpio_path
from .input import IEdgeWaiter, PollEdgeWaiter, Wakeup
from .output import StatusLED

__all__ = [
    "IGPIOLine",
    "SysfsGPIOLine",
    "MockGPIOLine",
    "gpio_path",
    "IEdgeWaiter",
    "PollEdgeWaiter",
    "Wakeup",
    "StatusLED",
]
