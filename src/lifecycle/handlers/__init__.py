from .gpio_shutdown_handler import GPIOShutdownHandler
from .led_shutdown_handler import LEDShutdownHandler

__all__ = [
    "GPIOShutdownHandler",
    "LEDShutdownHandler",
]
