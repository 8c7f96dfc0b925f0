"""
Status LED Component - Hardware Abstraction Layer (Layer 1)

Fire-and-forget boolean output on a GPIO line. A failed write is logged by
the line and never stops button monitoring.
"""

from typing import Optional
from hardware.gpio.gpio_line_interface import IGPIOLine
from models.enums import LEDRole
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LED)


class StatusLED:
    """
    Single status LED.

    Args:
        line: Output GPIO line driving the LED
        role: Which indicator this is (ERROR / ACTIVE)

    Example:
        active = StatusLED(line, LEDRole.ACTIVE)
        active.on()
        active.off()
    """

    def __init__(self, line: IGPIOLine, role: LEDRole):
        self.line = line
        self.role = role
        self._state: Optional[bool] = None

    def set(self, value: bool) -> None:
        """Drive the LED to value (True = lit)."""
        value = bool(value)
        log.debug(f"{self.role.name} LED → {'ON' if value else 'OFF'}")
        self.line.write_value(value)
        self._state = value

    def on(self) -> None:
        self.set(True)

    def off(self) -> None:
        self.set(False)

    @property
    def state(self) -> Optional[bool]:
        """Last value written, None before the first write."""
        return self._state

    def __repr__(self) -> str:
        return f"<StatusLED {self.role.name} path={self.line.path}>"
