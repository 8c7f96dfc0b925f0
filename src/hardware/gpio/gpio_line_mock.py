from typing import List, Optional
from hardware.gpio.gpio_line_interface import IGPIOLine
from models.enums import GPIODirection
from models.errors import GpioIOError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)

class MockGPIOLine(IGPIOLine):
    """
    In-memory GPIO line.

    Records every written byte so tests can assert the exact write sequence,
    and can be told to fail reads to exercise the fatal path.
    """

    def __init__(
        self,
        path: str = "mock",
        direction: GPIODirection = GPIODirection.OUTPUT,
        value: bool = False,
    ):
        self._path = path
        self._direction = direction
        self._value = value
        self._closed = False
        self.writes: List[bytes] = []
        self.reads = 0
        self.read_error: Optional[GpioIOError] = None

    # -------------------------------
    # Identity
    # -------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def direction(self) -> GPIODirection:
        return self._direction

    def fileno(self) -> int:
        return -1

    # -------------------------------
    # IO
    # -------------------------------

    @property
    def value(self) -> bool:
        return self._value

    def set_level(self, value: bool) -> None:
        """Simulate the pin level changing (button side)."""
        self._value = bool(value)

    def read_value(self) -> bool:
        if self.read_error is not None:
            raise self.read_error
        self.reads += 1
        return self._value

    def write_value(self, value: bool) -> None:
        buf = b"1" if value else b"0"
        self.writes.append(buf)
        self._value = bool(value)

    @property
    def written_levels(self) -> List[bool]:
        return [w == b"1" for w in self.writes]

    # -------------------------------
    # Lifecycle
    # -------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True
        log.debug("Mock GPIO line closed", path=self._path)
