"""
Sysfs GPIO Line - Hardware Abstraction Layer (Layer 1)

Access to a single GPIO pin through its sysfs pseudo-file
(/sys/class/gpio/<NAME>/value).

Pseudo-file rules:
- Content is an ASCII integer ("0"/"1", possibly newline terminated)
- Once read to EOF the descriptor reports an error-like poll status,
  so every read seeks back to offset 0 first
- Writing b"0"/b"1" sets the output level
"""

import os
from typing import Optional
from hardware.gpio.gpio_line_interface import IGPIOLine
from models.enums import GPIODirection
from models.errors import GpioIOError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)

# "0\n" / "1\n" with room to spare
READ_BUFFER_SIZE = 4


class SysfsGPIOLine(IGPIOLine):
    """
    One sysfs GPIO line.

    INPUT lines keep a read-only descriptor open for the process lifetime;
    it is also the descriptor the edge waiter polls.
    OUTPUT lines are checked for write access up front and opened per write,
    so a transient failure on one LED write does not poison the next one.

    Args:
        path: Path to the sysfs value file
        direction: INPUT (button) or OUTPUT (LED)

    Example:
        button = SysfsGPIOLine.open("/sys/class/gpio/gpio4/value", GPIODirection.INPUT)
        pressed = button.read_value()
    """

    def __init__(self, path: str, direction: GPIODirection, fd: Optional[int] = None):
        self._path = path
        self._direction = direction
        self._fd = fd

    @classmethod
    def open(cls, path: str, direction: GPIODirection) -> 'SysfsGPIOLine':
        """
        Open a line for the requested direction.

        Raises:
            GpioIOError: If the path cannot be opened for that direction
        """
        if direction == GPIODirection.INPUT:
            try:
                fd = os.open(path, os.O_RDONLY)
            except OSError as e:
                raise GpioIOError("Unable to open GPIO line for reading", path, e) from e
            log.debug("GPIO line opened (INPUT)", path=path, fd=fd)
            return cls(path, direction, fd)

        if not os.access(path, os.W_OK):
            raise GpioIOError("GPIO line is not writable", path)
        log.debug("GPIO line opened (OUTPUT)", path=path)
        return cls(path, direction)

    # ---------------------------------------------------------------
    # Identity
    # ---------------------------------------------------------------

    @property
    def path(self) -> str:
        return self._path

    @property
    def direction(self) -> GPIODirection:
        return self._direction

    def fileno(self) -> int:
        if self._fd is None:
            raise GpioIOError("GPIO line has no open descriptor", self._path)
        return self._fd

    # ---------------------------------------------------------------
    # IO
    # ---------------------------------------------------------------

    def read_value(self) -> bool:
        """
        Read the full current content from offset 0.

        Returns:
            True if the content parses to a nonzero integer

        Raises:
            GpioIOError: On seek, read or parse failure
        """
        fd = self.fileno()

        try:
            os.lseek(fd, 0, os.SEEK_SET)
        except OSError as e:
            raise GpioIOError("Seeking GPIO line failed", self._path, e) from e

        try:
            raw = os.read(fd, READ_BUFFER_SIZE)
        except OSError as e:
            raise GpioIOError("Reading GPIO line failed", self._path, e) from e

        try:
            return int(raw.decode("ascii").strip()) != 0
        except (UnicodeDecodeError, ValueError) as e:
            raise GpioIOError(f"Unparseable GPIO value {raw!r}", self._path, e) from e

    def write_value(self, value: bool) -> None:
        """
        Write b"1" or b"0", one byte, no trailing data.

        Interrupted and zero-length writes are retried. Any other failure
        is logged and swallowed.
        """
        buf = b"1" if value else b"0"

        try:
            fd = os.open(self._path, os.O_WRONLY)
        except OSError as e:
            log.error("Setting GPIO line failed - open()", path=self._path, error=e)
            return

        try:
            while True:
                try:
                    if os.write(fd, buf) == 1:
                        break
                except InterruptedError:
                    continue
        except OSError as e:
            log.error("Setting GPIO line failed - write()", path=self._path, error=e)
        finally:
            try:
                os.close(fd)
            except OSError as e:
                log.error("Setting GPIO line failed - close()", path=self._path, error=e)

    # ---------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------

    def close(self) -> None:
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        os.close(fd)
        log.debug("GPIO line closed", path=self._path)

    def __repr__(self) -> str:
        return f"<SysfsGPIOLine {self._direction.name} path={self._path}>"
