"""
Edge Waiter - Hardware Abstraction Layer (Layer 1)

Blocks until the button's sysfs value file signals a level change.

Sysfs reports an edge as urgent/priority data (POLLPRI). It also raises
POLLERR whenever the file has been read to EOF, which is why the line is
re-read from offset 0 on every wake-up and why error-only readiness is
treated as spurious rather than fatal.
"""

import select
from dataclasses import dataclass
from typing import Protocol
from hardware.gpio.gpio_line_interface import IGPIOLine
from models.enums import WakeReason
from models.errors import PollError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


@dataclass(frozen=True)
class Wakeup:
    """Result of one wait: why we woke up plus the raw readiness bits."""
    reason: WakeReason
    revents: int = 0


class IEdgeWaiter(Protocol):

    def wait(self) -> Wakeup:
        """Block until the next readiness notification"""
        ...


class PollEdgeWaiter(IEdgeWaiter):
    """
    Edge waiter backed by select.poll().

    Args:
        line: Input line whose descriptor supports POLLPRI edge notification

    Example:
        waiter = PollEdgeWaiter(button_line)
        while True:
            wakeup = waiter.wait()
            if wakeup.reason == WakeReason.EDGE:
                value = button_line.read_value()
    """

    def __init__(self, line: IGPIOLine):
        self._line = line
        self._poller = select.poll()
        self._poller.register(line.fileno(), select.POLLPRI | select.POLLERR)

        log.debug("Edge waiter registered", path=line.path, fd=line.fileno())

    def wait(self) -> Wakeup:
        """
        Block indefinitely for the next notification.

        Returns:
            Wakeup with EDGE, INVALID or SPURIOUS reason

        Raises:
            PollError: If poll() itself fails
        """
        try:
            events = self._poller.poll()
        except OSError as e:
            raise PollError(f"Polling {self._line.path} failed: {e}") from e

        revents = 0
        for _fd, mask in events:
            revents |= mask

        if revents & (select.POLLNVAL | select.POLLHUP):
            return Wakeup(WakeReason.INVALID, revents)

        if revents & select.POLLPRI:
            return Wakeup(WakeReason.EDGE, revents)

        return Wakeup(WakeReason.SPURIOUS, revents)
