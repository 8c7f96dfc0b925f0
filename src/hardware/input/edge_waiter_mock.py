from collections import deque
from typing import Iterable, Tuple
from hardware.gpio.gpio_line_mock import MockGPIOLine
from hardware.input.edge_waiter import IEdgeWaiter, Wakeup
from models.enums import WakeReason
from utils.clock import ManualClock


class ScriptedEdgeWaiter(IEdgeWaiter):
    """
    Replays a script of (at_ms, level) button changes against a mock line.

    Behaves like the sysfs file: changes that happen while nobody is waiting
    (e.g. during a blocking press handler) collapse into a single pending
    notification, and the read that follows only sees the latest level.
    When the script runs out the descriptor reports a hang-up, which ends
    the event loop.

    Example:
        clock = ManualClock()
        button = MockGPIOLine("button", GPIODirection.INPUT)
        waiter = ScriptedEdgeWaiter(button, clock, [(0, 0), (5, 1)])
    """

    def __init__(
        self,
        line: MockGPIOLine,
        clock: ManualClock,
        script: Iterable[Tuple[int, int]],
    ):
        self._line = line
        self._clock = clock
        self._script = deque(sorted(script, key=lambda step: step[0]))
        self.wakeups = 0

    @property
    def remaining(self) -> int:
        return len(self._script)

    def wait(self) -> Wakeup:
        now = self._clock.now_ms()

        # Changes that happened while the loop was busy
        missed = False
        while self._script and self._script[0][0] <= now:
            _at, level = self._script.popleft()
            self._line.set_level(bool(level))
            missed = True

        if missed:
            self.wakeups += 1
            return Wakeup(WakeReason.EDGE)

        if not self._script:
            return Wakeup(WakeReason.INVALID)

        at_ms, level = self._script.popleft()
        self._clock.advance_to(at_ms)
        self._line.set_level(bool(level))
        self.wakeups += 1
        return Wakeup(WakeReason.EDGE)
