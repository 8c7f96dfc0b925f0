"""
Button Event Loop

    WAITING ──edge──▶ PROCESSING ──▶ WAITING
       │                  │
       └──invalid/error───┴──▶ TERMINATED

WAITING blocks on the button descriptor with no timeout. PROCESSING reads
the level from offset 0, hands it to the debounce state machine together
with the current monotonic time, and runs the press handler when a press is
confirmed. Device errors are unrecoverable: the loop terminates and the
error propagates to the caller.
"""

from typing import Callable, Optional
from hardware.gpio.gpio_line_interface import IGPIOLine
from hardware.input.edge_waiter import IEdgeWaiter
from models.enums import LoopState, WakeReason
from models.errors import DaemonError, PollError
from models.state import DaemonState
from services.debounce import DebounceStateMachine
from services.press_handler import IPressHandler
from utils.clock import monotonic_ms
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.BUTTON)


class ButtonEventLoop:
    """
    Single-threaded loop driving the button state machine.

    Args:
        button: Input line for the button
        waiter: Edge waiter registered on the button's descriptor
        debouncer: Debounce decision logic
        press_handler: Side effects of a confirmed press
        clock: Monotonic clock in milliseconds
        state: Initial state (fresh DaemonState if omitted)

    Example:
        loop = ButtonEventLoop(button, PollEdgeWaiter(button), debouncer, handler)
        loop.run()  # only returns by raising
    """

    def __init__(
        self,
        button: IGPIOLine,
        waiter: IEdgeWaiter,
        debouncer: DebounceStateMachine,
        press_handler: IPressHandler,
        clock: Callable[[], int] = monotonic_ms,
        state: Optional[DaemonState] = None,
    ):
        self.button = button
        self.waiter = waiter
        self.debouncer = debouncer
        self.press_handler = press_handler
        self._clock = clock
        self.state = state or DaemonState()
        self.loop_state = LoopState.WAITING

    def step(self) -> bool:
        """
        One WAITING → (PROCESSING) → WAITING pass.

        Returns:
            True if a press was confirmed during this pass

        Raises:
            PollError: Descriptor invalid/hung up, or waiting failed
            GpioIOError: Reading the button failed
        """
        self.loop_state = LoopState.WAITING
        wakeup = self.waiter.wait()

        if wakeup.reason == WakeReason.INVALID:
            raise PollError(
                f"Button descriptor became unusable ({self.button.path})",
                revents=wakeup.revents,
            )

        if wakeup.reason != WakeReason.EDGE:
            log.debug("Spurious wake-up ignored", revents=wakeup.revents)
            return False

        self.loop_state = LoopState.PROCESSING
        value = self.button.read_value()
        now_ms = self._clock()

        pressed = self.debouncer.observe(self.state, value, now_ms)
        if pressed:
            log.info("Button press confirmed", at_ms=now_ms, presses=self.state.presses)
            self.press_handler.handle()
        else:
            log.debug("Button level observed", value=int(value), at_ms=now_ms)

        self.loop_state = LoopState.WAITING
        return pressed

    def run(self) -> None:
        """
        Run until a fatal error.

        The loop has no normal exit: it always ends by raising the error
        that terminated it.
        """
        log.info("Waiting for button presses", path=self.button.path, policy=self.debouncer.policy.value)

        try:
            while True:
                self.step()
        except DaemonError as e:
            self.loop_state = LoopState.TERMINATED
            log.error("Event loop terminated", code=e.code, reason=e.message)
            raise
