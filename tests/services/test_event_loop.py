import pytest

from hardware.input import ScriptedEdgeWaiter, Wakeup
from models.config import NotificationRequest
from models.enums import DebouncePolicy, LoopState, WakeReason
from models.errors import GpioIOError, PollError
from services.debounce import DebounceStateMachine
from services.event_loop import ButtonEventLoop
from services.notifier_mock import FakeNotifier
from services.press_handler import NotifyingPressHandler, TimedPressHandler

REQUEST = NotificationRequest(host="desktop.lan", user="reuben")


class ListWaiter:
    """Returns canned wake-ups, then hangs up."""

    def __init__(self, *reasons):
        self._reasons = list(reasons)

    def wait(self):
        if not self._reasons:
            return Wakeup(WakeReason.INVALID, revents=16)
        return Wakeup(self._reasons.pop(0))


@pytest.fixture
def notifier():
    return FakeNotifier()


def blocking_loop(button_line, clock, script, active_led, error_led, notifier):
    handler = NotifyingPressHandler(active_led, error_led, notifier, REQUEST, sleep=clock.sleep)
    return ButtonEventLoop(
        button=button_line,
        waiter=ScriptedEdgeWaiter(button_line, clock, script),
        debouncer=DebounceStateMachine(DebouncePolicy.BLOCKING),
        press_handler=handler,
        clock=clock.now_ms,
    )


def timestamp_loop(button_line, clock, script, active_led, window_s=3.0):
    return ButtonEventLoop(
        button=button_line,
        waiter=ScriptedEdgeWaiter(button_line, clock, script),
        debouncer=DebounceStateMachine(DebouncePolicy.TIMESTAMP),
        press_handler=TimedPressHandler(active_led, window_s=window_s, sleep=clock.sleep),
        clock=clock.now_ms,
    )


# ---------------------------------------------------------------
# Termination
# ---------------------------------------------------------------

def test_hangup_terminates_with_poll_error(button_line, active_led):
    loop = ButtonEventLoop(
        button_line, ListWaiter(), DebounceStateMachine(DebouncePolicy.BLOCKING),
        TimedPressHandler(active_led, sleep=lambda s: None),
    )

    with pytest.raises(PollError) as exc:
        loop.run()

    assert loop.loop_state == LoopState.TERMINATED
    assert exc.value.revents == 16


def test_read_failure_is_fatal(button_line, active_led):
    button_line.read_error = GpioIOError("Reading GPIO line failed", "button")
    loop = ButtonEventLoop(
        button_line, ListWaiter(WakeReason.EDGE), DebounceStateMachine(DebouncePolicy.BLOCKING),
        TimedPressHandler(active_led, sleep=lambda s: None),
    )

    with pytest.raises(GpioIOError):
        loop.run()

    assert loop.loop_state == LoopState.TERMINATED


def test_spurious_wakeups_do_not_read(button_line, active_led):
    loop = ButtonEventLoop(
        button_line, ListWaiter(WakeReason.SPURIOUS, WakeReason.SPURIOUS),
        DebounceStateMachine(DebouncePolicy.BLOCKING),
        TimedPressHandler(active_led, sleep=lambda s: None),
    )

    with pytest.raises(PollError):
        loop.run()

    assert button_line.reads == 0


def test_step_reports_confirmed_press(button_line, clock, active_led, error_led, notifier):
    loop = blocking_loop(button_line, clock, [(0, 0), (5, 1)], active_led, error_led, notifier)

    assert loop.step() is False
    assert loop.step() is True
    assert loop.loop_state == LoopState.WAITING


# ---------------------------------------------------------------
# BLOCKING policy
# ---------------------------------------------------------------

def test_blocking_press_during_window_is_never_observed(
    button_line, clock, active_led, error_led, notifier
):
    script = [
        (0, 0),
        (5, 1),       # press → 3 s window until t=3005
        (1000, 0),    # released during window
        (2000, 1),    # pressed again during window: missed
        (4000, 0),
        (5000, 1),    # press → window until t=8000
    ]
    loop = blocking_loop(button_line, clock, script, active_led, error_led, notifier)

    with pytest.raises(PollError):
        loop.run()

    assert len(notifier.calls) == 2
    assert loop.state.presses == 2
    assert clock.now_ms() == 8000


def test_blocking_notifies_once_per_press(button_line, clock, active_led, error_led, notifier, active_line):
    loop = blocking_loop(
        button_line, clock, [(0, 1), (3500, 0), (7000, 1)], active_led, error_led, notifier
    )

    with pytest.raises(PollError):
        loop.run()

    assert notifier.calls == [("desktop.lan", "reuben")] * 2
    assert active_line.written_levels == [True, False, True, False]


def test_blocking_notifier_failure_keeps_loop_running(
    button_line, clock, active_led, error_led, notifier, error_line
):
    from models.errors import UnresolvableHostError
    notifier.error = UnresolvableHostError("desktop.lan", "unknown")
    loop = blocking_loop(
        button_line, clock, [(0, 1), (3500, 0), (7000, 1)], active_led, error_led, notifier
    )

    with pytest.raises(PollError):
        loop.run()

    assert error_line.written_levels == [True, True]
    assert loop.state.presses == 2


# ---------------------------------------------------------------
# TIMESTAMP policy
# ---------------------------------------------------------------

def test_timestamp_scenario(button_line, clock, active_led):
    loop = timestamp_loop(button_line, clock, [(0, 0), (5, 1), (10, 0), (500, 1)], active_led)

    with pytest.raises(PollError):
        loop.run()

    assert loop.state.presses == 1
    assert loop.state.last_transition_ms == 5


def test_timestamp_window_applies_without_blocking(button_line, clock, active_led, active_line):
    script = [(0, 0), (5, 1), (10, 0), (500, 1), (600, 0), (1006, 1)]
    loop = timestamp_loop(button_line, clock, script, active_led, window_s=0)

    with pytest.raises(PollError):
        loop.run()

    # 500 is inside the window of 5; 1006 is 1001 ms after it
    assert loop.state.presses == 2
    assert loop.state.last_transition_ms == 1006
    assert active_line.written_levels == [True, False, True, False]
