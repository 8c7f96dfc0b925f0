"""
Debounce State Machine

Decides, for each observed button level, whether it is a genuine new press.

Only rising edges (released → pressed) can be presses. What else must hold
depends on the policy:

- BLOCKING:  nothing. The press handler sleeps through the cooldown on the
             loop thread, so the loop cannot see another edge until it is over.
- TIMESTAMP: the gap since the last accepted press must be strictly greater
             than the debounce window (1000 ms by default).

The observed level is always recorded, accepted or not, so every reading
feeds the next transition.
"""

from models.enums import DebouncePolicy
from models.state import DaemonState
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.BUTTON)

DEFAULT_DEBOUNCE_WINDOW_MS = 1000


class DebounceStateMachine:
    """
    Stateless decision logic; the state lives in DaemonState.

    Args:
        policy: Active debounce policy
        window_ms: Minimum gap between accepted presses (TIMESTAMP only)

    Example:
        debouncer = DebounceStateMachine(DebouncePolicy.TIMESTAMP)
        state = DaemonState()
        debouncer.observe(state, True, now_ms=5)    # True
        debouncer.observe(state, False, now_ms=10)  # False
        debouncer.observe(state, True, now_ms=500)  # False, inside window
    """

    def __init__(self, policy: DebouncePolicy, window_ms: int = DEFAULT_DEBOUNCE_WINDOW_MS):
        self.policy = policy
        self.window_ms = window_ms

    def observe(self, state: DaemonState, new_value: bool, now_ms: int) -> bool:
        """
        Feed one reading into the state machine.

        Args:
            state: Loop-owned state, updated in place
            new_value: Level just read (True = pressed)
            now_ms: Monotonic time of the reading

        Returns:
            True if this reading is a confirmed press
        """
        new_value = bool(new_value)
        rising = new_value and not state.last_value
        confirmed = False

        if rising:
            if self._cooldown_elapsed(state, now_ms):
                confirmed = True
                if self.policy == DebouncePolicy.TIMESTAMP:
                    state.last_transition_ms = now_ms
            else:
                log.debug(
                    "Rising edge inside debounce window, ignored",
                    at_ms=now_ms,
                    last_ms=state.last_transition_ms,
                )

        state.last_value = new_value
        state.readings += 1
        if confirmed:
            state.presses += 1

        return confirmed

    def _cooldown_elapsed(self, state: DaemonState, now_ms: int) -> bool:
        if self.policy == DebouncePolicy.BLOCKING:
            return True
        if state.last_transition_ms is None:
            return True
        return now_ms - state.last_transition_ms > self.window_ms

    def __repr__(self) -> str:
        return f"<DebounceStateMachine policy={self.policy.value} window={self.window_ms}ms>"
