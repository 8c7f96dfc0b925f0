"""
Runtime button state, owned by the event loop.

Lives only in process memory; nothing is persisted across restarts.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class DaemonState:
    """
    Mutable state threaded through the debounce state machine.

    Attributes:
        last_value: Last observed button level (True = pressed)
        last_transition_ms: Monotonic time of the last accepted press,
            None until the first one (TIMESTAMP policy only)
        presses: Number of confirmed presses so far
        readings: Number of button readings processed so far
    """
    last_value: bool = False
    last_transition_ms: Optional[int] = None
    presses: int = 0
    readings: int = 0
