"""Services layer"""

from .debounce import DebounceStateMachine
from .notifier import INotifier, SSHNotifier
from .notifier_mock import FakeNotifier
from .press_handler import IPressHandler, NotifyingPressHandler, TimedPressHandler, create_press_handler
from .event_loop import ButtonEventLoop

__all__ = [
    "DebounceStateMachine",
    "INotifier",
    "SSHNotifier",
    "FakeNotifier",
    "IPressHandler",
    "NotifyingPressHandler",
    "TimedPressHandler",
    "create_press_handler",
    "ButtonEventLoop",
]
