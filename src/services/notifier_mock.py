from typing import List, Optional, Tuple
from models.errors import NotifyError
from services.notifier import INotifier


class FakeNotifier(INotifier):
    """
    Records every notify() call and fails with a configured error.

    Set `error` to a NotifyError instance to make subsequent calls fail,
    or back to None to make them succeed.
    """

    def __init__(self, error: Optional[NotifyError] = None):
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    def notify(self, host: str, user: str) -> None:
        self.calls.append((host, user))
        if self.error is not None:
            raise self.error
