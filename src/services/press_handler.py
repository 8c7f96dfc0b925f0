"""
Press handlers - side effects of a confirmed press

Both handlers run synchronously on the loop thread and block it for the
whole active window. For the BLOCKING policy that is the debounce itself:
no edge can be observed until the handler returns, and no two
notifications can overlap.
"""

import time
from typing import Callable, Optional, Protocol
from hardware.output.led import StatusLED
from models.config import DaemonConfig, NotificationRequest
from models.enums import DebouncePolicy
from models.errors import NotifyError
from services.notifier import INotifier
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.BUTTON)

DEFAULT_ACTIVE_WINDOW_S = 3.0


class IPressHandler(Protocol):

    def handle(self) -> None:
        ...


class NotifyingPressHandler(IPressHandler):
    """
    BLOCKING policy: light the active LED, notify the remote host, show the
    outcome on the error LED, hold for the active window, then go dark.
    """

    def __init__(
        self,
        active_led: StatusLED,
        error_led: StatusLED,
        notifier: INotifier,
        request: NotificationRequest,
        window_s: float = DEFAULT_ACTIVE_WINDOW_S,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.active_led = active_led
        self.error_led = error_led
        self.notifier = notifier
        self.request = request
        self.window_s = window_s
        self._sleep = sleep
        self.last_error: Optional[NotifyError] = None

    def handle(self) -> None:
        self.active_led.on()

        try:
            self.notifier.notify(self.request.host, self.request.user)
            self.last_error = None
        except NotifyError as e:
            log.warn("Notification failed", target=self.request.target, code=e.code, reason=e.message)
            self.last_error = e

        self.error_led.set(self.last_error is not None)

        self._sleep(self.window_s)
        self.active_led.off()


class TimedPressHandler(IPressHandler):
    """TIMESTAMP policy: active LED on for the active window, no notification."""

    def __init__(
        self,
        active_led: StatusLED,
        window_s: float = DEFAULT_ACTIVE_WINDOW_S,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.active_led = active_led
        self.window_s = window_s
        self._sleep = sleep

    def handle(self) -> None:
        self.active_led.on()
        self._sleep(self.window_s)
        self.active_led.off()


def create_press_handler(
    config: DaemonConfig,
    active_led: StatusLED,
    error_led: StatusLED,
    notifier: INotifier,
    sleep: Callable[[float], None] = time.sleep,
) -> IPressHandler:
    """Pick the press handler matching the configured debounce policy."""
    window_s = config.timing.active_window_s

    if config.policy == DebouncePolicy.BLOCKING:
        return NotifyingPressHandler(
            active_led=active_led,
            error_led=error_led,
            notifier=notifier,
            request=config.notification,
            window_s=window_s,
            sleep=sleep,
        )

    return TimedPressHandler(active_led=active_led, window_s=window_s, sleep=sleep)
