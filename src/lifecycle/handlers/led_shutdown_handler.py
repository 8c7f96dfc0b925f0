from hardware.output.led import StatusLED
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)


class LEDShutdownHandler(IShutdownHandler):
    """
    Switches the active LED off so it is not left lit when the daemon is
    stopped in the middle of an active window.

    The error LED is left alone: it still describes the last notification.

    Priority: 100 (runs first)
    """

    def __init__(self, active_led: StatusLED):
        self.active_led = active_led

    @property
    def shutdown_priority(self) -> int:
        return 100

    def shutdown(self) -> None:
        log.debug("Switching active LED off")
        self.active_led.off()
