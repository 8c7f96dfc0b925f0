from hardware.gpio.gpio_line_interface import IGPIOLine
from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.LIFECYCLE)


class GPIOShutdownHandler(IShutdownHandler):
    """
    Closes the button line descriptor.

    Priority: 10 (shutdown last)
    """

    def __init__(self, button: IGPIOLine):
        self.button = button

    @property
    def shutdown_priority(self) -> int:
        return 10

    def shutdown(self) -> None:
        log.debug("Closing button line", path=self.button.path)
        self.button.close()
