from .gpio_line_interface import IGPIOLine
from .gpio_line_sysfs import SysfsGPIOLine
from .gpio_line_mock import MockGPIOLine
from .gpio_paths import gpio_path, sysfs_value_path, SYSFS_GPIO_ROOT


__all__ = [
    "IGPIOLine",
    "SysfsGPIOLine",
    "MockGPIOLine",
    "gpio_path",
    "sysfs_value_path",
    "SYSFS_GPIO_ROOT",
]
