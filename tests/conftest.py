import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hardware.gpio import MockGPIOLine
from hardware.output.led import StatusLED
from models.enums import GPIODirection, LEDRole, LogLevel
from utils.clock import ManualClock
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def plain_logger():
    """Colorless DEBUG output so assertions on captured text are simple."""
    configure_logger(LogLevel.DEBUG, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def button_line():
    return MockGPIOLine("button", GPIODirection.INPUT)


@pytest.fixture
def active_line():
    return MockGPIOLine("active", GPIODirection.OUTPUT)


@pytest.fixture
def error_line():
    return MockGPIOLine("error", GPIODirection.OUTPUT)


@pytest.fixture
def active_led(active_line):
    return StatusLED(active_line, LEDRole.ACTIVE)


@pytest.fixture
def error_led(error_line):
    return StatusLED(error_line, LEDRole.ERROR)


@pytest.fixture
def sysfs(tmp_path):
    """
    Fake /sys/class/gpio with gpio4 (button), gpio17 (error), gpio27 (active).
    Returns the root directory.
    """
    for name, content in (("gpio4", "0\n"), ("gpio17", "1\n"), ("gpio27", "0\n")):
        (tmp_path / name).mkdir()
        (tmp_path / name / "value").write_text(content)
    return tmp_path


@pytest.fixture
def gpio_env():
    return {
        "GPIO_BUTTON": "gpio4",
        "GPIO_ERROR": "gpio17",
        "GPIO_ACTIVE": "gpio27",
        "NOTIFY_USER": "reuben",
        "NOTIFY_HOST": "desktop.lan",
    }
