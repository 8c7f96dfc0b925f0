import os
import pytest

from managers import ConfigManager
from models.enums import DebouncePolicy, LogLevel
from models.errors import ConfigError


def load(env, sysfs):
    return ConfigManager(env, sysfs_root=str(sysfs)).load()


def test_load_blocking_defaults(gpio_env, sysfs):
    config = load(gpio_env, sysfs)

    assert config.button_path == os.path.join(str(sysfs), "gpio4", "value")
    assert config.error_led_path == os.path.join(str(sysfs), "gpio17", "value")
    assert config.active_led_path == os.path.join(str(sysfs), "gpio27", "value")
    assert config.policy == DebouncePolicy.BLOCKING
    assert config.notification.host == "desktop.lan"
    assert config.notification.user == "reuben"
    assert config.timing.active_window_ms == 3000
    assert config.timing.debounce_window_ms == 1000
    assert config.log_level == LogLevel.INFO
    assert config.use_colors is True


@pytest.mark.parametrize("variable", ["GPIO_ERROR", "GPIO_ACTIVE", "GPIO_BUTTON", "NOTIFY_USER", "NOTIFY_HOST"])
def test_missing_required_variable_is_named(gpio_env, sysfs, variable):
    del gpio_env[variable]

    with pytest.raises(ConfigError) as exc:
        load(gpio_env, sysfs)

    assert exc.value.variable == variable
    assert variable in exc.value.message


def test_first_missing_variable_is_reported(sysfs):
    with pytest.raises(ConfigError) as exc:
        load({}, sysfs)

    assert exc.value.variable == "GPIO_ERROR"


def test_timestamp_policy_does_not_need_notify_vars(gpio_env, sysfs):
    del gpio_env["NOTIFY_USER"]
    del gpio_env["NOTIFY_HOST"]
    gpio_env["TEAPOT_DEBOUNCE"] = "Timestamp"

    config = load(gpio_env, sysfs)

    assert config.policy == DebouncePolicy.TIMESTAMP
    assert config.notification is None


def test_invalid_policy_raises(gpio_env, sysfs):
    gpio_env["TEAPOT_DEBOUNCE"] = "sometimes"

    with pytest.raises(ConfigError) as exc:
        load(gpio_env, sysfs)

    assert exc.value.variable == "TEAPOT_DEBOUNCE"


def test_log_level_and_colors(gpio_env, sysfs):
    gpio_env["TEAPOT_LOG_LEVEL"] = "debug"
    gpio_env["TEAPOT_NO_COLOR"] = "1"

    config = load(gpio_env, sysfs)

    assert config.log_level == LogLevel.DEBUG
    assert config.use_colors is False


def test_invalid_log_level_raises(gpio_env, sysfs):
    gpio_env["TEAPOT_LOG_LEVEL"] = "LOUD"

    with pytest.raises(ConfigError):
        load(gpio_env, sysfs)


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("GPIO_ERROR", "gpio17")

    assert ConfigManager().environ["GPIO_ERROR"] == "gpio17"
