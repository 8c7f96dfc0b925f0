"""
Config Manager

Builds the immutable DaemonConfig from the process environment.

Environment (loaded from /etc/default/gpio by the init script):
- GPIO_ERROR, GPIO_ACTIVE, GPIO_BUTTON   GPIO names → /sys/class/gpio/<NAME>/value
- NOTIFY_USER, NOTIFY_HOST               remote target (BLOCKING policy only)
- TEAPOT_DEBOUNCE                        "blocking" (default) | "timestamp"
- TEAPOT_LOG_LEVEL                       DEBUG | INFO (default) | WARN | ERROR
- TEAPOT_NO_COLOR                        any non-empty value disables ANSI colors

Variables are checked in the order above; the first missing one is reported.
Nothing here opens a GPIO file.
"""

import os
from typing import Mapping, Optional
from hardware.gpio.gpio_paths import gpio_path, SYSFS_GPIO_ROOT
from models.config import DaemonConfig, NotificationRequest
from models.enums import DebouncePolicy, LogLevel
from models.errors import ConfigError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)

GPIO_VARIABLES = ("GPIO_ERROR", "GPIO_ACTIVE", "GPIO_BUTTON")
NOTIFY_VARIABLES = ("NOTIFY_USER", "NOTIFY_HOST")


class ConfigManager:
    """
    Environment-backed configuration loader

    Example:
        config = ConfigManager().load()
        config.button_path   # '/sys/class/gpio/gpio4/value'
        config.policy        # DebouncePolicy.BLOCKING
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, sysfs_root: str = SYSFS_GPIO_ROOT):
        """
        Args:
            environ: Environment mapping (defaults to os.environ)
            sysfs_root: Sysfs GPIO root directory
        """
        self.environ = os.environ if environ is None else environ
        self.sysfs_root = sysfs_root

    def load(self) -> DaemonConfig:
        """
        Resolve and validate everything the daemon needs.

        Raises:
            ConfigError: On the first missing or invalid variable
        """
        error_led, active_led, button = (
            gpio_path(var, self.environ, self.sysfs_root) for var in GPIO_VARIABLES
        )

        policy = self._policy()
        notification = self._notification() if policy == DebouncePolicy.BLOCKING else None

        config = DaemonConfig(
            error_led_path=error_led,
            active_led_path=active_led,
            button_path=button,
            policy=policy,
            notification=notification,
            log_level=self._log_level(),
            use_colors=not self.environ.get("TEAPOT_NO_COLOR"),
        )

        log.debug(
            "Configuration loaded",
            button=config.button_path,
            error_led=config.error_led_path,
            active_led=config.active_led_path,
            policy=config.policy.value,
        )
        return config

    # ---------------------------------------------------------------
    # Internals
    # ---------------------------------------------------------------

    def _require(self, variable: str) -> str:
        value = self.environ.get(variable)
        if not value:
            raise ConfigError(
                f"Could not find environment variable: {variable}",
                variable=variable,
            )
        return value

    def _notification(self) -> NotificationRequest:
        user, host = (self._require(var) for var in NOTIFY_VARIABLES)
        return NotificationRequest(host=host, user=user)

    def _policy(self) -> DebouncePolicy:
        raw = self.environ.get("TEAPOT_DEBOUNCE", DebouncePolicy.BLOCKING.value)
        try:
            return DebouncePolicy(raw.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in DebouncePolicy)
            raise ConfigError(
                f"Invalid TEAPOT_DEBOUNCE '{raw}' (expected one of: {valid})",
                variable="TEAPOT_DEBOUNCE",
            ) from None

    def _log_level(self) -> LogLevel:
        raw = self.environ.get("TEAPOT_LOG_LEVEL", LogLevel.INFO.name)
        try:
            return LogLevel[raw.strip().upper()]
        except KeyError:
            valid = ", ".join(level.name for level in LogLevel)
            raise ConfigError(
                f"Invalid TEAPOT_LOG_LEVEL '{raw}' (expected one of: {valid})",
                variable="TEAPOT_LOG_LEVEL",
            ) from None
