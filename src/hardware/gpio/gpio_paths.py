"""
Sysfs path resolution for GPIO lines named by environment variables.

The init script exports e.g. GPIO_BUTTON=gpio4; the daemon turns that into
/sys/class/gpio/gpio4/value and checks the file is there.
"""

import os
from typing import Mapping
from models.errors import ConfigError

SYSFS_GPIO_ROOT = "/sys/class/gpio"


def sysfs_value_path(name: str, root: str = SYSFS_GPIO_ROOT) -> str:
    """Build the value file path for a GPIO name (no validation)."""
    return os.path.join(root, name, "value")


def gpio_path(envvar: str, environ: Mapping[str, str], root: str = SYSFS_GPIO_ROOT) -> str:
    """
    Find the sysfs path for a GPIO, as defined by an environment variable.

    The value file is read-write regardless of the pin direction, so
    read+write access is required for every line.

    Args:
        envvar: Environment variable holding the GPIO name (e.g. GPIO_BUTTON)
        environ: Environment mapping to look the variable up in
        root: Sysfs GPIO root directory

    Returns:
        Path to the existing value file

    Raises:
        ConfigError: If the variable is missing/empty or the file is not accessible
    """
    name = environ.get(envvar)
    if not name:
        raise ConfigError(
            f"Could not find environment variable: {envvar}",
            variable=envvar,
        )

    path = sysfs_value_path(name, root)

    if not os.access(path, os.R_OK | os.W_OK):
        raise ConfigError(
            f"GPIO value file not accessible for {envvar}: {path}",
            variable=envvar,
            path=path,
        )

    return path
