"""
Daemon Configuration Models

Pure data models populated once at startup by ConfigManager.
They contain:
- no environment access
- no filesystem access

Everything here is immutable for the process lifetime.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from models.enums import DebouncePolicy, LogLevel


# ============================================================
#  Notification
# ============================================================

@dataclass(frozen=True)
class NotificationRequest:
    """Remote target for the press notification."""
    host: str
    user: str

    @property
    def target(self) -> str:
        return f"{self.user}@{self.host}"


# ============================================================
#  Timing
# ============================================================

@dataclass(frozen=True)
class DaemonTiming:
    """
    Timing constants (milliseconds).

    active_window_ms:   how long the active LED stays lit after a press
    debounce_window_ms: minimum gap between accepted presses (TIMESTAMP policy)
    """
    active_window_ms: int = 3000
    debounce_window_ms: int = 1000

    def __post_init__(self):
        if self.active_window_ms < 0 or self.debounce_window_ms < 0:
            raise ValueError("Timing values must be non-negative")

    @property
    def active_window_s(self) -> float:
        return self.active_window_ms / 1000.0


# ============================================================
#  Daemon
# ============================================================

@dataclass(frozen=True)
class DaemonConfig:
    """Everything the daemon needs, resolved from the environment."""
    error_led_path: str
    active_led_path: str
    button_path: str
    policy: DebouncePolicy = DebouncePolicy.BLOCKING
    notification: Optional[NotificationRequest] = None
    timing: DaemonTiming = field(default_factory=DaemonTiming)
    log_level: LogLevel = LogLevel.INFO
    use_colors: bool = True

    def __post_init__(self):
        if self.policy == DebouncePolicy.BLOCKING and self.notification is None:
            raise ValueError("BLOCKING policy requires a notification target")
