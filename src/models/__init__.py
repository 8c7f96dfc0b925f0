"""
Models package - Data models for the button daemon
"""

from .enums import DebouncePolicy, GPIODirection, LEDRole, LogLevel, LogCategory, LoopState, WakeReason
from .config import DaemonConfig, DaemonTiming, NotificationRequest
from .state import DaemonState

__all__ = [
    'DebouncePolicy',
    'GPIODirection',
    'LEDRole',
    'LogLevel',
    'LogCategory',
    'LoopState',
    'WakeReason',
    'DaemonConfig',
    'DaemonTiming',
    'NotificationRequest',
    'DaemonState',
]
