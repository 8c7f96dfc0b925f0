"""
Enums for the button daemon state machine
"""

from enum import Enum, auto


class GPIODirection(Enum):
    """Logical direction of a sysfs GPIO line"""
    INPUT = auto()    # Button (read + polled)
    OUTPUT = auto()   # LEDs (written)


class DebouncePolicy(Enum):
    """
    Debounce policy for the button

    BLOCKING: Cooldown by blocking. The press handler sleeps through the
              active window, so the loop cannot observe presses meanwhile.
              Each confirmed press also notifies the remote host.
    TIMESTAMP: Cooldown by timestamp. A rising edge within the debounce
               window of the last accepted press is ignored.
    """
    BLOCKING = "blocking"
    TIMESTAMP = "timestamp"


class LoopState(Enum):
    """Event loop states"""
    WAITING = auto()
    PROCESSING = auto()
    TERMINATED = auto()


class WakeReason(Enum):
    """Why the edge waiter returned"""
    EDGE = auto()       # Urgent data: level changed
    INVALID = auto()    # Descriptor invalid or hung up
    SPURIOUS = auto()   # Anything else (e.g. error-only readiness)


class LEDRole(Enum):
    """Status LED identifiers"""
    ERROR = auto()
    ACTIVE = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Environment loading, validation
    HARDWARE = auto()    # GPIO lines, edge waiting
    BUTTON = auto()      # Debounce decisions, presses
    LED = auto()         # Status LED writes
    NOTIFY = auto()      # Remote notification
    SYSTEM = auto()      # Startup, fatal errors
    LIFECYCLE = auto()   # Daemonize, signals, exit
