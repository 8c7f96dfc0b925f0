from .led import StatusLED

__all__ = [
    "StatusLED",
]
