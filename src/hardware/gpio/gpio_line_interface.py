from typing import Protocol
from models.enums import GPIODirection

class IGPIOLine(Protocol):

    # -------------------------------
    # Identity
    # -------------------------------

    @property
    def path(self) -> str:
        ...

    @property
    def direction(self) -> GPIODirection:
        ...


    # -------------------------------
    # IO
    # -------------------------------

    def read_value(self) -> bool:
        """Read current level from offset 0 (True = nonzero)"""
        ...

    def write_value(self, value: bool) -> None:
        """Write '1' or '0' as a single byte; failures are logged, not raised"""
        ...

    def fileno(self) -> int:
        """Descriptor to wait on for edge notifications (input lines)"""
        ...


    # -------------------------------
    # Lifecycle
    # -------------------------------

    def close(self) -> None:
        ...
