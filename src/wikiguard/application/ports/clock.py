"""Clock port - source of the current time for lease arithmetic."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Port for reading the current timezone-aware time."""

    def now(self) -> datetime: ...
