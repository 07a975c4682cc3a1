"""Clock abstractions for resolving the local calendar date."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current time and local date key."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""

    def today(self) -> str:
        """Return the current local date as YYYY-MM-DD."""


@dataclass
class SystemClock(Clock):
    """Wall-clock time in the device zone, or a configured IANA zone."""

    timezone_name: str | None = None

    def now(self) -> datetime:
        """Return the current time in the configured zone."""
        if self.timezone_name:
            return datetime.now(tz=ZoneInfo(self.timezone_name))
        return datetime.now().astimezone()

    def today(self) -> str:
        """Return today's date key in the configured zone."""
        return self.now().date().isoformat()
