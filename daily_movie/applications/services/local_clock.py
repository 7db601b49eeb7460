from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from tzlocal import get_localzone


class LocalClock:
    """Wall clock of the device.

    `tz` defaults to the system's IANA zone, so offsets follow daylight saving
    changes for the whole life of the process.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or get_localzone()

    @classmethod
    def from_name(cls, name: Optional[str]) -> "LocalClock":
        return cls(ZoneInfo(name) if name else None)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()

    def at(self, hour: int, minute: int) -> time:
        return time(hour=hour, minute=minute, tzinfo=self.tz)

    def next_midnight(self, after: Optional[datetime] = None) -> datetime:
        current = after or self.now()
        tomorrow = current.date() + timedelta(days=1)
        return datetime.combine(tomorrow, time.min, tzinfo=current.tzinfo)
