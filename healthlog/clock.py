"""
Clock abstraction so "today" and the local hour can be fixed in tests.
"""
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo


class Clock:
    """Wall clock in the application's configured timezone."""

    def __init__(self, timezone='Asia/Tokyo'):
        self.tz = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()

    def hour(self) -> int:
        return self.now().hour


class FixedClock(Clock):
    """Clock pinned to a single instant. Use advance() to move it."""

    def __init__(self, instant: datetime, timezone='Asia/Tokyo'):
        super().__init__(timezone)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=self.tz)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, days=0, hours=0):
        self.instant = self.instant + timedelta(days=days, hours=hours)
