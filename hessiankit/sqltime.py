"""java.sql.Date and java.sql.Time values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TypeVar

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)

_T = TypeVar("_T", bound="_SqlTemporal")


@dataclass
class _SqlTemporal:
    time: datetime = field(default=_ZERO_TIME)

    @property
    def millis(self) -> int:
        """Milliseconds since the Unix epoch; naive times are taken as local."""
        moment = self.time if self.time.tzinfo is not None else self.time.astimezone()
        return (moment - _EPOCH) // _MILLISECOND

    @classmethod
    def from_millis(cls: type[_T], millis: int) -> _T:
        """Build a value from milliseconds since the Unix epoch, in UTC."""
        return cls(_EPOCH + timedelta(milliseconds=millis))


@dataclass
class SqlDate(_SqlTemporal):
    """A ``java.sql.Date``."""

    def java_class_name(self) -> str:
        """Return the fully qualified Java class name."""
        return "java.sql.Date"

    def value_of(self, date_str: str) -> None:
        """Set the value from a ``YYYY-MM-DD`` string, at midnight UTC."""
        self.time = datetime.strptime(date_str, "%Y-%m-%d").replace(tzinfo=timezone.utc)

    @property
    def year(self) -> int:
        return self.time.year

    @property
    def month(self) -> int:
        return self.time.month

    @property
    def day(self) -> int:
        return self.time.day


@dataclass
class SqlTime(_SqlTemporal):
    """A ``java.sql.Time``."""

    def java_class_name(self) -> str:
        """Return the fully qualified Java class name."""
        return "java.sql.Time"

    def value_of(self, time_str: str) -> None:
        """Set the value from an ``HH:MM:SS`` string, on day 0001-01-01 UTC."""
        parsed = datetime.strptime(time_str, "%H:%M:%S")
        self.time = _ZERO_TIME.replace(
            hour=parsed.hour, minute=parsed.minute, second=parsed.second
        )

    @property
    def hour(self) -> int:
        return self.time.hour

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def second(self) -> int:
        return self.time.second