"""
Report Date Range
=================

Normalisasi start_date / end_date mentah menjadi window created_at yang
inclusive dan selaras dengan batas hari.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import List, Optional

from ..exceptions import InvalidDateError


@dataclass(frozen=True)
class Interval:
    """Window created_at. None di salah satu sisi berarti tidak dibatasi."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None or self.end is not None

    def contains(self, timestamp: datetime) -> bool:
        if self.start is not None and timestamp < self.start:
            return False
        if self.end is not None and timestamp > self.end:
            return False
        return True

    def conditions(self, column) -> List:
        """SQL filter clauses untuk kolom timestamp; kosong jika unbounded"""
        clauses = []
        if self.start is not None and self.end is not None:
            clauses.append(column.between(self.start, self.end))
        elif self.start is not None:
            clauses.append(column >= self.start)
        elif self.end is not None:
            clauses.append(column <= self.end)
        return clauses


UNBOUNDED = Interval()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def parse_date(value: str, field: str) -> date:
    """
    Parse tanggal kalender. Menerima 'YYYY-MM-DD' atau ISO datetime
    (bagian jam diabaikan).
    """
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDateError(field, value) from None


def resolve(start_raw: Optional[str], end_raw: Optional[str]) -> Interval:
    """Resolve raw query values into an inclusive, day-aligned Interval"""
    start = start_of_day(parse_date(start_raw, 'start_date')) if start_raw else None
    end = end_of_day(parse_date(end_raw, 'end_date')) if end_raw else None
    return Interval(start=start, end=end)
