"""
Quarterly reporting periods and the IFTA filing calendar.

IFTA returns are filed quarterly and are due on the last day of the month
following the end of the quarter (Apr 30, Jul 31, Oct 31, Jan 31).
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

_PERIOD_LABEL = re.compile(r"^\s*Q([1-4])[\s\-/]*(\d{4})\s*$", re.IGNORECASE)


@dataclass(frozen=True, order=True)
class ReportingPeriod:
    """A (year, quarter) reporting period key."""

    year: int
    quarter: int

    def __post_init__(self) -> None:
        if self.quarter not in (1, 2, 3, 4):
            raise ValueError(f"Quarter must be 1-4, got {self.quarter}")

    @classmethod
    def parse(cls, label: str) -> "ReportingPeriod":
        """Parse a label such as "Q1 2024" or "q3-2023"."""
        match = _PERIOD_LABEL.match(label or "")
        if not match:
            raise ValueError(f"Invalid period label: {label!r}")
        return cls(year=int(match.group(2)), quarter=int(match.group(1)))

    @property
    def label(self) -> str:
        return f"Q{self.quarter} {self.year}"

    @property
    def start_date(self) -> date:
        return date(self.year, (self.quarter - 1) * 3 + 1, 1)

    @property
    def end_date(self) -> date:
        return _month_end(self.year, self.quarter * 3)

    @property
    def due_date(self) -> date:
        """Last day of the month after the quarter closes."""
        if self.quarter == 4:
            return _month_end(self.year + 1, 1)
        return _month_end(self.year, self.quarter * 3 + 1)

    def contains(self, value: date) -> bool:
        return classify_period(value) == self

    def days_until_due(self, as_of: Optional[date] = None) -> int:
        return (self.due_date - (as_of or date.today())).days

    def is_overdue(self, as_of: Optional[date] = None) -> bool:
        return self.days_until_due(as_of) < 0

    def __str__(self) -> str:
        return self.label


def _month_end(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def classify_period(value: date) -> ReportingPeriod:
    """Map a calendar date (or datetime) to its reporting quarter."""
    return ReportingPeriod(year=value.year, quarter=math.ceil(value.month / 3))


def current_period(today: Optional[date] = None) -> ReportingPeriod:
    return classify_period(today or date.today())


def parse_record_date(value: object) -> Optional[date]:
    """
    Normalize a record's date field.

    Accepts date and datetime objects and ISO-8601 strings (a trailing time
    component is ignored). Returns None when the value cannot be read as a
    date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            logger.debug("Unparseable record date: %r", value)
            return None
    return None
