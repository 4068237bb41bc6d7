"""Day counting and calendar arithmetic.

Only what the dividend engine and its validator need: an Actual/365 (Fixed)
year fraction and day/month shifts on :class:`datetime.date`.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

import pandas as pd

DAYS_PER_YEAR = 365


@dataclass(frozen=True, slots=True)
class Actual365Fixed:
    """Actual/365 (Fixed) day counter."""

    name: str = "Actual/365 (Fixed)"

    def day_count(self, start: dt.date, end: dt.date) -> int:
        return (end - start).days

    def year_fraction(self, start: dt.date, end: dt.date) -> float:
        return self.day_count(start, end) / float(DAYS_PER_YEAR)


def add_days(d: dt.date, n: int) -> dt.date:
    return d + dt.timedelta(days=int(n))


def add_months(d: dt.date, n: int) -> dt.date:
    # DateOffset clips to month end (Jan 31 + 1M -> Feb 28/29)
    return (pd.Timestamp(d) + pd.DateOffset(months=int(n))).date()


def add_years(d: dt.date, n: int) -> dt.date:
    """Shift by ``n`` day-count years (``n * 365`` calendar days)."""
    return add_days(d, int(n) * DAYS_PER_YEAR)
