from __future__ import annotations

import datetime as dt
import math
from dataclasses import dataclass, field

from ..dates import Actual365Fixed


@dataclass(frozen=True, slots=True)
class FlatForwardCurve:
    """
    Term structure with a single continuously-compounded rate.

    df(d) = exp(-rate * yf(reference_date, d))

    Used both for the risk-free curve and for the continuous dividend yield.
    """

    rate: float
    reference_date: dt.date
    day_counter: Actual365Fixed = field(default_factory=Actual365Fixed)

    def time(self, d: dt.date) -> float:
        t = self.day_counter.year_fraction(self.reference_date, d)
        if t < 0.0:
            raise ValueError("date must not precede the curve reference date")
        return t

    def discount(self, d: dt.date) -> float:
        return math.exp(-self.rate * self.time(d))

    def zero_rate(self, d: dt.date) -> float:
        return self.rate

    def __call__(self, d: dt.date) -> float:
        return self.discount(d)


@dataclass(frozen=True, slots=True)
class FlatVolatility:
    """Black volatility surface returning one scalar for every date and strike."""

    volatility: float
    reference_date: dt.date
    day_counter: Actual365Fixed = field(default_factory=Actual365Fixed)

    def black_volatility(self, d: dt.date, strike: float) -> float:
        return self.volatility

