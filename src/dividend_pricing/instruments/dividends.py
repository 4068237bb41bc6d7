"""Discrete cash dividend schedules."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from ..dates import add_months
from ..exceptions import DomainError


@dataclass(frozen=True, slots=True)
class Dividend:
    date: dt.date
    amount: float

    def __post_init__(self) -> None:
        if self.amount < 0.0:
            raise DomainError(f"dividend amount must be >= 0, got {self.amount}")


@dataclass(frozen=True, slots=True)
class DividendSchedule:
    """Ordered cash dividends paid by the underlying of one contract.

    Dividends are sorted by date on construction. The schedule does not know
    the valuation date; :meth:`validate` checks it against a pricing window.
    """

    dividends: tuple[Dividend, ...] = ()

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.dividends, key=lambda d: d.date))
        object.__setattr__(self, "dividends", ordered)

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[dt.date, float]]
    ) -> DividendSchedule:
        return cls(tuple(Dividend(date=d, amount=float(a)) for d, a in pairs))

    @classmethod
    def periodic(
        cls,
        *,
        start: dt.date,
        end: dt.date,
        amount: float,
        first_months: int = 3,
        period_months: int = 6,
    ) -> DividendSchedule:
        """Fixed ``amount`` every ``period_months`` from ``start + first_months``.

        Payment dates are strictly before ``end``. Each date is the previous
        one rolled forward by ``period_months``, so month-end clipping carries
        over (Aug 31 -> Nov 30 -> May 30 with the defaults).
        """
        if period_months <= 0:
            raise ValueError("period_months must be > 0")
        out: list[Dividend] = []
        d = add_months(start, first_months)
        while d < end:
            out.append(Dividend(date=d, amount=float(amount)))
            d = add_months(d, period_months)
        return cls(tuple(out))

    def __iter__(self) -> Iterator[Dividend]:
        return iter(self.dividends)

    def __len__(self) -> int:
        return len(self.dividends)

    @property
    def dates(self) -> Sequence[dt.date]:
        return [d.date for d in self.dividends]

    @property
    def amounts(self) -> Sequence[float]:
        return [d.amount for d in self.dividends]

    def validate(self, valuation_date: dt.date, maturity: dt.date) -> None:
        """Raise :class:`DomainError` unless every date is in ``(valuation_date, maturity]``."""
        for div in self.dividends:
            if not (valuation_date < div.date <= maturity):
                raise DomainError(
                    f"dividend date {div.date.isoformat()} outside "
                    f"({valuation_date.isoformat()}, {maturity.isoformat()}]"
                )
