"""Pytest helpers for the dividend_pricing library."""

from __future__ import annotations

import datetime as dt

import pytest

from dividend_pricing.dates import add_months, add_years
from dividend_pricing.instruments import (
    DividendSchedule,
    DividendVanillaOption,
    EuropeanExercise,
    VanillaPayoff,
)
from dividend_pricing.types import MarketState, OptionType


@pytest.fixture
def today() -> dt.date:
    return dt.date(2024, 3, 15)


@pytest.fixture
def base_params() -> dict:
    """Canonical scenario: ATM, 1y, q=10%, r=5%, vol=20%, 5.0 paid at +3M and +9M."""
    return {
        "S": 100.0,
        "K": 100.0,
        "q": 0.10,
        "r": 0.05,
        "sigma": 0.20,
        "years": 1,
        "dividend": 5.0,
    }


@pytest.fixture
def make_market(today):
    """Factory fixture for MarketState."""

    def _make(
        *,
        S: float = 100.0,
        q: float = 0.0,
        r: float = 0.05,
        sigma: float = 0.20,
        valuation_date: dt.date | None = None,
    ) -> MarketState:
        return MarketState(
            spot=S,
            dividend_yield=q,
            rate=r,
            volatility=sigma,
            valuation_date=valuation_date or today,
        )

    return _make


@pytest.fixture
def make_option(today):
    """Factory fixture for a dividend-paying European option.

    ``dividends`` overrides the schedule with explicit ``(months_after_today, amount)``
    pairs; by default the underlying pays ``dividend`` at +3M, +9M, ... before maturity.
    """

    def _make(
        *,
        K: float = 100.0,
        years: int = 1,
        kind: OptionType = OptionType.CALL,
        dividend: float = 5.0,
        dividends: list[tuple[int, float]] | None = None,
    ) -> DividendVanillaOption:
        maturity = add_years(today, years)
        if dividends is None:
            schedule = DividendSchedule.periodic(
                start=today, end=maturity, amount=dividend
            )
        else:
            schedule = DividendSchedule.from_pairs(
                (add_months(today, m), a) for m, a in dividends
            )
        return DividendVanillaOption(
            payoff=VanillaPayoff(kind=kind, strike=K),
            exercise=EuropeanExercise(maturity=maturity),
            dividends=schedule,
        )

    return _make
