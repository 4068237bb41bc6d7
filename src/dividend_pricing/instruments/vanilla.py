"""Vanilla (call/put) payoffs and the dividend-paying vanilla option.

- :class:`VanillaPayoff` : call/put type and strike
- :class:`DividendVanillaOption` : payoff + European exercise + cash dividends
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

from ..types import Greeks, MarketState, OptionType, PricingResult
from .base import EuropeanExercise
from .dividends import DividendSchedule


@dataclass(frozen=True, slots=True)
class VanillaPayoff:
    """Plain vanilla call/put payoff."""

    kind: OptionType
    strike: float

    def describe(self) -> str:
        return "plain vanilla"


@dataclass(frozen=True, slots=True)
class DividendVanillaOption:
    """European vanilla option on an underlying paying discrete cash dividends.

    The option holds no market data. Every accessor prices against the
    :class:`~dividend_pricing.types.MarketState` it is handed, so the same
    contract can be reused across many market scenarios.
    """

    payoff: VanillaPayoff
    exercise: EuropeanExercise
    dividends: DividendSchedule = field(default_factory=DividendSchedule)

    @property
    def kind(self) -> OptionType:
        return self.payoff.kind

    @property
    def strike(self) -> float:
        return self.payoff.strike

    @property
    def maturity(self) -> dt.date:
        return self.exercise.last_date

    def results(self, market: MarketState) -> PricingResult:
        from ..pricers.dividend_european import analytic_dividend_european

        return analytic_dividend_european(self, market)

    def greeks(self, market: MarketState) -> Greeks:
        return self.results(market).greeks

    def npv(self, market: MarketState) -> float:
        return self.results(market).npv

    def delta(self, market: MarketState) -> float:
        return self.results(market).greeks.delta

    def gamma(self, market: MarketState) -> float:
        return self.results(market).greeks.gamma

    def theta(self, market: MarketState) -> float:
        return self.results(market).greeks.theta

    def rho(self, market: MarketState) -> float:
        return self.results(market).greeks.rho

    def vega(self, market: MarketState) -> float:
        return self.results(market).greeks.vega
