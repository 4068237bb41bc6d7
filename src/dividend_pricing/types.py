from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Literal

from .dates import Actual365Fixed
from .market.curves import FlatForwardCurve, FlatVolatility

QuoteName = Literal["spot", "dividend_yield", "rate", "volatility"]


class OptionType(str, Enum):
    """Option contract type.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"

    @property
    def sign(self) -> float:
        return 1.0 if self is OptionType.CALL else -1.0


@dataclass(frozen=True, slots=True)
class MarketState:
    """Snapshot of the market quotes an option is priced against.

    Parameters
    ----------
    spot : float
        Spot price of the underlying, typically denoted :math:`S`.
    dividend_yield : float
        Continuously-compounded dividend yield :math:`q`, applied on top of the
        discrete cash dividends of the contract.
    rate : float
        Continuously-compounded risk-free rate :math:`r`.
    volatility : float
        Black volatility :math:`\\sigma` (annualized).
    valuation_date : datetime.date
        Date the curves are anchored at and the option is valued on.
    day_counter : Actual365Fixed, default Actual365Fixed()
        Convention turning date pairs into year fractions.

    Notes
    -----
    The state is frozen. Moving a quote means building a new state with
    :meth:`with_quote` (or :meth:`with_valuation_date`); the original is left
    untouched, so a bumped valuation never leaks into later pricing calls.
    """

    spot: float
    dividend_yield: float
    rate: float
    volatility: float
    valuation_date: dt.date
    day_counter: Actual365Fixed = field(default_factory=Actual365Fixed)

    def with_quote(self, name: QuoteName, value: float) -> MarketState:
        if name not in ("spot", "dividend_yield", "rate", "volatility"):
            raise ValueError(f"Unknown quote: {name!r}")
        return replace(self, **{name: float(value)})

    def with_valuation_date(self, valuation_date: dt.date) -> MarketState:
        return replace(self, valuation_date=valuation_date)

    @property
    def risk_free_curve(self) -> FlatForwardCurve:
        return FlatForwardCurve(
            rate=self.rate,
            reference_date=self.valuation_date,
            day_counter=self.day_counter,
        )

    @property
    def dividend_curve(self) -> FlatForwardCurve:
        return FlatForwardCurve(
            rate=self.dividend_yield,
            reference_date=self.valuation_date,
            day_counter=self.day_counter,
        )

    @property
    def vol_surface(self) -> FlatVolatility:
        return FlatVolatility(
            volatility=self.volatility,
            reference_date=self.valuation_date,
            day_counter=self.day_counter,
        )

    def year_fraction(self, d: dt.date) -> float:
        return self.day_counter.year_fraction(self.valuation_date, d)


@dataclass(frozen=True, slots=True)
class Greeks:
    """First and second order sensitivities of an option value.

    theta is :math:`\\partial V/\\partial t` in calendar time (expiry held
    fixed), per year.
    """

    delta: float
    gamma: float
    theta: float
    rho: float
    vega: float


@dataclass(frozen=True, slots=True)
class PricingResult:
    """Output of the analytic dividend engine.

    Attributes
    ----------
    npv : float
        Option value on the valuation date.
    greeks : Greeks
        Analytic sensitivities with respect to the raw (unadjusted) spot,
        rate, volatility and valuation date.
    effective_spot : float
        Spot less the present value of the cash dividends.
    dividend_pv : float
        Present value of the cash dividends paid before maturity.
    time_to_expiry : float
        Year fraction between valuation date and maturity.
    """

    npv: float
    greeks: Greeks
    effective_spot: float
    dividend_pv: float
    time_to_expiry: float
