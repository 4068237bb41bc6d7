"""Analytic pricing of European options with discrete cash dividends.

Escrowed-dividend model: the spot is reduced by the present value of the cash
dividends paid before maturity and the remainder is priced with the
Black-Scholes-Merton formula (continuous yield ``q`` on top).

Delta, gamma and vega carry over unchanged because the dividend PV does not
depend on the spot or the volatility. Rho and theta pick up extra terms since
the dividend PV moves with the risk-free rate and with the valuation date:

- ``d PV / d r = -sum(D_i * t_i * df(t_i))``
- ``d PV / d t = sum(D_i * r_i * df(t_i))`` (calendar time)

and ``S* = S - PV``, so ``dV/dx += delta * dS*/dx``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..exceptions import DomainError
from ..instruments.vanilla import DividendVanillaOption
from ..models import bs as bs_model
from ..types import Greeks, MarketState, PricingResult


@dataclass(frozen=True, slots=True)
class DividendAdjustment:
    pv: float
    rho_sensitivity: float
    theta_sensitivity: float


def _validate_inputs(option: DividendVanillaOption, market: MarketState) -> None:
    if market.volatility < 0.0:
        raise DomainError(f"volatility must be >= 0, got {market.volatility}")
    if option.strike <= 0.0:
        raise DomainError(f"strike must be > 0, got {option.strike}")
    if market.spot <= 0.0:
        raise DomainError(f"spot must be > 0, got {market.spot}")
    if option.maturity < market.valuation_date:
        raise DomainError(
            f"maturity {option.maturity.isoformat()} precedes valuation date "
            f"{market.valuation_date.isoformat()}"
        )
    option.dividends.validate(market.valuation_date, option.maturity)


def dividend_adjustment(
    option: DividendVanillaOption, market: MarketState
) -> DividendAdjustment:
    """Present value of the cash dividends and its rate/time sensitivities.

    ``rho_sensitivity`` is dS*/dr and ``theta_sensitivity`` is dS*/dt, where
    ``S* = S - PV``.
    """
    curve = market.risk_free_curve
    dates = option.dividends.dates
    amounts = np.asarray(option.dividends.amounts, dtype=float)
    t = np.array([curve.time(d) for d in dates], dtype=float)
    df = np.array([curve.discount(d) for d in dates], dtype=float)
    zero = np.array([curve.zero_rate(d) for d in dates], dtype=float)

    pv_i = amounts * df
    return DividendAdjustment(
        pv=float(np.sum(pv_i)),
        rho_sensitivity=float(np.sum(pv_i * t)),
        theta_sensitivity=-float(np.sum(pv_i * zero)),
    )


def analytic_dividend_european(
    option: DividendVanillaOption, market: MarketState
) -> PricingResult:
    """Value and Greeks of a European option on a cash-dividend-paying underlying.

    Parameters
    ----------
    option : DividendVanillaOption
        Contract: payoff, European exercise and dividend schedule.
    market : MarketState
        Spot, continuous dividend yield, risk-free rate, volatility and the
        valuation date the curves are anchored at.

    Returns
    -------
    PricingResult
        NPV and the Greeks with respect to the raw spot, the risk-free rate,
        the volatility and the valuation date.

    Raises
    ------
    DomainError
        If the volatility is negative, the strike or spot is non-positive, the
        maturity precedes the valuation date, a dividend falls outside
        ``(valuation_date, maturity]`` or the dividend-adjusted spot is not
        positive.
    """
    _validate_inputs(option, market)

    maturity = option.maturity
    tau = market.year_fraction(maturity)
    adj = dividend_adjustment(option, market)

    effective_spot = market.spot - adj.pv
    if effective_spot <= 0.0:
        raise DomainError(
            f"dividend PV {adj.pv:.6g} leaves no positive spot (spot={market.spot})"
        )

    price, g = bs_model.black_scholes(
        kind=option.kind,
        spot=effective_spot,
        strike=option.strike,
        r=market.risk_free_curve.zero_rate(maturity),
        q=market.dividend_curve.zero_rate(maturity),
        sigma=market.vol_surface.black_volatility(maturity, option.strike),
        tau=tau,
    )

    greeks = Greeks(
        delta=g.delta,
        gamma=g.gamma,
        theta=g.theta + adj.theta_sensitivity * g.delta,
        rho=g.rho + adj.rho_sensitivity * g.delta,
        vega=g.vega,
    )
    return PricingResult(
        npv=price,
        greeks=greeks,
        effective_spot=effective_spot,
        dividend_pv=adj.pv,
        time_to_expiry=tau,
    )
