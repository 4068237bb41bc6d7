from __future__ import annotations

from collections.abc import Callable

from ..config import FiniteDiffConfig
from ..dates import add_days
from ..instruments.vanilla import DividendVanillaOption
from ..pricers.dividend_european import analytic_dividend_european
from ..types import Greeks, MarketState, PricingResult

PriceFn = Callable[[DividendVanillaOption, MarketState], PricingResult]


def relative_error(expected: float, calculated: float, reference: float) -> float:
    """|expected - calculated| scaled by ``reference`` (unscaled if it is zero)."""
    diff = abs(expected - calculated)
    if reference != 0.0:
        return diff / reference
    return diff


def is_negligible(npv: float, spot: float, ratio: float = 1e-5) -> bool:
    """True when the option is worth too little for relative comparisons to mean anything."""
    return npv <= spot * ratio


def _bump_size(x: float, rel: float, floor: float) -> float:
    h = abs(x) * rel
    return h if h > 0.0 else floor


def finite_diff_greeks(
    option: DividendVanillaOption,
    market: MarketState,
    *,
    config: FiniteDiffConfig | None = None,
    price_fn: PriceFn = analytic_dividend_european,
) -> Greeks:
    """
    Central finite-difference Greeks for a pricer taking (option, market) -> PricingResult.

    - delta : NPV bumped on spot
    - gamma : *analytic* delta bumped on spot
    - rho   : NPV bumped on the risk-free rate
    - vega  : NPV bumped on volatility
    - theta : NPV with the valuation date moved by ``config.theta_days``,
      divided by the year fraction between the two dates

    Every bump builds a new :class:`MarketState`; ``market`` itself is never
    modified, so pricing it again afterwards reproduces the base NPV exactly.
    """
    cfg = config or FiniteDiffConfig()

    def npv(m: MarketState) -> float:
        return price_fn(option, m).npv

    def analytic_delta(m: MarketState) -> float:
        return price_fn(option, m).greeks.delta

    # --- delta, gamma (bump spot)
    S = market.spot
    h_s = _bump_size(S, cfg.spot_rel_bump, cfg.abs_bump_floor)
    up_s = market.with_quote("spot", S + h_s)
    down_s = market.with_quote("spot", S - h_s)
    delta = (npv(up_s) - npv(down_s)) / (2.0 * h_s)
    gamma = (analytic_delta(up_s) - analytic_delta(down_s)) / (2.0 * h_s)

    # --- rho (bump risk-free rate)
    r = market.rate
    h_r = _bump_size(r, cfg.rate_rel_bump, cfg.abs_bump_floor)
    V_up_r = npv(market.with_quote("rate", r + h_r))
    V_down_r = npv(market.with_quote("rate", r - h_r))
    rho = (V_up_r - V_down_r) / (2.0 * h_r)

    # --- vega (bump volatility; one-sided if the down bump would go negative)
    v = market.volatility
    h_v = _bump_size(v, cfg.vol_rel_bump, cfg.abs_bump_floor)
    V_up_v = npv(market.with_quote("volatility", v + h_v))
    if v - h_v >= 0.0:
        V_down_v = npv(market.with_quote("volatility", v - h_v))
        vega = (V_up_v - V_down_v) / (2.0 * h_v)
    else:
        vega = (V_up_v - npv(market)) / h_v

    theta = _theta(option, market, days=cfg.theta_days, npv=npv)

    return Greeks(delta=delta, gamma=gamma, theta=theta, rho=rho, vega=vega)


def _theta(
    option: DividendVanillaOption,
    market: MarketState,
    *,
    days: int,
    npv: Callable[[MarketState], float],
) -> float:
    """Calendar-time theta with expiry and dividend dates held fixed.

    Central over ``[t0 - days, t0 + days]``; backward over ``[t0 - days, t0]``
    when the forward step would land on the maturity or a dividend date.

    Notes
    -----
    A one-day step cannot resolve theta within a few days of expiry: the
    value there is far from linear in time (theta grows like ``1/sqrt(tau)``).
    An ATM option valued the day before maturity gives an estimate off by
    more than ``0.1 * spot``. Such a mismatch is a limit of the estimate, not
    an error in the analytic theta.
    """
    t0 = market.valuation_date
    prev_day = add_days(t0, -days)
    next_day = add_days(t0, days)
    dc = market.day_counter

    V_down = npv(market.with_valuation_date(prev_day))

    # moving forward must keep every dividend strictly after the valuation date
    can_step_forward = next_day < option.maturity and all(
        d > next_day for d in option.dividends.dates
    )
    if can_step_forward:
        V_up = npv(market.with_valuation_date(next_day))
        return (V_up - V_down) / dc.year_fraction(prev_day, next_day)

    return (npv(market) - V_down) / dc.year_fraction(prev_day, t0)
