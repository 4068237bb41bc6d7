from __future__ import annotations

import math

from scipy.stats import norm

from ..exceptions import DomainError
from ..types import Greeks, OptionType


def _validate_scalar_inputs(
    *, spot: float, strike: float, sigma: float, tau: float
) -> None:
    if spot <= 0.0:
        raise DomainError("spot must be positive")
    if strike <= 0.0:
        raise DomainError("strike must be positive")
    if sigma < 0.0:
        raise DomainError("sigma must be non-negative")
    if tau < 0.0:
        raise DomainError("tau must be non-negative")


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def d1_d2_from_spot(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> tuple[float, float]:
    vol_sqrt_t = sigma * math.sqrt(tau)
    if vol_sqrt_t <= 0.0:
        raise DomainError("d1/d2 undefined for zero standard deviation")
    num = math.log(spot / strike) + (r - q + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def black_scholes(
    *,
    kind: OptionType,
    spot: float,
    strike: float,
    r: float,
    q: float,
    sigma: float,
    tau: float,
) -> tuple[float, Greeks]:
    """
    Black–Scholes European price and Greeks with continuous dividend yield q.

    theta is ∂Price/∂t (calendar time, holding expiry fixed), per year, and rho
    is ∂Price/∂r with spot held fixed.

    With zero standard deviation (sigma == 0 or tau == 0) the terminal price is
    the forward, so the value collapses to the discounted intrinsic value of the
    forward. Delta and rho are those of the forward contract when it finishes
    in the money and zero otherwise; gamma and vega are zero.
    """
    _validate_scalar_inputs(spot=spot, strike=strike, sigma=sigma, tau=tau)
    phi = kind.sign
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    stdev = sigma * math.sqrt(tau)

    if stdev > 0.0:
        d1, d2 = d1_d2_from_spot(
            spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau
        )
        N1 = norm.cdf(phi * d1)
        N2 = norm.cdf(phi * d2)
        phi_d1 = norm.pdf(d1)

        price = phi * (spot * df_q * N1 - strike * df_r * N2)
        delta = phi * df_q * N1
        gamma = df_q * phi_d1 / (spot * stdev)
        vega = spot * df_q * phi_d1 * math.sqrt(tau)
        rho = phi * strike * tau * df_r * N2
    else:
        intrinsic = phi * (spot * df_q - strike * df_r)
        in_the_money = intrinsic > 0.0
        price = max(intrinsic, 0.0)
        delta = phi * df_q if in_the_money else 0.0
        gamma = 0.0
        vega = 0.0
        rho = phi * strike * tau * df_r if in_the_money else 0.0

    # BS PDE: theta = rV - (r-q) S delta - 0.5 sigma^2 S^2 gamma
    theta = r * price - (r - q) * spot * delta - 0.5 * sigma * sigma * spot * spot * gamma

    greeks = Greeks(
        delta=float(delta),
        gamma=float(gamma),
        theta=float(theta),
        rho=float(rho),
        vega=float(vega),
    )
    return float(price), greeks


def black_scholes_price(
    *,
    kind: OptionType,
    spot: float,
    strike: float,
    r: float,
    q: float,
    sigma: float,
    tau: float,
) -> float:
    price, _ = black_scholes(
        kind=kind, spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau
    )
    return price
