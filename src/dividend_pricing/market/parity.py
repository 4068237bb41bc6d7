from __future__ import annotations

import datetime as dt

from ..types import MarketState


def forward_discounted(
    *, market: MarketState, strike: float, maturity: dt.date, dividend_pv: float
) -> float:
    """S* e^{-q tau} - K e^{-r tau} with S* = S - PV(dividends)."""
    df_q = market.dividend_curve.discount(maturity)
    df_r = market.risk_free_curve.discount(maturity)
    return (market.spot - dividend_pv) * df_q - strike * df_r


def put_call_parity_residual(
    *,
    call: float,
    put: float,
    market: MarketState,
    strike: float,
    maturity: dt.date,
    dividend_pv: float,
) -> float:
    """
    Residual = (C - P) - (S* e^{-q tau} - K e^{-r tau}).
    Should be ~0 for European options on an escrowed-dividend underlying.
    """
    return (call - put) - forward_discounted(
        market=market, strike=strike, maturity=maturity, dividend_pv=dividend_pv
    )
