"""Structured records for Greek comparisons and their text / table rendering."""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable
from dataclasses import asdict, dataclass

import pandas as pd

from ...instruments.base import ExerciseStyle
from ...types import OptionType


@dataclass(frozen=True, slots=True)
class ToleranceViolation:
    """A Greek whose analytic value is too far from its finite-difference estimate."""

    exercise: ExerciseStyle
    kind: OptionType
    payoff: str
    spot: float
    strike: float
    dividend_yield: float
    rate: float
    valuation_date: dt.date
    maturity: dt.date
    volatility: float
    greek: str
    expected: float
    calculated: float
    error: float
    tolerance: float


@dataclass(frozen=True, slots=True)
class SkippedCell:
    """A grid cell left out of the comparison because the option is worth ~0."""

    kind: OptionType
    strike: float
    maturity: dt.date
    spot: float
    dividend_yield: float
    rate: float
    volatility: float
    npv: float


@dataclass(frozen=True, slots=True)
class CellFailure:
    """A grid cell whose pricing raised a :class:`DomainError`."""

    kind: OptionType
    strike: float
    maturity: dt.date
    spot: float
    dividend_yield: float
    rate: float
    volatility: float
    message: str


def _fmt_rate(x: float) -> str:
    return f"{100.0 * x:.6f} %"


def format_violation(v: ToleranceViolation) -> str:
    """Multi-line description of a violation, one field per line."""
    return (
        f"{v.exercise.value.capitalize()} {v.kind.value} option with {v.payoff} payoff:\n"
        f"    spot value:       {v.spot:.6f}\n"
        f"    strike:           {v.strike:.6f}\n"
        f"    dividend yield:   {_fmt_rate(v.dividend_yield)}\n"
        f"    risk-free rate:   {_fmt_rate(v.rate)}\n"
        f"    reference date:   {v.valuation_date.isoformat()}\n"
        f"    maturity:         {v.maturity.isoformat()}\n"
        f"    volatility:       {_fmt_rate(v.volatility)}\n"
        "\n"
        f"    expected   {v.greek}: {v.expected:.10g}\n"
        f"    calculated {v.greek}: {v.calculated:.10g}\n"
        f"    error:            {v.error:.6e}\n"
        f"    tolerance:        {v.tolerance:.6e}"
    )


def records_frame(records: Iterable[object]) -> pd.DataFrame:
    """Tidy DataFrame with one row per record (violations, skips or failures)."""
    rows = []
    for rec in records:
        row = asdict(rec)  # type: ignore[call-overload]
        for key, val in row.items():
            if isinstance(val, (OptionType, ExerciseStyle)):
                row[key] = val.value
        rows.append(row)
    return pd.DataFrame(rows)


def violations_frame(violations: Iterable[ToleranceViolation]) -> pd.DataFrame:
    df = records_frame(violations)
    if df.empty:
        return pd.DataFrame(
            columns=[
                "exercise",
                "kind",
                "payoff",
                "spot",
                "strike",
                "dividend_yield",
                "rate",
                "valuation_date",
                "maturity",
                "volatility",
                "greek",
                "expected",
                "calculated",
                "error",
                "tolerance",
            ]
        )
    return df.sort_values("error", ascending=False, ignore_index=True)
