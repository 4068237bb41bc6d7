"""
dividend_pricing

European options on underlyings paying discrete cash dividends: analytic
escrowed-dividend pricing and Greeks, plus a finite-difference harness that
cross-checks the analytic Greeks over a parameter grid.

    from dividend_pricing import DividendVanillaOption, MarketState, run_greeks_grid
"""

from .config import DEFAULT_TOLERANCE, FiniteDiffConfig, GreekCheck, default_greek_checks
from .dates import Actual365Fixed, add_days, add_months, add_years
from .diagnostics.greeks import GreeksGrid, GridReport, compare_greeks, run_greeks_grid
from .exceptions import DomainError, GreeksMismatchError
from .instruments import (
    Dividend,
    DividendSchedule,
    DividendVanillaOption,
    EuropeanExercise,
    ExerciseStyle,
    VanillaPayoff,
)
from .market.curves import FlatForwardCurve, FlatVolatility
from .numerics.finite_diff import finite_diff_greeks, is_negligible, relative_error
from .pricers.dividend_european import analytic_dividend_european
from .types import Greeks, MarketState, OptionType, PricingResult

__all__ = [
    # Types
    "OptionType",
    "MarketState",
    "Greeks",
    "PricingResult",
    # Dates and curves
    "Actual365Fixed",
    "add_days",
    "add_months",
    "add_years",
    "FlatForwardCurve",
    "FlatVolatility",
    # Instruments
    "ExerciseStyle",
    "EuropeanExercise",
    "Dividend",
    "DividendSchedule",
    "VanillaPayoff",
    "DividendVanillaOption",
    # Pricing and validation
    "analytic_dividend_european",
    "finite_diff_greeks",
    "is_negligible",
    "relative_error",
    "GreeksGrid",
    "GridReport",
    "compare_greeks",
    "run_greeks_grid",
    # Config and errors
    "FiniteDiffConfig",
    "GreekCheck",
    "DEFAULT_TOLERANCE",
    "default_greek_checks",
    "DomainError",
    "GreeksMismatchError",
]
