from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from operator import attrgetter

from .types import Greeks

DEFAULT_TOLERANCE = 1.0e-5


@dataclass(frozen=True, slots=True)
class FiniteDiffConfig:
    """Bump sizes for finite-difference Greeks.

    Quote bumps are relative (``dx = x * rel_bump``); ``abs_bump_floor`` is used
    when the quote itself is zero. ``negligible_npv_ratio`` sets the value below
    which (``npv <= spot * ratio``) an option is too cheap for a meaningful
    comparison.
    """

    spot_rel_bump: float = 1e-4
    rate_rel_bump: float = 1e-4
    vol_rel_bump: float = 1e-4
    theta_days: int = 1
    negligible_npv_ratio: float = 1e-5
    abs_bump_floor: float = 1e-8

    def __post_init__(self) -> None:
        if self.spot_rel_bump <= 0 or self.rate_rel_bump <= 0 or self.vol_rel_bump <= 0:
            raise ValueError("relative bumps must be > 0")
        if self.theta_days <= 0:
            raise ValueError("theta_days must be > 0")
        if self.negligible_npv_ratio < 0:
            raise ValueError("negligible_npv_ratio must be >= 0")
        if self.abs_bump_floor <= 0:
            raise ValueError("abs_bump_floor must be > 0")


@dataclass(frozen=True, slots=True)
class GreekCheck:
    """One row of the comparison table: which Greek, how to read it, how close."""

    name: str
    accessor: Callable[[Greeks], float]
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        if self.tolerance <= 0:
            raise ValueError("tolerance must be > 0")

    def __call__(self, greeks: Greeks) -> float:
        return float(self.accessor(greeks))


GREEK_NAMES = ("delta", "gamma", "theta", "rho", "vega")


def default_greek_checks(
    tolerance: float = DEFAULT_TOLERANCE,
) -> tuple[GreekCheck, ...]:
    return tuple(
        GreekCheck(name=name, accessor=attrgetter(name), tolerance=tolerance)
        for name in GREEK_NAMES
    )
