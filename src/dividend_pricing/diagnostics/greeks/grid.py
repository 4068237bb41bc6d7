"""Analytic-vs-finite-difference Greeks over a Cartesian parameter grid.

One :class:`~dividend_pricing.instruments.DividendVanillaOption` is built per
(type, strike, maturity) and reused for every spot/yield/rate/volatility cell
of that maturity. Each cell gets its own immutable market state, so the cells
are independent of one another and of the order they are visited in.
"""

from __future__ import annotations

import datetime as dt
import itertools
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import pandas as pd

from ...config import FiniteDiffConfig, GreekCheck, default_greek_checks
from ...dates import add_years
from ...exceptions import DomainError, GreeksMismatchError
from ...instruments import (
    DividendSchedule,
    DividendVanillaOption,
    EuropeanExercise,
    VanillaPayoff,
)
from ...numerics.finite_diff import finite_diff_greeks, is_negligible, relative_error
from ...types import Greeks, MarketState, OptionType
from .report import (
    CellFailure,
    SkippedCell,
    ToleranceViolation,
    records_frame,
    violations_frame,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GreeksGrid:
    """Parameter axes swept by :func:`run_greeks_grid`.

    Maturities are whole day-count years (365 days) after the valuation date.
    Each maturity gets ``dividend_amount`` every ``dividend_period_months``
    starting ``first_dividend_months`` after the valuation date, up to but
    excluding the maturity.
    """

    kinds: Sequence[OptionType] = (OptionType.CALL, OptionType.PUT)
    strikes: Sequence[float] = (50.0, 99.5, 100.0, 100.5, 150.0)
    maturities_years: Sequence[int] = (1, 2)
    spots: Sequence[float] = (100.0,)
    dividend_yields: Sequence[float] = (0.00, 0.10, 0.30)
    rates: Sequence[float] = (0.01, 0.05, 0.15)
    vols: Sequence[float] = (0.05, 0.20, 0.70)
    dividend_amount: float = 5.0
    first_dividend_months: int = 3
    dividend_period_months: int = 6

    def __post_init__(self) -> None:
        for name in (
            "kinds",
            "strikes",
            "maturities_years",
            "spots",
            "dividend_yields",
            "rates",
            "vols",
        ):
            if len(getattr(self, name)) == 0:
                raise ValueError(f"{name} must not be empty")

    @property
    def n_cells(self) -> int:
        return (
            len(self.kinds)
            * len(self.strikes)
            * len(self.maturities_years)
            * len(self.spots)
            * len(self.dividend_yields)
            * len(self.rates)
            * len(self.vols)
        )


@dataclass
class GridReport:
    """Outcome of a grid sweep."""

    valuation_date: dt.date
    n_cells: int = 0
    n_compared: int = 0
    violations: list[ToleranceViolation] = field(default_factory=list)
    skipped: list[SkippedCell] = field(default_factory=list)
    failures: list[CellFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations and not self.failures

    def raise_for_violations(self) -> None:
        if self.violations:
            raise GreeksMismatchError(self.violations)

    def to_frame(self) -> pd.DataFrame:
        return violations_frame(self.violations)

    def skipped_frame(self) -> pd.DataFrame:
        return records_frame(self.skipped)

    def failures_frame(self) -> pd.DataFrame:
        return records_frame(self.failures)


def build_option(
    *,
    kind: OptionType,
    strike: float,
    valuation_date: dt.date,
    maturity: dt.date,
    grid: GreeksGrid,
) -> DividendVanillaOption:
    dividends = DividendSchedule.periodic(
        start=valuation_date,
        end=maturity,
        amount=grid.dividend_amount,
        first_months=grid.first_dividend_months,
        period_months=grid.dividend_period_months,
    )
    return DividendVanillaOption(
        payoff=VanillaPayoff(kind=kind, strike=float(strike)),
        exercise=EuropeanExercise(maturity=maturity),
        dividends=dividends,
    )


@dataclass(frozen=True, slots=True)
class CellComparison:
    """Analytic vs finite-difference Greeks for one market state.

    ``expected`` is ``None`` when the option value was negligible and the
    finite-difference pass was skipped.
    """

    npv: float
    calculated: Greeks
    expected: Greeks | None
    violations: tuple[ToleranceViolation, ...] = ()

    @property
    def skipped(self) -> bool:
        return self.expected is None


def compare_greeks(
    option: DividendVanillaOption,
    market: MarketState,
    *,
    config: FiniteDiffConfig | None = None,
    checks: Sequence[GreekCheck] | None = None,
) -> CellComparison:
    """Compare analytic and finite-difference Greeks for one market state.

    The error of every Greek is measured relative to the spot. Options worth
    no more than ``spot * config.negligible_npv_ratio`` are not compared.
    """
    cfg = config or FiniteDiffConfig()
    checks = default_greek_checks() if checks is None else checks

    result = option.results(market)
    if is_negligible(result.npv, market.spot, cfg.negligible_npv_ratio):
        return CellComparison(npv=result.npv, calculated=result.greeks, expected=None)

    expected = finite_diff_greeks(option, market, config=cfg)
    out: list[ToleranceViolation] = []
    for check in checks:
        exp_val = check(expected)
        calc_val = check(result.greeks)
        error = relative_error(exp_val, calc_val, market.spot)
        if error > check.tolerance:
            out.append(
                ToleranceViolation(
                    exercise=option.exercise.style,
                    kind=option.kind,
                    payoff=option.payoff.describe(),
                    spot=market.spot,
                    strike=option.strike,
                    dividend_yield=market.dividend_yield,
                    rate=market.rate,
                    valuation_date=market.valuation_date,
                    maturity=option.maturity,
                    volatility=market.volatility,
                    greek=check.name,
                    expected=exp_val,
                    calculated=calc_val,
                    error=error,
                    tolerance=check.tolerance,
                )
            )
    return CellComparison(
        npv=result.npv,
        calculated=result.greeks,
        expected=expected,
        violations=tuple(out),
    )


def run_greeks_grid(
    grid: GreeksGrid | None = None,
    *,
    valuation_date: dt.date,
    config: FiniteDiffConfig | None = None,
    checks: Sequence[GreekCheck] | None = None,
    fail_fast: bool = False,
) -> GridReport:
    """Sweep the grid and collect every analytic/finite-difference mismatch.

    A :class:`DomainError` in one cell is recorded as a :class:`CellFailure` and
    the sweep continues. Cells whose value is negligible are recorded as
    :class:`SkippedCell`. With ``fail_fast`` the sweep stops at the first cell
    that produced a violation.
    """
    grid = grid or GreeksGrid()
    cfg = config or FiniteDiffConfig()
    checks = default_greek_checks() if checks is None else tuple(checks)

    report = GridReport(valuation_date=valuation_date)
    logger.info(
        "Greeks grid sweep: %d cells, valuation date %s",
        grid.n_cells,
        valuation_date.isoformat(),
    )

    for kind, strike, years in itertools.product(
        grid.kinds, grid.strikes, grid.maturities_years
    ):
        maturity = add_years(valuation_date, years)
        option = build_option(
            kind=kind,
            strike=strike,
            valuation_date=valuation_date,
            maturity=maturity,
            grid=grid,
        )

        for spot, q, r, vol in itertools.product(
            grid.spots, grid.dividend_yields, grid.rates, grid.vols
        ):
            report.n_cells += 1
            market = MarketState(
                spot=float(spot),
                dividend_yield=float(q),
                rate=float(r),
                volatility=float(vol),
                valuation_date=valuation_date,
            )
            cell = dict(
                kind=kind,
                strike=float(strike),
                maturity=maturity,
                spot=float(spot),
                dividend_yield=float(q),
                rate=float(r),
                volatility=float(vol),
            )

            try:
                comparison = compare_greeks(option, market, config=cfg, checks=checks)
            except DomainError as exc:
                logger.debug("Cell %s failed: %s", cell, exc)
                report.failures.append(CellFailure(message=str(exc), **cell))
                continue

            if comparison.skipped:
                logger.debug(
                    "Cell %s skipped: negligible NPV %.3g", cell, comparison.npv
                )
                report.skipped.append(SkippedCell(npv=comparison.npv, **cell))
                continue

            report.n_compared += 1
            violations = comparison.violations
            for v in violations:
                logger.warning(
                    "%s %s K=%g T=%s q=%g r=%g vol=%g: %s expected %.10g "
                    "calculated %.10g (error %.3e > %.1e)",
                    v.exercise.value,
                    v.kind.value,
                    v.strike,
                    v.maturity.isoformat(),
                    v.dividend_yield,
                    v.rate,
                    v.volatility,
                    v.greek,
                    v.expected,
                    v.calculated,
                    v.error,
                    v.tolerance,
                )
            report.violations.extend(violations)

            if fail_fast and violations:
                logger.info("Stopping sweep at first violation")
                return report

    logger.info(
        "Greeks grid sweep done: %d compared, %d skipped, %d failed, %d violations",
        report.n_compared,
        len(report.skipped),
        len(report.failures),
        len(report.violations),
    )
    return report
