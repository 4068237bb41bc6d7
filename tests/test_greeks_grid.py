import logging

import pytest

from dividend_pricing.config import GreekCheck, default_greek_checks
from dividend_pricing.dates import add_years
from dividend_pricing.diagnostics.greeks import (
    GreeksGrid,
    build_option,
    compare_greeks,
    run_greeks_grid,
)
from dividend_pricing.exceptions import GreeksMismatchError
from dividend_pricing.types import OptionType


def test_default_grid_has_no_mismatches(today):
    grid = GreeksGrid()
    report = run_greeks_grid(grid, valuation_date=today)

    assert report.n_cells == grid.n_cells == 540
    assert report.failures == []
    assert report.violations == [], report.to_frame().head().to_string()
    assert report.n_compared + len(report.skipped) == report.n_cells
    assert report.ok
    report.raise_for_violations()


def test_deep_otm_low_vol_cell_is_skipped(today):
    grid = GreeksGrid(
        kinds=(OptionType.CALL,),
        strikes=(150.0,),
        maturities_years=(1,),
        spots=(100.0,),
        dividend_yields=(0.0,),
        rates=(0.05,),
        vols=(0.05,),
    )
    # a tolerance nothing could meet: any comparison would be a violation
    checks = default_greek_checks(tolerance=1e-300)
    report = run_greeks_grid(grid, valuation_date=today, checks=checks)

    assert report.n_compared == 0
    assert report.violations == []
    assert len(report.skipped) == 1
    cell = report.skipped[0]
    assert cell.strike == 150.0 and cell.volatility == 0.05
    assert cell.npv <= 100.0 * 1e-5


def test_compare_greeks_reports_skip(today, make_market):
    grid = GreeksGrid()
    opt = build_option(
        kind=OptionType.CALL,
        strike=150.0,
        valuation_date=today,
        maturity=add_years(today, 1),
        grid=grid,
    )
    cmp = compare_greeks(opt, make_market(S=100.0, q=0.0, r=0.05, sigma=0.05))
    assert cmp.skipped
    assert cmp.expected is None
    assert cmp.violations == ()


def test_violations_are_collected_across_the_grid(today, caplog):
    grid = GreeksGrid(
        kinds=(OptionType.CALL, OptionType.PUT),
        strikes=(100.0,),
        maturities_years=(1,),
        dividend_yields=(0.1,),
        rates=(0.05,),
        vols=(0.2,),
    )
    checks = (GreekCheck(name="gamma", accessor=lambda g: g.gamma, tolerance=1e-300),)
    with caplog.at_level(logging.WARNING, logger="dividend_pricing.diagnostics.greeks.grid"):
        report = run_greeks_grid(grid, valuation_date=today, checks=checks)

    assert report.n_compared == 2
    assert {v.kind for v in report.violations} == {OptionType.CALL, OptionType.PUT}
    assert all(v.greek == "gamma" for v in report.violations)
    assert not report.ok
    assert any("gamma" in rec.getMessage() for rec in caplog.records)

    with pytest.raises(GreeksMismatchError) as excinfo:
        report.raise_for_violations()
    assert len(excinfo.value.violations) == 2
    assert "calculated gamma" in str(excinfo.value)


def test_fail_fast_stops_after_first_bad_cell(today):
    grid = GreeksGrid(strikes=(100.0,), maturities_years=(1,))
    checks = default_greek_checks(tolerance=1e-300)
    report = run_greeks_grid(grid, valuation_date=today, checks=checks, fail_fast=True)

    assert report.n_compared == 1
    assert 0 < len(report.violations) <= 5
    assert report.n_cells < grid.n_cells


def test_domain_errors_are_recorded_and_sweep_continues(today):
    grid = GreeksGrid(
        kinds=(OptionType.CALL,),
        strikes=(-1.0, 100.0),
        maturities_years=(1,),
        dividend_yields=(0.0,),
        rates=(0.05,),
        vols=(0.2,),
    )
    report = run_greeks_grid(grid, valuation_date=today)

    assert report.n_cells == 2
    assert len(report.failures) == 1
    assert report.failures[0].strike == -1.0
    assert "strike" in report.failures[0].message
    assert report.n_compared == 1
    assert not report.ok
    assert list(report.failures_frame()["kind"]) == ["call"]


def test_dividends_exceeding_spot_fail_the_cell(today):
    grid = GreeksGrid(
        kinds=(OptionType.PUT,),
        strikes=(100.0,),
        maturities_years=(2,),
        spots=(10.0, 100.0),
        dividend_yields=(0.0,),
        rates=(0.05,),
        vols=(0.2,),
    )
    report = run_greeks_grid(grid, valuation_date=today)
    assert [f.spot for f in report.failures] == [10.0]
    assert report.n_compared == 1


def test_grid_rejects_empty_axes():
    with pytest.raises(ValueError):
        GreeksGrid(vols=())


def test_report_frame_is_sorted_by_error(today):
    grid = GreeksGrid(
        kinds=(OptionType.CALL,),
        strikes=(100.0,),
        maturities_years=(1,),
        dividend_yields=(0.1,),
        rates=(0.05,),
        vols=(0.2,),
    )
    report = run_greeks_grid(
        grid, valuation_date=today, checks=default_greek_checks(tolerance=1e-300)
    )
    df = report.to_frame()
    assert len(df) == len(report.violations)
    assert list(df["error"]) == sorted(df["error"], reverse=True)
    assert set(df["greek"]) <= {"delta", "gamma", "theta", "rho", "vega"}
