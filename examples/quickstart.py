from __future__ import annotations


def main() -> None:
    import datetime as dt
    import logging

    from dividend_pricing import (
        DividendSchedule,
        DividendVanillaOption,
        EuropeanExercise,
        MarketState,
        OptionType,
        VanillaPayoff,
        add_years,
        finite_diff_greeks,
        run_greeks_grid,
    )

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    today = dt.date(2024, 3, 15)
    maturity = add_years(today, 1)
    option = DividendVanillaOption(
        payoff=VanillaPayoff(kind=OptionType.CALL, strike=100.0),
        exercise=EuropeanExercise(maturity=maturity),
        dividends=DividendSchedule.periodic(start=today, end=maturity, amount=5.0),
    )
    market = MarketState(
        spot=100.0, dividend_yield=0.10, rate=0.05, volatility=0.20, valuation_date=today
    )

    res = option.results(market)
    print("Dividend PV:", res.dividend_pv)
    print("NPV:", res.npv)
    print("Analytic:", res.greeks)
    print("Finite diff:", finite_diff_greeks(option, market))

    report = run_greeks_grid(valuation_date=today)
    print(f"{report.n_compared} cells compared, {len(report.skipped)} skipped")
    print(report.to_frame().head())


if __name__ == "__main__":
    main()
