import datetime as dt
import math

from dividend_pricing.dates import Actual365Fixed, add_days, add_months, add_years


def test_actual_365_fixed_year_fraction():
    dc = Actual365Fixed()
    d0 = dt.date(2024, 1, 1)
    assert dc.day_count(d0, dt.date(2025, 1, 1)) == 366  # leap year
    assert math.isclose(dc.year_fraction(d0, dt.date(2025, 1, 1)), 366 / 365)
    assert dc.year_fraction(d0, d0) == 0.0
    assert dc.year_fraction(dt.date(2024, 1, 3), d0) < 0.0


def test_two_day_window_is_two_over_365():
    dc = Actual365Fixed()
    d = dt.date(2024, 3, 15)
    assert math.isclose(
        dc.year_fraction(add_days(d, -1), add_days(d, 1)), 2.0 / 365.0
    )


def test_add_months_clips_to_month_end():
    assert add_months(dt.date(2024, 1, 31), 1) == dt.date(2024, 2, 29)
    assert add_months(dt.date(2023, 1, 31), 1) == dt.date(2023, 2, 28)
    assert add_months(dt.date(2024, 3, 15), 9) == dt.date(2024, 12, 15)
    assert isinstance(add_months(dt.date(2024, 3, 15), 3), dt.date)


def test_add_years_uses_365_days():
    d = dt.date(2024, 1, 1)
    assert add_years(d, 1) == dt.date(2024, 12, 31)
    assert (add_years(d, 2) - d).days == 730
