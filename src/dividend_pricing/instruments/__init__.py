"""dividend_pricing.instruments

Instrument definitions ("what is being priced").

Instruments carry no market data. Pricers take an instrument plus a
:class:`~dividend_pricing.types.MarketState` and return values and Greeks.
"""

from .base import EuropeanExercise, ExerciseStyle
from .dividends import Dividend, DividendSchedule
from .vanilla import DividendVanillaOption, VanillaPayoff

__all__ = [
    "ExerciseStyle",
    "EuropeanExercise",
    "Dividend",
    "DividendSchedule",
    "VanillaPayoff",
    "DividendVanillaOption",
]
