"""Exercise definitions.

Only European exercise is supported: the contract can be exercised on a single
maturity date.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum


class ExerciseStyle(str, Enum):
    """Exercise style for vanilla options."""

    EUROPEAN = "european"


@dataclass(frozen=True, slots=True)
class EuropeanExercise:
    maturity: dt.date

    @property
    def style(self) -> ExerciseStyle:
        return ExerciseStyle.EUROPEAN

    @property
    def last_date(self) -> dt.date:
        return self.maturity
