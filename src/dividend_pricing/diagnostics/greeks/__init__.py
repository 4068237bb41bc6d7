from .grid import (
    CellComparison,
    GreeksGrid,
    GridReport,
    build_option,
    compare_greeks,
    run_greeks_grid,
)
from .report import (
    CellFailure,
    SkippedCell,
    ToleranceViolation,
    format_violation,
    records_frame,
    violations_frame,
)

__all__ = [
    "GreeksGrid",
    "GridReport",
    "CellComparison",
    "build_option",
    "compare_greeks",
    "run_greeks_grid",
    "ToleranceViolation",
    "SkippedCell",
    "CellFailure",
    "format_violation",
    "records_frame",
    "violations_frame",
]
