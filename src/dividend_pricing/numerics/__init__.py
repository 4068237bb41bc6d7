"""
Numerical building blocks (advanced API).

Finite-difference estimates used to cross-check the analytic Greeks.
"""

from .finite_diff import finite_diff_greeks, is_negligible, relative_error

__all__ = [
    "finite_diff_greeks",
    "is_negligible",
    "relative_error",
]
