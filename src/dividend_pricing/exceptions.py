class DomainError(ValueError):
    """Raised when pricing inputs fall outside the model's domain.

    The analytic dividend engine raises this for a negative volatility, a
    non-positive strike or spot, a maturity before the valuation date, a
    dividend paid outside ``(valuation_date, maturity]`` or dividends whose
    present value wipes out the spot.

    Notes
    -----
    The error is fatal to the single pricing call that produced it. The grid
    runner records it against the offending cell and moves on to the next one.
    """


class GreeksMismatchError(AssertionError):
    """Raised when analytic Greeks disagree with their finite-difference estimates.

    Carries the tolerance violations collected during a grid sweep so that a
    single failure surfaces every mismatch found in the run.
    """

    def __init__(self, violations) -> None:
        from .diagnostics.greeks.report import format_violation

        self.violations = tuple(violations)
        lines = [f"{len(self.violations)} Greek(s) outside tolerance"]
        lines.extend(format_violation(v) for v in self.violations)
        super().__init__("\n\n".join(lines))
