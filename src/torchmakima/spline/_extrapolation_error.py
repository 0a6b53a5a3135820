from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when a query point lies outside the spline domain."""

    pass
