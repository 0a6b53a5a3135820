from ._spline_error import SplineError


class KnotError(SplineError):
    """Raised for invalid knot vectors (wrong rank, too few, unordered)."""

    pass
