from ._spline_error import SplineError


class ShapeMismatchError(SplineError, ValueError):
    """Raised when abscissas and ordinates differ in shape."""

    pass
