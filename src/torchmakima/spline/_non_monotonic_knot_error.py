from ._knot_error import KnotError


class NonMonotonicKnotError(KnotError):
    """Raised when abscissas are not strictly increasing."""

    pass
