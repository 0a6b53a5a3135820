from ._knot_error import KnotError


class InsufficientDataError(KnotError):
    """Raised when fewer than two samples are supplied."""

    pass
