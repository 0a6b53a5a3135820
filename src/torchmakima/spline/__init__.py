"""Differentiable Makima spline interpolation for PyTorch tensors.

Convenience Functions
---------------------
makima
    Create a Makima interpolator from data (fit + callable).

Makima Splines
--------------
makima_fit
    Fit a Makima spline to data points.
makima_slopes
    Estimate Akima-weighted derivatives at each knot.
makima_evaluate
    Evaluate a Makima spline at query points.
makima_derivative_evaluate
    Evaluate derivatives of a Makima spline at query points.
makima_integral
    Compute definite integral of a Makima spline.
makima_describe
    Render knots, values and slopes as text.

Data Types
----------
MakimaSpline
    Piecewise cubic Hermite interpolant with Akima-weighted slopes.

Exceptions
----------
SplineError
    Base exception for spline operations.
KnotError
    Invalid knot vector.
InsufficientDataError
    Fewer than two data points.
NonMonotonicKnotError
    Knots not strictly increasing.
ShapeMismatchError
    Abscissas and ordinates differ in shape.
ExtrapolationError
    Query point outside spline domain.
"""

# Import base exception first
from ._spline_error import SplineError

# Import exception subclasses
from ._extrapolation_error import ExtrapolationError
from ._insufficient_data_error import InsufficientDataError
from ._knot_error import KnotError
from ._makima import (
    MakimaSpline,
    makima,
    makima_derivative_evaluate,
    makima_describe,
    makima_evaluate,
    makima_fit,
    makima_integral,
    makima_slopes,
)
from ._non_monotonic_knot_error import NonMonotonicKnotError
from ._shape_mismatch_error import ShapeMismatchError

__all__ = [
    "ExtrapolationError",
    "InsufficientDataError",
    "KnotError",
    "MakimaSpline",
    "NonMonotonicKnotError",
    "ShapeMismatchError",
    "SplineError",
    "makima",
    "makima_derivative_evaluate",
    "makima_describe",
    "makima_evaluate",
    "makima_fit",
    "makima_integral",
    "makima_slopes",
]
