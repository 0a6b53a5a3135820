"""Makima (modified Akima) piecewise cubic Hermite spline module."""

from ._makima import MakimaSpline, makima
from ._makima_derivative import makima_derivative_evaluate
from ._makima_describe import makima_describe
from ._makima_evaluate import makima_evaluate
from ._makima_fit import makima_fit
from ._makima_integral import makima_integral
from ._makima_slopes import makima_slopes

__all__ = [
    "MakimaSpline",
    "makima",
    "makima_derivative_evaluate",
    "makima_describe",
    "makima_evaluate",
    "makima_fit",
    "makima_integral",
    "makima_slopes",
]
