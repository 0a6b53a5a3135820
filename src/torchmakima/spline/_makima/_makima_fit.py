"""Makima fitting: validation and slope estimation."""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Sequence, Union

import torch
from torch import Tensor

from .._insufficient_data_error import InsufficientDataError
from .._knot_error import KnotError
from .._non_monotonic_knot_error import NonMonotonicKnotError
from .._shape_mismatch_error import ShapeMismatchError
from ._makima_slopes import makima_slopes

if TYPE_CHECKING:
    from ._makima import MakimaSpline


def _as_real_tensor(
    values: Union[Tensor, Sequence[float]],
    like: Tensor | None = None,
) -> Tensor:
    if not isinstance(values, Tensor):
        values = torch.as_tensor(values, dtype=torch.float64)

    if not values.is_floating_point():
        values = values.to(torch.get_default_dtype())

    if like is not None:
        values = values.to(dtype=like.dtype, device=like.device)

    return values


def makima_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
) -> MakimaSpline:
    """
    Fit a Makima spline to data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points,).

    Returns
    -------
    MakimaSpline
        Fitted spline. Owns clones of x and y, so later in-place changes
        to the inputs do not reach it.

    Raises
    ------
    KnotError
        If x is not one-dimensional.
    ShapeMismatchError
        If x and y differ in shape.
    InsufficientDataError
        If fewer than 2 points are given.
    NonMonotonicKnotError
        If x is not strictly increasing.

    Warns
    -----
    RuntimeWarning
        If y contains NaN or infinite values.
    """
    x = _as_real_tensor(x)
    y = _as_real_tensor(y, like=x)

    if x.dim() != 1:
        raise KnotError(
            f"Knots must be one-dimensional, got shape {tuple(x.shape)}"
        )
    if y.shape != x.shape:
        raise ShapeMismatchError(
            f"x and y must have same shape, got {x.shape} and {y.shape}"
        )

    n = x.shape[0]

    if n < 2:
        raise InsufficientDataError(f"Need at least 2 points, got {n}")
    if not torch.all(x[1:] > x[:-1]):
        raise NonMonotonicKnotError("Knots must be strictly increasing")

    if not torch.all(torch.isfinite(y)):
        warnings.warn(
            "y contains non-finite values; neighbouring slopes will be "
            "non-finite",
            RuntimeWarning,
            stacklevel=2,
        )

    knots = x.clone()
    values = y.clone()

    dydx = makima_slopes(knots, values)

    from ._makima import MakimaSpline

    return MakimaSpline(
        knots=knots,
        y=values,
        dydx=dydx,
        batch_size=[],
    )
