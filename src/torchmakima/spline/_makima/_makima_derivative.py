"""Makima spline derivative evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ._makima_evaluate import _as_query, _locate

if TYPE_CHECKING:
    from ._makima import MakimaSpline


def makima_derivative_evaluate(
    spline: MakimaSpline,
    t: Union[Tensor, float],
    order: int = 1,
) -> Tensor:
    """
    Evaluate the derivative of a Makima spline directly at query points.

    Parameters
    ----------
    spline : MakimaSpline
        Fitted spline from makima_fit
    t : Tensor or float
        Query points, any shape, or a scalar
    order : int
        Derivative order (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative_values : Tensor
        Derivative values at query points, same shape as t

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.
    ExtrapolationError
        If any query point is outside the spline domain.

    Notes
    -----
    Each segment is rewritten in powers of r = t - x_k,

        p(r) = y_k + s_k*r + c2*r^2 + c3*r^3
        c2 = (3*delta - 2*s_k - s_{k+1}) / h
        c3 = (s_k + s_{k+1} - 2*delta) / h^2

    with delta = (y_{k+1} - y_k) / h, and differentiated term by term.
    The first derivative is continuous and equals dydx at every knot.
    Second and third derivatives are piecewise; at an interior knot the
    right-hand segment is used, at the last knot the last segment.
    """
    if order not in (1, 2, 3):
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    knots = spline.knots
    y_vals = spline.y
    derivatives = spline.dydx

    t = _as_query(spline, t)

    query_shape = t.shape
    t_flat, segment_idx = _locate(knots, t)

    x_k = knots[segment_idx]
    h = knots[segment_idx + 1] - x_k
    r = t_flat - x_k

    s_k = derivatives[segment_idx]
    s_kp1 = derivatives[segment_idx + 1]
    delta = (y_vals[segment_idx + 1] - y_vals[segment_idx]) / h

    c2 = (3 * delta - 2 * s_k - s_kp1) / h
    c3 = (s_k + s_kp1 - 2 * delta) / (h * h)

    if order == 1:
        result = s_k + r * (2 * c2 + 3 * c3 * r)
    elif order == 2:
        result = 2 * c2 + 6 * c3 * r
    else:
        result = 6 * c3 + 0 * r

    return result.view(query_shape)
