"""Makima spline evaluation using the factored cubic Hermite form."""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

if TYPE_CHECKING:
    from ._makima import MakimaSpline


def _locate(knots: Tensor, t: Tensor) -> Tuple[Tensor, Tensor]:
    """
    Check the domain and find the segment of each flattened query point.

    Returns the flattened queries and indices k with
    knots[k] <= t < knots[k+1], except at the right end where k = n - 2.
    """
    t_flat = t.flatten()

    t_min = knots[0]
    t_max = knots[-1]

    # NaN fails both comparisons, so it is rejected too
    inside = (t_flat >= t_min) & (t_flat <= t_max)
    if not torch.all(inside):
        raise ExtrapolationError(
            f"Query points outside spline domain [{t_min.item()}, {t_max.item()}]"
        )

    # First knot strictly greater than t, minus one
    segment_idx = torch.searchsorted(knots, t_flat, right=True) - 1

    n_segments = len(knots) - 1
    segment_idx = torch.clamp(segment_idx, 0, n_segments - 1)

    return t_flat, segment_idx


def _as_query(spline: MakimaSpline, t: Union[Tensor, float]) -> Tensor:
    knots = spline.knots
    return torch.as_tensor(t, dtype=knots.dtype, device=knots.device)


def makima_evaluate(
    spline: MakimaSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a Makima spline at query points.

    On segment [x_k, x_{k+1}] with dx = x_{k+1} - x_k and
    u = (t - x_k) / dx, the interpolant is

        p(t) = (1-u)^2 * (y_k*(1+2u) + s_k*(t - x_k))
             + u^2 * (y_{k+1}*(3-2u) + dx*s_{k+1}*(u-1))

    which is the standard Hermite form
    H_00(u)*y_k + H_10(u)*dx*s_k + H_01(u)*y_{k+1} + H_11(u)*dx*s_{k+1}
    with the (1-u)^2 and u^2 factors pulled out.

    Parameters
    ----------
    spline : MakimaSpline
        Fitted spline from makima_fit
    t : Tensor or float
        Query points, any shape, or a scalar

    Returns
    -------
    y : Tensor
        Interpolated values, same shape as t (0-d for scalar queries)

    Raises
    ------
    ExtrapolationError
        If any query point is outside [knots[0], knots[-1]] or is NaN.
    """
    knots = spline.knots
    y_vals = spline.y
    derivatives = spline.dydx

    t = _as_query(spline, t)

    query_shape = t.shape
    t_flat, segment_idx = _locate(knots, t)

    x_k = knots[segment_idx]
    dx = knots[segment_idx + 1] - x_k

    offset = t_flat - x_k
    u = offset / dx

    y_k = y_vals[segment_idx]
    y_kp1 = y_vals[segment_idx + 1]
    s_k = derivatives[segment_idx]
    s_kp1 = derivatives[segment_idx + 1]

    one_minus_u = 1 - u

    y = one_minus_u * one_minus_u * (y_k * (1 + 2 * u) + s_k * offset) + (
        u * u * (y_kp1 * (3 - 2 * u) + dx * s_kp1 * (u - 1))
    )

    # The last knot is returned as stored rather than through u == 1; the
    # zero offset term keeps the one-sided slope as the gradient in t
    at_end = t_flat == knots[-1]
    y = torch.where(at_end, y_vals[-1] + s_kp1 * (t_flat - knots[-1]), y)

    return y.view(query_shape)
