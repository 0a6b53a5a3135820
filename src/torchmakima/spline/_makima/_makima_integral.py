"""Makima spline definite integral computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._extrapolation_error import ExtrapolationError

if TYPE_CHECKING:
    from ._makima import MakimaSpline


def makima_integral(
    spline: MakimaSpline,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a Makima spline from a to b.

    Parameters
    ----------
    spline : MakimaSpline
        Input Makima spline
    a : float or Tensor
        Lower bound of integration
    b : float or Tensor
        Upper bound of integration

    Returns
    -------
    integral : Tensor
        Definite integral value, 0-d. Negated when a > b.

    Raises
    ------
    ValueError
        If a bound has more than one element.
    ExtrapolationError
        If either bound lies outside the spline domain.

    Notes
    -----
    On segment [x_k, x_{k+1}] with h = x_{k+1} - x_k the antiderivative
    in terms of u = (x - x_k) / h is

        P(u) = h * [I_00(u)*y_k + I_10(u)*h*d_k + I_01(u)*y_{k+1}
                    + I_11(u)*h*d_{k+1}]

    with I_00(u) = u^4/2 - u^3 + u, I_10(u) = u^4/4 - 2u^3/3 + u^2/2,
    I_01(u) = -u^4/2 + u^3 and I_11(u) = u^4/4 - u^3/3.
    """
    knots = spline.knots
    y_vals = spline.y
    derivatives = spline.dydx
    n_segments = len(knots) - 1

    a = torch.as_tensor(a, dtype=knots.dtype, device=knots.device)
    b = torch.as_tensor(b, dtype=knots.dtype, device=knots.device)

    if a.numel() != 1 or b.numel() != 1:
        raise ValueError(
            f"Integration bounds must be scalars, got shapes "
            f"{tuple(a.shape)} and {tuple(b.shape)}"
        )

    a = a.reshape(())
    b = b.reshape(())

    t_min = knots[0]
    t_max = knots[-1]

    for bound in (a, b):
        if not (t_min <= bound <= t_max):
            raise ExtrapolationError(
                f"Integration bound {bound.item()} outside spline domain "
                f"[{t_min.item()}, {t_max.item()}]"
            )

    sign = 1.0
    if a > b:
        a, b = b, a
        sign = -1.0

    if a == b:
        return torch.zeros((), dtype=knots.dtype, device=knots.device)

    seg_a = torch.searchsorted(knots, a.reshape(1), right=True) - 1
    seg_b = torch.searchsorted(knots, b.reshape(1), right=True) - 1

    seg_a = int(torch.clamp(seg_a, 0, n_segments - 1).item())
    seg_b = int(torch.clamp(seg_b, 0, n_segments - 1).item())

    def antiderivative(u: Tensor, seg_idx: int) -> Tensor:
        y_k = y_vals[seg_idx]
        y_kp1 = y_vals[seg_idx + 1]
        d_k = derivatives[seg_idx]
        d_kp1 = derivatives[seg_idx + 1]
        h = knots[seg_idx + 1] - knots[seg_idx]

        u2 = u * u
        u3 = u2 * u
        u4 = u3 * u

        i_00 = u4 / 2 - u3 + u
        i_10 = u4 / 4 - 2 * u3 / 3 + u2 / 2
        i_01 = -u4 / 2 + u3
        i_11 = u4 / 4 - u3 / 3

        return h * (
            i_00 * y_k + i_10 * h * d_k + i_01 * y_kp1 + i_11 * h * d_kp1
        )

    total = torch.zeros((), dtype=knots.dtype, device=knots.device)

    for seg_idx in range(seg_a, seg_b + 1):
        seg_start = knots[seg_idx]
        seg_end = knots[seg_idx + 1]
        h = seg_end - seg_start

        lower = torch.maximum(a, seg_start)
        upper = torch.minimum(b, seg_end)

        u_lower = (lower - seg_start) / h
        u_upper = (upper - seg_start) / h

        total = total + (
            antiderivative(u_upper, seg_idx) - antiderivative(u_lower, seg_idx)
        )

    return sign * total
