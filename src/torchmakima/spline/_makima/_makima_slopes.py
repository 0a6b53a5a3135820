"""Slope estimation for modified Akima (Makima) interpolation."""

import torch
from torch import Tensor


def makima_slopes(x: Tensor, y: Tensor) -> Tensor:
    """
    Estimate the first derivative at each knot using Akima weighting.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Strictly increasing, n_points >= 2.
    y : Tensor
        Values at knots, shape (n_points,).

    Returns
    -------
    dydx : Tensor
        Derivative estimates, shape (n_points,).

    Notes
    -----
    With secants m[k] = (y[k+1] - y[k]) / (x[k+1] - x[k]), the slope at
    knot i is

        w1 = |m[i+1] - m[i]|
        w2 = |m[i-1] - m[i-2]|
        s[i] = (w1 * m[i-1] + w2 * m[i]) / (w1 + w2)

    so the secant pair that changes least dominates the estimate. Where
    w1 + w2 == 0 the slope is the mean (m[i-1] + m[i]) / 2.

    The rule needs two secants on each side. At the boundaries:

    - knots 1 and n-2 use one reflected secant on each side,
      m[-1] = 2*m[0] - m[1] and m[n-1] = 2*m[n-2] - m[n-3];
    - knots 0 and n-1 take the adjacent secant, s[0] = m[0] and
      s[n-1] = m[n-2];
    - with two points both slopes equal the only secant.

    References
    ----------
    Akima, H. (1970). "A New Method of Interpolation and Smooth Curve
    Fitting Based on Local Procedures". Journal of the ACM. 17 (4): 589-602.
    """
    n = x.shape[0]

    h = x[1:] - x[:-1]  # (n-1,)
    m = (y[1:] - y[:-1]) / h  # (n-1,)

    if n == 2:
        return torch.cat([m, m])

    # Reflect one secant past each end: (n+1,), padded[j] == m[j-1]
    left = 2 * m[:1] - m[1:2]
    right = 2 * m[-1:] - m[-2:-1]
    padded = torch.cat([left, m, right])

    # Windows for knots 1..n-2
    m_im2 = padded[:-3]
    m_im1 = padded[1:-2]
    m_i = padded[2:-1]
    m_ip1 = padded[3:]

    w1 = torch.abs(m_ip1 - m_i)
    w2 = torch.abs(m_im1 - m_im2)
    wsum = w1 + w2

    flat = wsum == 0
    wsum_safe = torch.where(flat, torch.ones_like(wsum), wsum)

    weighted = (w1 * m_im1 + w2 * m_i) / wsum_safe
    inner = torch.where(flat, (m_im1 + m_i) / 2, weighted)

    return torch.cat([m[:1], inner, m[-1:]])
