"""Text rendering of a fitted Makima spline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._makima import MakimaSpline


def makima_describe(spline: MakimaSpline) -> str:
    """
    List every knot of a Makima spline with its value and slope.

    Parameters
    ----------
    spline : MakimaSpline
        Fitted spline from makima_fit

    Returns
    -------
    text : str
        ``"(x,y,y') = {(x0, y0, s0),  (x1, y1, s1),  ...}"`` in knot order.

    Examples
    --------
    >>> spline = makima_fit([0.0, 1.0], [0.0, 2.0])
    >>> makima_describe(spline)
    "(x,y,y') = {(0.0, 0.0, 2.0),  (1.0, 2.0, 2.0)}"
    """
    rows = zip(
        spline.knots.tolist(),
        spline.y.tolist(),
        spline.dydx.tolist(),
    )
    entries = ",  ".join(f"({x}, {y}, {s})" for x, y, s in rows)
    return f"(x,y,y') = {{{entries}}}"
