"""Property-based tests for Makima interpolation."""

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchmakima.testing.strategies import knot_sequences, real_numbers


class TestMakimaProperties:
    @hypothesis.given(data=knot_sequences())
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_passes_through_knots(self, data):
        from torchmakima.spline import makima_evaluate, makima_fit

        x, y = data
        spline = makima_fit(x, y)

        assert torch.equal(makima_evaluate(spline, x), y)

    @hypothesis.given(data=knot_sequences())
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_slopes_are_finite(self, data):
        from torchmakima.spline import makima_fit

        x, y = data
        spline = makima_fit(x, y)

        assert spline.dydx.shape == x.shape
        assert torch.all(torch.isfinite(spline.dydx))

    @hypothesis.given(
        data=knot_sequences(),
        offset=hypothesis.strategies.floats(min_value=1e-6, max_value=1e3),
    )
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_outside_domain_raises(self, data, offset):
        from torchmakima.spline import (
            ExtrapolationError,
            makima_evaluate,
            makima_fit,
        )

        x, y = data
        spline = makima_fit(x, y)

        with pytest.raises(ExtrapolationError):
            makima_evaluate(spline, x[0].item() - offset)

        with pytest.raises(ExtrapolationError):
            makima_evaluate(spline, x[-1].item() + offset)

    @hypothesis.given(
        data=knot_sequences(),
        extra=hypothesis.strategies.integers(0, 3),
    )
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_length_mismatch_raises(self, data, extra):
        from torchmakima.spline import ShapeMismatchError, makima_fit

        x, y = data
        y = torch.cat([y, torch.zeros(extra + 1, dtype=y.dtype)])

        with pytest.raises(ShapeMismatchError):
            makima_fit(x, y)

    @hypothesis.given(
        data=knot_sequences(min_size=3),
        index=hypothesis.strategies.integers(0, 100),
    )
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_repeated_knot_raises(self, data, index):
        from torchmakima.spline import NonMonotonicKnotError, makima_fit

        x, y = data
        i = 1 + index % (x.shape[0] - 1)
        x = x.clone()
        x[i] = x[i - 1]

        with pytest.raises(NonMonotonicKnotError):
            makima_fit(x, y)

    @hypothesis.given(
        data=knot_sequences(),
        slope=real_numbers(-10.0, 10.0),
        intercept=real_numbers(-100.0, 100.0),
    )
    @hypothesis.settings(deadline=None, max_examples=50)
    def test_reproduces_lines(self, data, slope, intercept):
        from torchmakima.spline import makima_evaluate, makima_fit

        x, _ = data
        y = slope * x + intercept

        spline = makima_fit(x, y)

        t = (x[:-1] + x[1:]) / 2
        torch.testing.assert_close(
            makima_evaluate(spline, t),
            slope * t + intercept,
            atol=1e-8,
            rtol=1e-8,
        )
