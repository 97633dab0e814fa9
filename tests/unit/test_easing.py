"""Unit tests for easing curves."""

import pytest

from framecast.timeline import cubic, ease_in, ease_in_out, ease_out, linear, quad, sine

ALL_CURVES = [
    linear,
    quad,
    cubic,
    sine,
    ease_in(cubic),
    ease_out(cubic),
    ease_in_out(sine),
    ease_in_out(quad),
]


class TestEasing:
    @pytest.mark.parametrize("curve", ALL_CURVES)
    def test_endpoints(self, curve) -> None:
        assert curve(0.0) == pytest.approx(0.0)
        assert curve(1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("curve", ALL_CURVES)
    def test_monotonic(self, curve) -> None:
        samples = [curve(i / 50) for i in range(51)]
        assert all(b >= a - 1e-12 for a, b in zip(samples, samples[1:]))

    def test_ease_out_cubic(self) -> None:
        assert ease_out(cubic)(0.5) == pytest.approx(0.875)

    def test_ease_in_out_is_symmetric(self) -> None:
        curve = ease_in_out(quad)
        assert curve(0.25) == pytest.approx(0.125)
        assert curve(0.5) == pytest.approx(0.5)
        assert curve(0.75) == pytest.approx(0.875)
