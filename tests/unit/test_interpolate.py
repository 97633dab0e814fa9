"""Unit tests for clamped piecewise-linear interpolation."""

import pytest

from framecast.errors import ConfigurationError
from framecast.timeline import Extrapolate, clamped_lerp, ease_in_out, ease_out, quad, sine


class TestClampedLerp:
    def test_inside_range(self) -> None:
        assert clamped_lerp(50, [0, 100], [0, 1]) == pytest.approx(0.5)

    def test_clamp_right(self) -> None:
        assert clamped_lerp(150, [0, 100], [0, 1], "clamp", "clamp") == 1.0

    def test_extend_right(self) -> None:
        assert clamped_lerp(150, [0, 100], [0, 1], "clamp", "extend") == pytest.approx(1.5)

    def test_extend_left(self) -> None:
        assert clamped_lerp(-50, [0, 100], [0, 1], Extrapolate.EXTEND) == pytest.approx(-0.5)

    def test_sides_are_independent(self) -> None:
        assert clamped_lerp(-50, [0, 100], [0, 1], "clamp", "extend") == 0.0
        assert clamped_lerp(150, [0, 100], [0, 1], "extend", "clamp") == 1.0

    def test_multiple_breakpoints(self) -> None:
        ramp = [0, 10, 90, 100]
        values = [0, 1, 1, 0]
        assert clamped_lerp(5, ramp, values) == pytest.approx(0.5)
        assert clamped_lerp(50, ramp, values) == pytest.approx(1.0)
        assert clamped_lerp(95, ramp, values) == pytest.approx(0.5)

    def test_breakpoints_hit_exactly(self) -> None:
        assert clamped_lerp(0, [0, 10, 20], [3, 7, 11]) == 3.0
        assert clamped_lerp(10, [0, 10, 20], [3, 7, 11]) == 7.0
        assert clamped_lerp(20, [0, 10, 20], [3, 7, 11]) == 11.0

    def test_repeated_breakpoint_is_a_step(self) -> None:
        steps = [0, 10, 10, 20]
        values = [0, 0, 1, 1]
        assert clamped_lerp(9.99, steps, values) == 0.0
        assert clamped_lerp(10, steps, values) == 1.0

    def test_descending_outputs(self) -> None:
        assert clamped_lerp(25, [0, 100], [160, 0]) == pytest.approx(120.0)

    def test_easing_shapes_span(self) -> None:
        assert clamped_lerp(5, [0, 10], [0, 100], easing=quad) == pytest.approx(25.0)
        assert clamped_lerp(5, [0, 10], [0, 100], easing=ease_out(quad)) == pytest.approx(75.0)

    def test_extension_applies_easing(self) -> None:
        value = clamped_lerp(20, [0, 10], [0, 10], extrapolate_right="extend", easing=quad)
        assert value == pytest.approx(40.0)

    def test_extension_applies_easing_on_the_left(self) -> None:
        value = clamped_lerp(-10, [0, 10], [0, 10], extrapolate_left="extend", easing=quad)
        assert value == pytest.approx(10.0)

    def test_extended_sine_keeps_bobbing(self) -> None:
        bob = ease_in_out(sine)
        values = [
            clamped_lerp(frame, [0, 140], [0.0, 18.0], extrapolate_right="extend", easing=bob)
            for frame in (280, 420, 700)
        ]
        assert values == pytest.approx([0.0, 18.0, 18.0], abs=1e-9)

    def test_extended_sine_stays_within_outputs(self) -> None:
        bob = ease_in_out(sine)
        for frame in range(0, 2000, 7):
            value = clamped_lerp(
                frame, [0, 140], [0.0, 18.0], extrapolate_right="extend", easing=bob,
            )
            assert -1e-9 <= value <= 18.0 + 1e-9

    def test_returns_float(self) -> None:
        assert isinstance(clamped_lerp(5, [0, 10], [0, 10]), float)


class TestClampedLerpValidation:
    def test_mismatched_lengths(self) -> None:
        with pytest.raises(ConfigurationError, match="same length"):
            clamped_lerp(1, [0, 1, 2], [0, 1])

    def test_decreasing_breakpoints(self) -> None:
        with pytest.raises(ConfigurationError, match="non-decreasing"):
            clamped_lerp(1, [0, 10, 5], [0, 1, 2])

    def test_too_few_breakpoints(self) -> None:
        with pytest.raises(ConfigurationError, match="two breakpoints"):
            clamped_lerp(1, [0], [0])

    def test_non_finite_breakpoint(self) -> None:
        with pytest.raises(ConfigurationError, match="finite"):
            clamped_lerp(1, [0, float("inf")], [0, 1])

    def test_unknown_edge_mode(self) -> None:
        with pytest.raises(ConfigurationError, match="extrapolation"):
            clamped_lerp(1, [0, 10], [0, 1], extrapolate_right="wrap")

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            clamped_lerp(1, [1, 0], [0, 1])
