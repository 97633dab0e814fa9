"""Clamped piecewise-linear interpolation over breakpoints.

This is the workhorse of every composition: opacities, offsets, scales and
character counts are all produced by mapping a frame number through a list
of breakpoints onto a list of output values.
"""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from enum import StrEnum

from framecast.errors import ConfigurationError

from .easing import EasingFn


class Extrapolate(StrEnum):
    """Behaviour outside the breakpoint range, chosen per side."""

    CLAMP = "clamp"
    EXTEND = "extend"


def _edge_mode(mode: Extrapolate | str, side: str) -> Extrapolate:
    try:
        return Extrapolate(mode)
    except ValueError:
        raise ConfigurationError(
            f"Unknown {side} extrapolation mode {mode!r}. "
            f"Valid: {[m.value for m in Extrapolate]}"
        ) from None


def validate_ranges(
    input_range: Sequence[float],
    output_range: Sequence[float],
) -> None:
    """Check that a breakpoint table is usable for interpolation.

    Raises:
        ConfigurationError: If the ranges differ in length, have fewer than
            two entries, contain non-finite numbers, or the input breakpoints
            decrease anywhere.
    """
    if len(input_range) != len(output_range):
        raise ConfigurationError(
            f"inputRange ({len(input_range)} values) and outputRange "
            f"({len(output_range)} values) must have the same length"
        )
    if len(input_range) < 2:
        raise ConfigurationError(
            f"At least two breakpoints are required, got {len(input_range)}"
        )
    for value in (*input_range, *output_range):
        if not math.isfinite(value):
            raise ConfigurationError(f"Breakpoints must be finite, got {value!r}")
    for i in range(1, len(input_range)):
        if input_range[i] < input_range[i - 1]:
            raise ConfigurationError(
                "inputRange must be non-decreasing, but "
                f"{input_range[i - 1]} is followed by {input_range[i]}"
            )


def clamped_lerp(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    extrapolate_left: Extrapolate | str = Extrapolate.CLAMP,
    extrapolate_right: Extrapolate | str = Extrapolate.CLAMP,
    easing: EasingFn | None = None,
) -> float:
    """Interpolate ``value`` against breakpoints.

    Inside the range the result is the linear mix of the two outputs whose
    breakpoints bracket ``value`` (after ``easing``, if given). Repeated
    breakpoints form a step: a value sitting exactly on the repeated
    breakpoint takes the later output. Outside the range each side follows
    its own edge mode: ``clamp`` holds the endpoint output, ``extend``
    keeps mapping through the outermost span. The eased position there is
    ``easing(t)`` for the raw ``t`` beyond 0 or 1, so an oscillating curve
    such as ``ease_in_out(sine)`` keeps oscillating instead of growing
    linearly.

    Args:
        value: The input to map, usually a frame number.
        input_range: Non-decreasing breakpoints, at least two.
        output_range: Output value at each breakpoint.
        extrapolate_left: Edge mode below the first breakpoint.
        extrapolate_right: Edge mode above the last breakpoint.
        easing: Optional curve applied to the position within a span.

    Returns:
        The interpolated value.

    Raises:
        ConfigurationError: On a malformed breakpoint table or unknown mode.

    Example:
        >>> clamped_lerp(150, [0, 100], [0, 1])
        1.0
        >>> clamped_lerp(150, [0, 100], [0, 1], extrapolate_right="extend")
        1.5
        >>> clamped_lerp(20, [0, 10], [0, 10], extrapolate_right="extend", easing=quad)
        40.0
    """
    validate_ranges(input_range, output_range)
    left = _edge_mode(extrapolate_left, "left")
    right = _edge_mode(extrapolate_right, "right")

    first, last = input_range[0], input_range[-1]
    if value < first:
        if left is Extrapolate.CLAMP:
            return float(output_range[0])
        return _linear(value, input_range[0], input_range[1],
                       output_range[0], output_range[1], output_range[0], easing)
    if value > last:
        if right is Extrapolate.CLAMP:
            return float(output_range[-1])
        return _linear(value, input_range[-2], input_range[-1],
                       output_range[-2], output_range[-1], output_range[-1], easing)

    # Rightmost span whose start is <= value, kept inside the table.
    span = min(max(bisect_right(input_range, value) - 1, 0), len(input_range) - 2)
    x0, x1 = input_range[span], input_range[span + 1]
    y0, y1 = output_range[span], output_range[span + 1]
    if x1 == x0:
        return float(y1)
    t = (value - x0) / (x1 - x0)
    if easing is not None:
        t = easing(t)
    return float(y0 + (y1 - y0) * t)


def _linear(
    value: float,
    x0: float,
    x1: float,
    y0: float,
    y1: float,
    flat: float,
    easing: EasingFn | None,
) -> float:
    # A zero-width outer span has no slope to extend.
    if x1 == x0:
        return float(flat)
    t = (value - x0) / (x1 - x0)
    if easing is not None:
        t = easing(t)
    return float(y0 + (y1 - y0) * t)
