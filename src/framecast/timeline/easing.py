"""Easing curves for interpolation.

Every curve maps normalized time in [0, 1] to eased progress with
``f(0) == 0`` and ``f(1) == 1``. The base curves are "ease in" shaped;
wrap them with :func:`ease_out` or :func:`ease_in_out` to change where the
acceleration happens, e.g. ``ease_out(cubic)``.
"""

from __future__ import annotations

import math
from collections.abc import Callable

EasingFn = Callable[[float], float]


def linear(t: float) -> float:
    return t


def quad(t: float) -> float:
    return t * t


def cubic(t: float) -> float:
    return t * t * t


def sine(t: float) -> float:
    return 1.0 - math.cos(t * math.pi / 2.0)


def ease_in(easing: EasingFn) -> EasingFn:
    """Return the curve unchanged; accelerates from rest."""
    return easing


def ease_out(easing: EasingFn) -> EasingFn:
    """Mirror the curve so it decelerates into the end value."""

    def _eased(t: float) -> float:
        return 1.0 - easing(1.0 - t)

    return _eased


def ease_in_out(easing: EasingFn) -> EasingFn:
    """Accelerate through the first half and decelerate through the second."""

    def _eased(t: float) -> float:
        if t < 0.5:
            return easing(t * 2.0) / 2.0
        return 1.0 - easing((1.0 - t) * 2.0) / 2.0

    return _eased
