"""Vectorized sampling of frame functions.

Handy for inspecting curves (spring shapes, fade ramps) across a whole
frame range and for asserting shape properties in bulk.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import numpy as np


def sample_curve(
    fn: Callable[[int], float],
    frames: Iterable[int] | int,
) -> np.ndarray:
    """Evaluate ``fn`` at each frame and return a float64 array.

    Args:
        fn: Any pure function of a frame index.
        frames: An iterable of frames, or a count meaning ``range(count)``.
    """
    if isinstance(frames, int):
        frames = range(frames)
    return np.fromiter((fn(f) for f in frames), dtype=np.float64)


def is_non_decreasing(values: np.ndarray, tolerance: float = 0.0) -> bool:
    """True if no step goes down by more than ``tolerance``."""
    if values.size < 2:
        return True
    return bool(np.all(np.diff(values) >= -tolerance))


def is_non_increasing(values: np.ndarray, tolerance: float = 0.0) -> bool:
    """True if no step goes up by more than ``tolerance``."""
    if values.size < 2:
        return True
    return bool(np.all(np.diff(values) <= tolerance))


def within_unit_interval(values: np.ndarray) -> bool:
    """True if every value lies in ``[0, 1]``."""
    return bool(np.all((values >= 0.0) & (values <= 1.0)))
