"""Damped-spring progress for entrance motion.

The spring is a unit mass-spring-damper released from 0 towards a rest
position of 1 with no initial velocity. Its response is evaluated in
closed form, so the value for any frame is independent of every other
frame and can be computed in any order.
"""

from __future__ import annotations

import math
import numbers

from framecast.errors import ConfigurationError, OutOfRangeError

DEFAULT_DAMPING = 12.0
DEFAULT_STIFFNESS = 150.0
DEFAULT_MASS = 1.0

# Damping ratios this close to 1 use the critically damped form.
_CRITICAL_TOLERANCE = 1e-9


def _require_positive(name: str, value: float) -> None:
    is_real = isinstance(value, numbers.Real) and not isinstance(value, bool)
    if not (is_real and math.isfinite(value) and value > 0):
        raise ConfigurationError(f"Spring {name} must be a positive number, got {value!r}")


def spring_progress(
    elapsed_frames: float,
    fps: float,
    damping: float = DEFAULT_DAMPING,
    stiffness: float = DEFAULT_STIFFNESS,
    mass: float = DEFAULT_MASS,
    overshoot_clamping: bool = True,
) -> float:
    """Return spring progress after ``elapsed_frames`` frames.

    Time is ``elapsed_frames / fps`` seconds. Springs do not run before
    they start: any ``elapsed_frames <= 0`` yields ``0.0``, which lets
    callers stagger entrances with ``frame - i * stagger`` directly.

    With ``overshoot_clamping`` (the default) an under-damped spring holds
    at ``1.0`` from the first moment it reaches its rest position, so the
    curve is non-decreasing and never leaves ``[0, 1]``. Without it the raw
    oscillating response is returned.

    Args:
        elapsed_frames: Frames since the spring started. May be negative.
        fps: Frames per second of the composition.
        damping: Damping coefficient.
        stiffness: Spring constant.
        mass: Mass on the spring.
        overshoot_clamping: Hold at 1 once the rest position is reached.

    Returns:
        Progress from 0 towards 1.

    Raises:
        ConfigurationError: If fps or a spring parameter is not positive.
        OutOfRangeError: If ``elapsed_frames`` is NaN.
    """
    _require_positive("fps", fps)
    _require_positive("damping", damping)
    _require_positive("stiffness", stiffness)
    _require_positive("mass", mass)
    if math.isnan(elapsed_frames):
        raise OutOfRangeError("Spring elapsed frames must be a number, got NaN")

    if elapsed_frames <= 0:
        return 0.0
    if math.isinf(elapsed_frames):
        return 1.0

    t = float(elapsed_frames) / float(fps)
    omega = math.sqrt(stiffness / mass)
    zeta = damping / (2.0 * math.sqrt(stiffness * mass))

    if abs(zeta - 1.0) < _CRITICAL_TOLERANCE:
        return 1.0 - math.exp(-omega * t) * (1.0 + omega * t)

    if zeta > 1.0:
        root = math.sqrt(zeta * zeta - 1.0)
        r1 = -omega * (zeta - root)
        r2 = -omega * (zeta + root)
        return 1.0 - (r2 * math.exp(r1 * t) - r1 * math.exp(r2 * t)) / (r2 - r1)

    decay = zeta * omega
    omega_d = omega * math.sqrt(1.0 - zeta * zeta)
    if overshoot_clamping:
        # First time the response crosses its rest position.
        first_crossing = (math.pi - math.atan2(omega_d, decay)) / omega_d
        if t >= first_crossing:
            return 1.0
    value = 1.0 - math.exp(-decay * t) * (
        math.cos(omega_d * t) + (decay / omega_d) * math.sin(omega_d * t)
    )
    if overshoot_clamping:
        return min(value, 1.0)
    return value
