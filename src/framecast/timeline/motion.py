"""Per-element motion helpers shared by the scene evaluators.

Each helper is a pure function of the frame number and static
parameters. None of them look at segment boundaries unless told to.
"""

from __future__ import annotations

import math
from enum import StrEnum

from framecast.errors import ConfigurationError

from .interpolate import clamped_lerp
from .spring import DEFAULT_DAMPING, DEFAULT_MASS, DEFAULT_STIFFNESS, spring_progress


def oscillate(
    frame: float,
    period: float,
    amplitude: float,
    phase: float = 0.0,
) -> float:
    """Continuous drift: ``sin((frame + phase) / period) * amplitude``."""
    if period == 0:
        raise ConfigurationError("Oscillation period must be non-zero")
    return math.sin((frame + phase) / period) * amplitude


def pulse(frame: float, period: float, low: float, high: float, phase: float = 0.0) -> float:
    """Map a sine wave onto ``[low, high]``, e.g. for a blinking caret."""
    return clamped_lerp(oscillate(frame, period, 1.0, phase), [-1.0, 1.0], [low, high])


def staggered_spring(
    frame: int,
    index: int,
    stagger_frames: float,
    fps: float,
    *,
    delay: float = 0.0,
    damping: float = DEFAULT_DAMPING,
    stiffness: float = DEFAULT_STIFFNESS,
    mass: float = DEFAULT_MASS,
    overshoot_clamping: bool = True,
) -> float:
    """Spring progress for element ``index`` of a staggered group.

    Element ``i`` starts its spring at ``delay + i * stagger_frames``.
    Pass ``overshoot_clamping=False`` to let each element bounce past 1.
    """
    return spring_progress(
        frame - delay - index * stagger_frames,
        fps,
        damping=damping,
        stiffness=stiffness,
        mass=mass,
        overshoot_clamping=overshoot_clamping,
    )


def composition_progress(frame: int, duration_in_frames: int) -> float:
    """Overall progress through a composition, reaching 1 on its last frame."""
    if duration_in_frames <= 1:
        return 1.0
    return min(1.0, frame / (duration_in_frames - 1))


def scroll_offset(frame: float, scroll_frames: int, distance: float) -> float:
    """Linear scroll that travels ``distance`` over the first ``scroll_frames``."""
    if scroll_frames <= 0:
        raise ConfigurationError(f"Scroll length must be positive, got {scroll_frames!r}")
    return min(max(frame, 0), scroll_frames) / scroll_frames * distance


class RevealMode(StrEnum):
    """How a line of text appears."""

    TYPE = "type"
    PASTE = "paste"


PASTE_FRAMES = 12


def revealed_count(
    text: str,
    frame: int,
    start_frame: int,
    mode: RevealMode | str = RevealMode.TYPE,
    frames_per_char: int = 3,
) -> int:
    """Number of characters of ``text`` visible at ``frame``.

    ``type`` reveals one character every ``frames_per_char`` frames from
    ``start_frame``. ``paste`` reveals the whole line over a fixed
    ``PASTE_FRAMES`` ramp.
    """
    if frames_per_char <= 0:
        raise ConfigurationError(
            f"frames_per_char must be positive, got {frames_per_char!r}"
        )
    if RevealMode(mode) is RevealMode.PASTE:
        reveal = clamped_lerp(frame, [start_frame, start_frame + PASTE_FRAMES], [0.0, 1.0])
        return math.floor(reveal * len(text))
    elapsed = max(0, frame - start_frame)
    return min(len(text), elapsed // frames_per_char)


def typed_text(text: str, local_frame: float, type_frames: float) -> str:
    """Prefix of ``text`` typed after ``local_frame`` of ``type_frames``.

    The full string is shown once ``local_frame >= type_frames``.
    """
    if type_frames <= 0:
        return text
    count = clamped_lerp(local_frame, [0, type_frames], [0, len(text)])
    return text[: max(0, math.floor(count))]


def typewriter(text: str, progress: float) -> str:
    """Prefix of ``text`` proportional to ``progress`` in ``[0, 1]``."""
    clamped = min(max(progress, 0.0), 1.0)
    return text[: math.floor(len(text) * clamped)]


def pseudo_random(seed: float) -> float:
    """Deterministic value in ``[0, 1)`` derived from ``seed``.

    Seed it with a stable index (a block or star number), never with
    anything that depends on call order.
    """
    x = math.sin(seed) * 10000.0
    return x - math.floor(x)


def wrap(value: float, modulus: float) -> float:
    """Positive remainder, for positions that loop across the frame."""
    return value % modulus
