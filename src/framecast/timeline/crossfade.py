"""Crossfade opacity at segment boundaries.

Segments are evaluated independently: each one computes its own fade-in
and fade-out ramp. Blending two overlapping segments together is left to
whoever composites their output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .interpolate import clamped_lerp
from .segments import SegmentResolution


class FadeWindow(BaseModel):
    """Number of frames used for the ramps at a segment's start and end."""

    model_config = ConfigDict(frozen=True)

    in_frames: int = Field(default=10, ge=0, description="Fade-in ramp length")
    out_frames: int = Field(default=10, ge=0, description="Fade-out ramp length")


def _rising(local_frame: float, in_frames: int) -> float:
    if in_frames == 0:
        return 1.0 if local_frame >= 0 else 0.0
    return clamped_lerp(local_frame, [0, in_frames], [0.0, 1.0])


def _falling(local_frame: float, length: int, out_frames: int) -> float:
    if out_frames == 0:
        return 1.0 if local_frame < length else 0.0
    return clamped_lerp(local_frame, [length - out_frames, length], [1.0, 0.0])


def ramp_opacity(local_frame: float, length: int, window: FadeWindow) -> float:
    """Opacity at ``local_frame`` of a segment ``length`` frames long.

    The rising and falling ramps are evaluated separately and the lower
    one wins, so windows longer than the segment never overshoot.
    """
    rising = _rising(local_frame, window.in_frames)
    falling = _falling(local_frame, length, window.out_frames)
    return min(rising, falling)


def crossfade_opacity(resolution: SegmentResolution, window: FadeWindow) -> float:
    """Opacity of the active segment for a resolved frame.

    Equivalent to ``clamped_lerp(local, [0, in, len - out, len], [0, 1, 1, 0])``
    when the two ramps do not overlap.
    """
    return ramp_opacity(resolution.local_frame, resolution.length, window)


def fade_in_out(
    frame: float,
    start: float,
    end: float,
    fade_in: int = 10,
    fade_out: int = 10,
) -> float:
    """Opacity of an element visible over absolute frames ``[start, end]``."""
    window = FadeWindow(in_frames=fade_in, out_frames=fade_out)
    return ramp_opacity(frame - start, int(end - start), window)


def cross_dissolve(
    frame: float,
    cut: float,
    out_frames: int,
    in_frames: int,
    lead: int = 0,
) -> tuple[float, float]:
    """Opacities of the outgoing and incoming layers around a cut.

    The outgoing layer ramps 1 to 0 over ``[cut - out_frames, cut]``. The
    incoming layer ramps 0 to 1 over ``[cut - lead, cut + in_frames]``, so a
    positive ``lead`` starts it slightly before the cut.

    Returns:
        ``(outgoing, incoming)`` opacities.
    """
    outgoing = clamped_lerp(frame, [cut - out_frames, cut], [1.0, 0.0])
    incoming = clamped_lerp(frame, [cut - lead, cut + in_frames], [0.0, 1.0])
    return outgoing, incoming
