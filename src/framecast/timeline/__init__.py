"""Timeline primitives: interpolation, springs, segments and crossfades."""

from .crossfade import FadeWindow, cross_dissolve, crossfade_opacity, fade_in_out, ramp_opacity
from .easing import cubic, ease_in, ease_in_out, ease_out, linear, quad, sine
from .interpolate import Extrapolate, clamped_lerp, validate_ranges
from .motion import (
    RevealMode,
    composition_progress,
    oscillate,
    pseudo_random,
    pulse,
    revealed_count,
    scroll_offset,
    staggered_spring,
    typed_text,
    typewriter,
    wrap,
)
from .sampling import is_non_decreasing, is_non_increasing, sample_curve, within_unit_interval
from .segments import SegmentPlan, SegmentResolution, require_frame
from .spring import spring_progress

__all__ = [
    # Interpolation
    "Extrapolate",
    "clamped_lerp",
    "validate_ranges",
    # Easing
    "cubic",
    "ease_in",
    "ease_in_out",
    "ease_out",
    "linear",
    "quad",
    "sine",
    # Springs
    "spring_progress",
    # Segments
    "SegmentPlan",
    "SegmentResolution",
    "require_frame",
    # Crossfades
    "FadeWindow",
    "cross_dissolve",
    "crossfade_opacity",
    "fade_in_out",
    "ramp_opacity",
    # Motion
    "RevealMode",
    "composition_progress",
    "oscillate",
    "pseudo_random",
    "pulse",
    "revealed_count",
    "scroll_offset",
    "staggered_spring",
    "typed_text",
    "typewriter",
    "wrap",
    # Sampling
    "is_non_decreasing",
    "is_non_increasing",
    "sample_curve",
    "within_unit_interval",
]
