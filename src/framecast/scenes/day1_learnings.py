"""Day 1 learnings: five cards, each owning an equal slice of the scene."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import composition_progress, oscillate
from framecast.timeline.segments import SegmentPlan, require_frame

from .base import SceneDefinition

DURATION = 27 * 30

LEARNINGS: tuple[str, ...] = (
    "Set tangible goals I can actually reach",
    "Fix problems when I encounter them",
    "Don't take on too much - 1 evening at a time",
    "Have a timeline so there is time to make the video",
    "More time for better explanations / animations",
)

REVEAL_LEAD = 12
REVEAL_FRAMES = 24
SWAY_AMPLITUDE = 6
SWAY_PERIOD = 32
SWAY_PHASE_STEP = 12
ENTRY_LIFT = 24


@functools.lru_cache(maxsize=8)
def plan_for(duration_in_frames: int) -> SegmentPlan:
    """Even split of the composition across the learning cards."""
    return SegmentPlan.even(duration_in_frames, len(LEARNINGS))


@dataclass(frozen=True)
class LearningCardState:
    title: str
    reveal: float
    emphasis: float
    offset_y: float
    scale: float


@dataclass(frozen=True)
class Day1LearningsState:
    active: int
    cards: tuple[LearningCardState, ...]
    glow_drift: float
    ribbon: float
    progress: float


def _card(frame: int, index: int, plan: SegmentPlan) -> LearningCardState:
    start = plan.starts[index]
    end = plan.ends[index]
    reveal = clamped_lerp(frame, [start - REVEAL_LEAD, start + REVEAL_FRAMES], [0.0, 1.0])
    emphasis = clamped_lerp(frame, [start, end], [1.0, 0.25])
    sway = oscillate(frame, SWAY_PERIOD, SWAY_AMPLITUDE, phase=index * SWAY_PHASE_STEP)
    return LearningCardState(
        title=LEARNINGS[index],
        reveal=reveal,
        emphasis=emphasis,
        offset_y=(1.0 - reveal) * ENTRY_LIFT + sway,
        scale=1.0 + emphasis * 0.02,
    )


def evaluate(frame: int, config: CompositionConfig) -> Day1LearningsState:
    plan = plan_for(config.duration_in_frames)
    frame = require_frame(frame)
    resolution = plan.resolve(frame)
    return Day1LearningsState(
        active=resolution.index,
        cards=tuple(_card(frame, i, plan) for i in range(len(LEARNINGS))),
        glow_drift=oscillate(frame, 90, 50),
        ribbon=oscillate(frame, 28, 6),
        progress=composition_progress(frame, config.duration_in_frames),
    )


SCENE = SceneDefinition(
    name="Day1LearningsScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
