"""Module carousel: one slide per Home Manager module, typed captions."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.crossfade import crossfade_opacity
from framecast.timeline.motion import pulse, typed_text
from framecast.timeline.segments import SegmentPlan, require_frame

from .base import DEFAULT_TUNING, SceneDefinition, SceneTuning

MODULES: tuple[str, ...] = (
    "base.nix",
    "applications.nix",
    "cli.nix",
    "media.nix",
    "programming.nix",
    "kitty.nix",
    "nixvim.nix",
    "buildandpush.nix",
    "zsh.nix",
)
ENTRIES: tuple[str, ...] = (*MODULES, "outro")

# Each module got ~5s of extra breathing room; the outro runs 17s.
PLAN = SegmentPlan.from_seconds([13, 15, 14, 13, 15, 12, 16, 20, 15, 17], fps=30)

SLIDE_WIDTH = 36
SLIDE_GAP = 6
TYPE_SECONDS = 1.2
CARET_PERIOD = 6


@dataclass(frozen=True)
class ModulesCarouselState:
    segment: int
    entry: str
    progress: float
    offset_percent: float
    caption: str
    caret_opacity: float
    opacity: float


def evaluate(
    frame: int,
    config: CompositionConfig,
    *,
    tuning: SceneTuning = DEFAULT_TUNING,
) -> ModulesCarouselState:
    frame = require_frame(frame)
    resolution = PLAN.resolve(frame)
    index = min(resolution.index, len(ENTRIES) - 1)
    entry = ENTRIES[index]
    type_frames = round(config.fps * TYPE_SECONDS)
    return ModulesCarouselState(
        segment=resolution.index,
        entry=entry,
        progress=resolution.progress,
        offset_percent=(index + resolution.progress) * (SLIDE_WIDTH + SLIDE_GAP),
        caption=typed_text(entry, resolution.local_frame, type_frames),
        caret_opacity=pulse(frame, CARET_PERIOD, 0.2, 1.0),
        opacity=crossfade_opacity(resolution, tuning.fade),
    )


SCENE = SceneDefinition(
    name="ModulesScene",
    evaluate=evaluate,
    default_duration=PLAN.total_frames,
    plan=PLAN,
    tunable=True,
)
