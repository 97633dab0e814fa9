"""Outro: milestone pills spring in over a drifting star field."""

from __future__ import annotations

import math
from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import pseudo_random, wrap
from framecast.timeline.segments import require_frame
from framecast.timeline.spring import spring_progress

from .base import SceneDefinition

DURATION = 8 * 30
PILL_DAMPING = 12
PILL_STIFFNESS = 180
STAR_COUNT = 140


@dataclass(frozen=True)
class Pill:
    label: str
    caption: str


PILLS: tuple[Pill, ...] = (
    Pill("NixOS install locked in", "Day 1 base complete"),
    Pill("Docker + Svelte", "Starculator container ready"),
    Pill("Cloudflare tunnel live", "Secure remote entry"),
    Pill("Thank you!", "See you on Day 2"),
)


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    size: float
    speed: float
    phase: float


def _build_stars() -> tuple[Star, ...]:
    stars = []
    for i in range(STAR_COUNT):
        # Seeded by star index only, so every frame sees the same sky.
        seed = pseudo_random(i * 37.7 + 3.14)
        stars.append(
            Star(
                x=seed * 100,
                y=pseudo_random(i * 11.3 + 1.7) * 100,
                size=1 + seed * 2.6,
                speed=0.05 + pseudo_random(i * 5.1) * 0.08,
                phase=seed * math.pi * 2,
            )
        )
    return tuple(stars)


STARS = _build_stars()


@dataclass(frozen=True)
class PillState:
    label: str
    caption: str
    progress: float
    glow: float


@dataclass(frozen=True)
class StarState:
    x: float
    y: float
    size: float
    twinkle: float


@dataclass(frozen=True)
class StarculatorOutroState:
    pills: tuple[PillState, ...]
    stars: tuple[StarState, ...]
    pulse: float
    hue: float


def evaluate(frame: int, config: CompositionConfig) -> StarculatorOutroState:
    frame = require_frame(frame)
    segment = config.duration_in_frames / len(PILLS)
    pills = []
    for i, pill in enumerate(PILLS):
        progress = spring_progress(
            frame - i * segment,
            config.fps,
            damping=PILL_DAMPING,
            stiffness=PILL_STIFFNESS,
        )
        pills.append(
            PillState(
                label=pill.label,
                caption=pill.caption,
                progress=progress,
                glow=clamped_lerp(progress, [0, 1], [0.0, 1.0]),
            )
        )
    stars = tuple(
        StarState(
            x=star.x,
            y=wrap(star.y + frame * star.speed, 100),
            size=star.size,
            twinkle=0.5 + (math.sin(frame / 12 + star.phase) + 1) * 0.25,
        )
        for star in STARS
    )
    return StarculatorOutroState(
        pills=tuple(pills),
        stars=stars,
        pulse=1 + math.sin(frame / 24) * 0.03,
        hue=(frame * 2) % 360,
    )


SCENE = SceneDefinition(
    name="StarculatorOutroScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
