"""Contract shared by every scene evaluator.

A scene evaluator is a pure function ``(frame, config) -> state``. It may
read module-level constant tables and a :class:`SceneTuning` bound when
the registry is built, but never ambient time or mutable globals.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from framecast.config.settings import Settings
from framecast.models.composition import CompositionConfig
from framecast.timeline.crossfade import FadeWindow
from framecast.timeline.segments import SegmentPlan


@runtime_checkable
class FrameEvaluator(Protocol):
    """Protocol for frame-state evaluators."""

    def __call__(self, frame: int, config: CompositionConfig) -> Any:
        """Return the visual state of ``config`` at ``frame``."""
        ...


@dataclass(frozen=True)
class SceneTuning:
    """Fade and spring defaults bound into an evaluator at build time."""

    fade: FadeWindow = field(default_factory=FadeWindow)
    damping: float = 12.0
    stiffness: float = 150.0
    mass: float = 1.0

    @classmethod
    def from_settings(cls, settings: Settings) -> SceneTuning:
        return cls(
            fade=FadeWindow(
                in_frames=settings.fade.in_frames,
                out_frames=settings.fade.out_frames,
            ),
            damping=settings.spring.damping,
            stiffness=settings.spring.stiffness,
            mass=settings.spring.mass,
        )


DEFAULT_TUNING = SceneTuning()


@dataclass(frozen=True)
class SceneDefinition:
    """A scene evaluator together with its static timing.

    Attributes:
        name: Human-readable scene name used in diagnostics.
        evaluate: ``evaluate(frame, config, *, tuning)``.
        default_duration: Length the scene was authored for, in frames.
        plan: Segment plan whose total should match the declared duration,
            or None for scenes timed by absolute frames.
        tunable: Whether ``evaluate`` accepts a ``tuning`` keyword.
    """

    name: str
    evaluate: Any
    default_duration: int
    plan: SegmentPlan | None = None
    tunable: bool = False

    def bind(self, tuning: SceneTuning = DEFAULT_TUNING) -> FrameEvaluator:
        """Return a ``(frame, config)`` evaluator with ``tuning`` applied."""
        if not self.tunable:
            return self.evaluate
        return functools.partial(self.evaluate, tuning=tuning)
