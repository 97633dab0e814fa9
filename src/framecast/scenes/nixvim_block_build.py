"""Nixvim block build: a terminal intro, then config stages stack up into plugins.

Positions are in scene units of a 3D stage: x runs left to right, y up and
z towards the camera. All block motion freezes at ``ANIM_FREEZE_FRAME``
and the final frame is held for ``HOLD_EXTRA`` frames.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import RevealMode, oscillate
from framecast.timeline.segments import require_frame
from framecast.timeline.spring import spring_progress

from .base import SceneDefinition
from .terminal import LineState, TerminalLine, terminal_lines

INTRO_DURATION = 120
POST_INTRO_GAP = 24
BUILD_FRAMES = 240
ANIM_FREEZE_FRAME = INTRO_DURATION + POST_INTRO_GAP + BUILD_FRAMES
HOLD_EXTRA = 300  # 10s @30fps
DURATION = ANIM_FREEZE_FRAME + HOLD_EXTRA

TITLE = "Adding plugins to Nixvim"
TERMINAL_FADE_FRAMES = 28

STAGE_SPACING = 5.9
CONNECTOR_HALF_GAP = 2.1
CONNECTOR_Y = 0.9
ORBIT_RADIUS = 2.2
ORBIT_LIFT = 2.3

Vector = tuple[float, float, float]


@dataclass(frozen=True)
class Stage:
    label: str
    color: str
    appear_at: int
    height: float
    note: str = ""


STAGES: tuple[Stage, ...] = (
    Stage(
        "NixVim flake",
        "#7fb5ff",
        0,
        1.0,
        "Import the flake module so the Nixvim module is available.",
    ),
    Stage(
        "Home-manager",
        "#8cf7a1",
        40,
        1.2,
        "Bring nixvim into Home Manager; set default editor + aliases.",
    ),
    Stage("nixvim.nix", "#d6a6ff", 80, 1.0),
    Stage("Plugins", "#ffc98b", 120, 1.1, "Now add the plugin stack onto the config base."),
)


@dataclass(frozen=True)
class Satellite:
    label: str
    color: str
    appear_at: int


SATELLITES: tuple[Satellite, ...] = (
    Satellite("LSP + cmp", "#8AFFCF", 140),
    Satellite("GitSigns", "#FFB347", 160),
    Satellite("Treesitter", "#80B3FF", 170),
    Satellite("Telescope", "#FF9AF2", 180),
)

TERMINAL: tuple[TerminalLine, ...] = (
    TerminalLine("λ luix@nixos", "mpv nixvim-plugins.mp4", 10),
    TerminalLine("", "Playing clip........", 70, RevealMode.PASTE),
)


@dataclass(frozen=True)
class StageState:
    label: str
    color: str
    note: str
    progress: float
    position: Vector
    scale_y: float
    emissive: float


@dataclass(frozen=True)
class ConnectorState:
    source: str
    target: str
    visible: bool
    length: float


@dataclass(frozen=True)
class SatelliteState:
    label: str
    color: str
    progress: float
    position: Vector
    scale: float
    tether: Vector

    @property
    def tether_visible(self) -> bool:
        return math.hypot(*self.tether) > 0.01


@dataclass(frozen=True)
class NixvimBlockBuildState:
    terminal: tuple[LineState, ...]
    terminal_opacity: float
    show_title: bool
    title: str
    camera_y: float
    stages: tuple[StageState, ...]
    connectors: tuple[ConnectorState, ...]
    satellites: tuple[SatelliteState, ...]


def _start(appear_at: int) -> int:
    return appear_at + INTRO_DURATION + POST_INTRO_GAP


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _stage(frame: int, index: int, stage: Stage, fps: int) -> StageState:
    start = _start(stage.appear_at)
    progress = _unit(
        spring_progress(frame - start, fps, damping=12, stiffness=140, mass=0.9)
    )
    x = -(len(STAGES) - 1) * STAGE_SPACING * 0.5 + index * STAGE_SPACING
    bob = oscillate(frame, 50, 0.05, phase=start)
    return StageState(
        label=stage.label,
        color=stage.color,
        note=stage.note,
        progress=progress,
        position=(x, stage.height / 2 + bob, 0.0),
        scale_y=progress,
        emissive=1.05 * progress + 0.25,
    )


def _connectors(stages: tuple[StageState, ...]) -> tuple[ConnectorState, ...]:
    connectors = []
    for current, following in zip(stages, stages[1:]):
        start_x = current.position[0] + CONNECTOR_HALF_GAP
        end_x = following.position[0] - CONNECTOR_HALF_GAP
        length = abs(end_x - start_x)
        connectors.append(
            ConnectorState(
                source=current.label,
                target=following.label,
                visible=current.progress >= 0.85 and following.progress >= 0.7 and length > 0.01,
                length=length,
            )
        )
    return tuple(connectors)


def _satellite(
    frame: int, index: int, satellite: Satellite, plugins: Stage, plugins_x: float, fps: int,
) -> SatelliteState:
    progress = _unit(
        spring_progress(
            frame - _start(satellite.appear_at), fps, damping=10, stiffness=130, mass=0.8,
        )
    )
    angle = index / len(SATELLITES) * math.pi * 2 - math.pi / 2
    center = (plugins_x, plugins.height + ORBIT_LIFT, 0.0)
    dest = (
        center[0] + math.cos(angle) * ORBIT_RADIUS,
        center[1] + 0.35 + oscillate(frame, 32, 0.25, phase=satellite.appear_at),
        center[2] + math.sin(angle) * ORBIT_RADIUS,
    )
    position = tuple(a + (b - a) * progress for a, b in zip(center, dest))
    # Tether runs from just above the plugins block towards the orbit.
    anchor = (plugins_x, plugins.height + 1.2, 0.0)
    target = (
        plugins_x + math.cos(angle) * ORBIT_RADIUS,
        plugins.height + 2.1,
        math.sin(angle) * ORBIT_RADIUS,
    )
    tether = tuple((b - a) * progress for a, b in zip(anchor, target))
    return SatelliteState(
        label=satellite.label,
        color=satellite.color,
        progress=progress,
        position=position,
        scale=0.35 + 0.65 * progress,
        tether=tether,
    )


def evaluate(frame: int, config: CompositionConfig) -> NixvimBlockBuildState:
    raw_frame = require_frame(frame)
    frame = min(raw_frame, ANIM_FREEZE_FRAME)
    stages = tuple(_stage(frame, i, stage, config.fps) for i, stage in enumerate(STAGES))
    plugins_index = next(i for i, stage in enumerate(STAGES) if stage.label == "Plugins")
    plugins_x = stages[plugins_index].position[0]
    satellites = tuple(
        _satellite(frame, i, sat, STAGES[plugins_index], plugins_x, config.fps)
        for i, sat in enumerate(SATELLITES)
    )
    return NixvimBlockBuildState(
        terminal=terminal_lines(raw_frame, TERMINAL),
        terminal_opacity=clamped_lerp(
            raw_frame, [INTRO_DURATION, INTRO_DURATION + TERMINAL_FADE_FRAMES], [1.0, 0.0],
        ),
        show_title=frame > INTRO_DURATION,
        title=TITLE,
        camera_y=5 + oscillate(frame, 120, 0.3),
        stages=stages,
        connectors=_connectors(stages),
        satellites=satellites,
    )


SCENE = SceneDefinition(
    name="NixvimBlockBuildScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
