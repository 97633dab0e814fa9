"""Home Manager overview: two split-panel segments, then a module grid."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.crossfade import crossfade_opacity
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import composition_progress, staggered_spring
from framecast.timeline.segments import SegmentPlan, require_frame

from .base import DEFAULT_TUNING, SceneDefinition, SceneTuning

# 12s intro, 24s details, 10s modules
PLAN = SegmentPlan([360, 720, 300])

TITLE = "Home Manager layout"
GRID_TITLE = "Reusable module stack"

BULLET_SEGMENTS: tuple[tuple[str, ...], ...] = (
    (
        "home/luix/default.nix is the single entrypoint for every user tweak.",
        "home.username, home.homeDirectory and stateVersion now live in Home Manager.",
        "allowUnfree flips on at the user layer so the flake stays clean.",
    ),
    (
        "xdg.enable + fonts.fontconfig.enable make caches and fonts follow the user profile.",
        "~/.nix-profile is force-linked to each generation so apps stay on PATH.",
        "targets.genericLinux keeps this same profile deployable on other hosts.",
        "The imports list fans out to reusable modules.",
        "home.packages is reserved for user apps.",
    ),
)

SNIPPET_SEGMENTS: tuple[str, ...] = (
    'nixpkgs.config.allowUnfree = true;\n\nhome.username = "luix";\n'
    'home.homeDirectory = "/home/luix";\nhome.stateVersion = "25.05";',
    "xdg.enable = true;\nfonts.fontconfig.enable = true;\n\n"
    "imports = [\n  ./modules/base.nix\n  ./modules/cli.nix\n  ./modules/zsh.nix\n];",
)

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

BULLET_STAGGER = 18
MODULE_STAGGER = 4
GRID_COLUMNS = 3


@dataclass(frozen=True)
class HomeManagerState:
    segment: int
    opacity: float
    layout: str
    title: str
    bullets: tuple[str, ...]
    bullet_opacity: tuple[float, ...]
    snippet: str
    module_pop: tuple[float, ...]
    progress: float


def evaluate(
    frame: int,
    config: CompositionConfig,
    *,
    tuning: SceneTuning = DEFAULT_TUNING,
) -> HomeManagerState:
    frame = require_frame(frame)
    resolution = PLAN.resolve(frame)
    opacity = crossfade_opacity(resolution, tuning.fade)
    progress = composition_progress(frame, config.duration_in_frames)

    if resolution.index < len(BULLET_SEGMENTS):
        bullets = BULLET_SEGMENTS[resolution.index]
        bullet_opacity = tuple(
            clamped_lerp(
                resolution.local_frame,
                [i * BULLET_STAGGER, i * BULLET_STAGGER + tuning.fade.in_frames + 10],
                [0.0, 1.0],
            )
            for i in range(len(bullets))
        )
        return HomeManagerState(
            segment=resolution.index,
            opacity=opacity,
            layout="split",
            title=TITLE,
            bullets=bullets,
            bullet_opacity=bullet_opacity,
            snippet=SNIPPET_SEGMENTS[resolution.index],
            module_pop=(),
            progress=progress,
        )

    module_pop = tuple(
        staggered_spring(
            resolution.local_frame,
            i,
            MODULE_STAGGER,
            config.fps,
            damping=tuning.damping,
            stiffness=tuning.stiffness,
            mass=tuning.mass,
        )
        for i in range(len(MODULES))
    )
    return HomeManagerState(
        segment=resolution.index,
        opacity=opacity,
        layout="modules",
        title=GRID_TITLE,
        bullets=MODULES,
        bullet_opacity=(),
        snippet="",
        module_pop=module_pop,
        progress=progress,
    )


SCENE = SceneDefinition(
    name="HomeManagerScene",
    evaluate=evaluate,
    default_duration=PLAN.total_frames,
    plan=PLAN,
    tunable=True,
)
