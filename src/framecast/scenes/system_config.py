"""System configuration walkthrough: four segments, each a text card
beside a side panel whose content kind changes per segment."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.models.panels import CompareColumn, PanelContent, PanelKind
from framecast.timeline.crossfade import FadeWindow, crossfade_opacity
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import composition_progress
from framecast.timeline.segments import SegmentPlan, require_frame

from .base import SceneDefinition

# 11s, 17s, 8s, 15s @30fps
PLAN = SegmentPlan([330, 510, 240, 450])
FADE = FadeWindow(in_frames=12, out_frames=12)
BODY_STAGGER = 24
BODY_RAMP = 18


@dataclass(frozen=True)
class Segment:
    title: str
    body: tuple[str, ...]
    panel: PanelContent


SEGMENTS: tuple[Segment, ...] = (
    Segment(
        title="Overlay injection fixes atopile",
        body=(
            "nixpkgs.overlays injects nixvim.overlays.default first so pkgs starts "
            "with the Neovim toolchain baked in.",
            "Skipping it makes nixvim LSP modules fetch atopile, then evaluation dies.",
            'This segment describes the "atopile not found" failure.',
        ),
        panel=PanelContent(
            kind=PanelKind.ERROR,
            lines=(
                "error: package 'atopile' not found in pkgs",
                "hint: add nixvim overlay or stub atopile",
                "context: nixos-rebuild switch on nixos-25.05",
            ),
        ),
    ),
    Segment(
        title="Overlay snippet inside configuration.nix",
        body=(
            "The overlay ships nixvim packages and a placeholder atopile binary.",
            "Replace the stub with the real package once the channel picks it up.",
            "Keep this overlay near the top so downstream modules inherit it.",
        ),
        panel=PanelContent(
            kind=PanelKind.CODE,
            code=(
                "nixpkgs.overlays = [\n"
                "  inputs.nixvim.overlays.default\n"
                "  (final: prev: {\n"
                '    atopile = prev.writeShellScriptBin "atopile" "";\n'
                "  })\n"
                "];"
            ),
        ),
    ),
    Segment(
        title="Alternative fix",
        body=(
            "A manual package override through nixpkgs.config still failed here.",
            "The overlay + stub combo is the reliable path for now.",
        ),
        panel=PanelContent(
            kind=PanelKind.IMAGE,
            src="atopile.png",
            alt="Attempted nixpkgs.config override screenshot",
            caption="Attempted nixpkgs.config override (screenshot)",
        ),
    ),
    Segment(
        title="What configuration.nix still owns",
        body=(
            "environment.systemPackages is trimmed down to globally required tools.",
            "User apps, shells, prompts and themes moved into Home Manager.",
        ),
        panel=PanelContent(
            kind=PanelKind.COMPARE,
            columns=(
                CompareColumn(
                    title="Stay in configuration.nix",
                    items=("Hardware modules + services", "Display + audio drivers"),
                ),
                CompareColumn(
                    title="Move to Home Manager",
                    items=("programs.git.enable = true;", "programs.tmux.enable = true;"),
                ),
            ),
        ),
    ),
)


@dataclass(frozen=True)
class SystemConfigState:
    segment: int
    opacity: float
    title: str
    body: tuple[str, ...]
    body_opacity: tuple[float, ...]
    panel: PanelContent
    progress: float


def evaluate(frame: int, config: CompositionConfig) -> SystemConfigState:
    frame = require_frame(frame)
    resolution = PLAN.resolve(frame)
    segment = SEGMENTS[resolution.index]
    body_opacity = tuple(
        clamped_lerp(
            resolution.local_frame,
            [FADE.in_frames + i * BODY_STAGGER, FADE.in_frames + i * BODY_STAGGER + BODY_RAMP],
            [0.0, 1.0],
        )
        for i in range(len(segment.body))
    )
    return SystemConfigState(
        segment=resolution.index,
        opacity=crossfade_opacity(resolution, FADE),
        title=segment.title,
        body=segment.body,
        body_opacity=body_opacity,
        panel=segment.panel,
        progress=composition_progress(frame, config.duration_in_frames),
    )


SCENE = SceneDefinition(
    name="SystemConfigScene",
    evaluate=evaluate,
    default_duration=PLAN.total_frames,
    plan=PLAN,
)
