"""Modules showcase: the buildandpush helpers, from pseudo-code to what they really do."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.motion import composition_progress
from framecast.timeline.segments import require_frame

from .base import SceneDefinition
from .showcase import CodeShowcase, showcase_phase

DURATION = 2010  # 67s @30fps
PSEUDO_SEGMENT_FRAMES = 630

PSEUDO_CODE = """{ pkgs, lib, ... }:
let
  scriptPath = lib.makeBinPath [ bash git nix nixos-rebuild ... ];

  pushConfigs = writeShellScriptBin "pushconfigs" ''
    read COMMIT_MSG
    define helper_functions()
    function push_repo(dir) { git add/commit/push; sudo fallback via helper }
    main_loop_over_repos()
  '';

  buildall = writeShellScriptBin "buildall" ''
    nix flake update --flake $FLAKE
    sudo nixos-rebuild switch --flake "$FLAKE#$HOST"
    pushconfigs "$MSG"
  '';

  flakeonly = writeShellScriptBin "flakeonly" ''
    nix flake update --flake $FLAKE
    sudo nixos-rebuild switch --flake "$FLAKE#$HOST"
  '';

  pushonly = writeShellScriptBin "pushonly" ''
    exec pushconfigs "$@"
  '';
in {
  home.packages = [ pushConfigs buildall flakeonly pushonly ];
}"""

SHOWCASE = CodeShowcase(PSEUDO_CODE, PSEUDO_SEGMENT_FRAMES, line_height=54)

SUMMARY_ITEMS: tuple[str, ...] = (
    "ship the legacy ~/bin scripts via writeShellScriptBin so they stay version-controlled.",
    "expose every helper through home.packages, guaranteeing they land on PATH for any shell.",
    "standardize buildall, flakeonly, pushonly, and pushconfigs for every host.",
)


@dataclass(frozen=True)
class Callout:
    title: str
    detail: str


CALLOUTS: tuple[Callout, ...] = (
    Callout(
        "scriptPath bundles deps",
        "Bash · git · nix · nixos-rebuild · coreutils – shipped together so helpers "
        "never rely on random installs.",
    ),
    Callout(
        "pushconfigs revived",
        "Color logs, walks ~/dotfiles + flake + /etc/nixos, commits staged work, "
        "keeps SSH agent alive even through sudo.",
    ),
    Callout(
        "buildall / flakeonly",
        "Honor CONFIG_FLAKE + CONFIG_HOST, run nix flake update, then "
        'sudo nixos-rebuild switch "${FLAKE}#${HOST}".',
    ),
    Callout(
        "pushonly muscle memory",
        "Thin wrapper that just execs pushconfigs so the old alias still works everywhere.",
    ),
)


@dataclass(frozen=True)
class ModulesShowcaseState:
    code_scroll: float
    pseudo_opacity: float
    summary_opacity: float
    show_summary: bool
    summary_items: tuple[str, ...]
    callouts: tuple[Callout, ...]
    progress: float


def evaluate(frame: int, config: CompositionConfig) -> ModulesShowcaseState:
    frame = require_frame(frame)
    phase = showcase_phase(frame, SHOWCASE)
    return ModulesShowcaseState(
        code_scroll=phase.code_scroll,
        pseudo_opacity=phase.pseudo_opacity,
        summary_opacity=phase.summary_opacity,
        show_summary=phase.show_summary,
        summary_items=SUMMARY_ITEMS,
        callouts=CALLOUTS,
        progress=composition_progress(frame, config.duration_in_frames),
    )


SCENE = SceneDefinition(
    name="ModulesShowcaseScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
