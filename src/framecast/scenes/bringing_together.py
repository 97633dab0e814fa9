"""Bringing it together: the final repo layout beside a pipeline summary."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.motion import composition_progress
from framecast.timeline.segments import require_frame

from .base import SceneDefinition
from .tree import TreeNode, TreeReveal, TreeRow, reveal_tree

DURATION = 510  # 17s @30fps
TITLE = "Bringing it all together"
SUBTITLE = "Final repo layout that powers both NixOS and Home Manager."
CARD_TITLE = "System + Home pipeline"

TREE_REVEAL = TreeReveal(depth_delay=8, sibling_delay=6, fade_frames=12, rise=18.0)

MODULE_FILES = (
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

ARCHITECTURE_TREE: tuple[TreeNode, ...] = (
    TreeNode(
        "home/",
        children=(
            TreeNode("luix/", children=(TreeNode("default.nix"),)),
            TreeNode("modules/", children=tuple(TreeNode(name) for name in MODULE_FILES)),
        ),
    ),
    TreeNode("configuration.nix"),
    TreeNode("hardware-configuration.nix"),
    TreeNode("flake.nix"),
    TreeNode("flake.lock"),
)

SUMMARY_ITEMS: tuple[tuple[str, str], ...] = (
    ("Unified flake", "wires NixOS + Home Manager so one repo owns the entire host."),
    (
        "Module boundaries",
        "keep Kitty, Zsh, media, and apps isolated from /etc/nixos.",
    ),
    (
        "Fast rebuilds",
        "happen from ~/luix_nix_config; deploy only when the audio section says it's time.",
    ),
)


@dataclass(frozen=True)
class BringingTogetherState:
    title: str
    subtitle: str
    tree: tuple[TreeRow, ...]
    summary_title: str
    summary: tuple[tuple[str, str], ...]
    progress: float


def evaluate(frame: int, config: CompositionConfig) -> BringingTogetherState:
    frame = require_frame(frame)
    return BringingTogetherState(
        title=TITLE,
        subtitle=SUBTITLE,
        tree=reveal_tree(frame, ARCHITECTURE_TREE, TREE_REVEAL),
        summary_title=CARD_TITLE,
        summary=SUMMARY_ITEMS,
        progress=composition_progress(frame, config.duration_in_frames),
    )


SCENE = SceneDefinition(
    name="BringingItTogetherScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
