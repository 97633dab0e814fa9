"""Flake info: the flake's file tree, then how Home Manager is wired into it."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.segments import require_frame

from .base import SceneDefinition
from .tree import TreeNode, TreeReveal, TreeRow, reveal_tree

DURATION = 900
PHASE_SECONDS = 15
FADE_WINDOW = 20

TREE_REVEAL = TreeReveal(depth_delay=10, sibling_delay=6, fade_frames=15)

FLAKE_TREE: tuple[TreeNode, ...] = (
    TreeNode(
        "flake.nix",
        "single entrypoint · synced with flake.lock",
        (
            TreeNode(
                "inputs/",
                "all the external package sets",
                (
                    TreeNode("nixpkgs (nixos-25.05)", "system base + kernel"),
                    TreeNode("nixpkgs-unstable", "feeds nixvim for fresh plugins"),
                    TreeNode("home-manager (release-25.05)", "user-level config"),
                    TreeNode("nixvim", "neovim module + overlay"),
                    TreeNode("nix-gaming", "star citizen + proton tweaks"),
                    TreeNode("nix-citizen"),
                ),
            ),
            TreeNode(
                "outputs/",
                "wired into nixos-rebuild",
                (
                    TreeNode(
                        "nixosConfigurations.nixos",
                        "single host exported as .#nixos",
                        (
                            TreeNode(
                                "imports",
                                children=(
                                    TreeNode("./configuration.nix", "hardware + services"),
                                    TreeNode(
                                        "hm.nixosModules.home-manager",
                                        "inline HM evaluation",
                                    ),
                                ),
                            ),
                            TreeNode("home-manager.users.luix", "import ./home/luix"),
                            TreeNode(
                                "home-manager.extraSpecialArgs",
                                "inherit inputs for modules",
                            ),
                            TreeNode(
                                "home-manager.backupFileExtension",
                                '"hm-back" safety copies',
                            ),
                        ),
                    ),
                    TreeNode("packages", "system + hm bundles"),
                ),
            ),
        ),
    ),
)

INPUT_DETAILS: tuple[tuple[str, str], ...] = (
    ("nixpkgs (nixos-25.05)", "base system + kernel, keeps host deterministic"),
    ("nixpkgs-unstable", "feeds nixvim so Neovim plugins stay on the bleeding edge"),
    ("home-manager (release-25.05)", "user-level config merged inline during nixos-rebuild"),
    ("nixvim", "flake input providing Neovim module + overlay"),
    ("nix-gaming", "ships proton tweaks + Star Citizen bits"),
    ("nix-citizen", "extra Star Citizen tooling layered on top"),
)

HM_POINTS: tuple[str, ...] = (
    "Home Manager runs during nixos-rebuild switch via hm.nixosModules.home-manager.",
    "home-manager.useUserPackages = true brings flake pkgs into the user profile.",
    "extraSpecialArgs = { inherit inputs; } shares the exact same inputs blob.",
    'backupFileExtension = "hm-back" keeps a safety copy before HM touches files.',
)

HM_CODE = """hm.nixosModules.home-manager {
  home-manager.useUserPackages = true;
  home-manager.users.luix = import ./home/luix;
  home-manager.extraSpecialArgs = { inherit inputs; };
  home-manager.backupFileExtension = "hm-back";
};"""


@dataclass(frozen=True)
class FlakeInfoState:
    flake_opacity: float
    hm_opacity: float
    tree: tuple[TreeRow, ...]
    input_details: tuple[tuple[str, str], ...]
    hm_points: tuple[str, ...]
    hm_code: str


def evaluate(frame: int, config: CompositionConfig) -> FlakeInfoState:
    frame = require_frame(frame)
    phase = PHASE_SECONDS * config.fps
    window = [phase - FADE_WINDOW, phase + FADE_WINDOW]
    return FlakeInfoState(
        flake_opacity=clamped_lerp(frame, window, [1.0, 0.0]),
        hm_opacity=clamped_lerp(frame, window, [0.0, 1.0]),
        tree=reveal_tree(frame, FLAKE_TREE, TREE_REVEAL),
        input_details=INPUT_DETAILS,
        hm_points=HM_POINTS,
        hm_code=HM_CODE,
    )


SCENE = SceneDefinition(
    name="FlakeInfoScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
