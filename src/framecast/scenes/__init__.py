"""Scene evaluators, one module per composition."""

from . import (
    bringing_together,
    cube_intro,
    day1_learnings,
    flake_info,
    home_manager,
    kitty_showcase,
    modules_carousel,
    modules_showcase,
    nixvim_block_build,
    starculator_outro,
    starculator_trailer,
    system_config,
    terminal_migration,
)
from .base import DEFAULT_TUNING, FrameEvaluator, SceneDefinition, SceneTuning

__all__ = [
    "DEFAULT_TUNING",
    "FrameEvaluator",
    "SceneDefinition",
    "SceneTuning",
    "bringing_together",
    "cube_intro",
    "day1_learnings",
    "flake_info",
    "home_manager",
    "kitty_showcase",
    "modules_carousel",
    "modules_showcase",
    "nixvim_block_build",
    "starculator_outro",
    "starculator_trailer",
    "system_config",
    "terminal_migration",
]
