"""Static catalogue of every composition, grouped into series.

:func:`build_registry` turns these declarations into a frozen
:class:`CompositionRegistry`. Each scene's segment plan is checked against
its declared duration exactly once, here, rather than on every frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from framecast.config.settings import Settings
from framecast.models.composition import CompositionConfig
from framecast.scenes import (
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
from framecast.scenes.base import SceneDefinition, SceneTuning

from .registry import CompositionRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionDeclaration:
    """One catalogue entry. Unset dimensions fall back to render settings."""

    id: str
    scene: SceneDefinition
    duration_in_frames: int | None = None
    fps: int | None = None
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class Series:
    """A titled group of compositions."""

    id: str
    title: str
    compositions: tuple[CompositionDeclaration, ...]


CATALOG: tuple[Series, ...] = (
    Series(
        id="brand-intro",
        title="LuixBits Intro",
        compositions=(
            CompositionDeclaration(
                "brand-intro-LuixBitsCubeIntro",
                cube_intro.SCENE,
                fps=cube_intro.FPS,
            ),
        ),
    ),
    Series(
        id="day1-learnings",
        title="Day 1 Learnings",
        compositions=(
            CompositionDeclaration("day1-learnings-vaporwave", day1_learnings.SCENE),
        ),
    ),
    Series(
        id="home-manager",
        title="Home Manager Series",
        compositions=(
            CompositionDeclaration(
                "home-manager-terminal-migration", terminal_migration.SCENE, 1260,
            ),
            CompositionDeclaration("home-manager-flake-info", flake_info.SCENE, 900),
            CompositionDeclaration(
                "home-manager-system-config", system_config.SCENE, 1530,
            ),
            CompositionDeclaration("home-manager-overview", home_manager.SCENE, 1380),
            CompositionDeclaration("home-manager-modules", modules_carousel.SCENE),
            CompositionDeclaration(
                "home-manager-bringing-it-together", bringing_together.SCENE,
            ),
            CompositionDeclaration(
                "home-manager-modulesShowcase", modules_showcase.SCENE,
            ),
            CompositionDeclaration(
                "home-manager-kitty-showcase", kitty_showcase.SCENE,
            ),
        ),
    ),
    Series(
        id="nixvim",
        title="Nixvim Build",
        compositions=(
            CompositionDeclaration("nixvim-block-build", nixvim_block_build.SCENE),
        ),
    ),
    Series(
        id="starculator",
        title="Starculator Trailer",
        compositions=(
            CompositionDeclaration("starculator-trailer", starculator_trailer.SCENE),
            CompositionDeclaration("starculator-outro", starculator_outro.SCENE),
        ),
    ),
    Series(
        # Earliest listing; still renders with the shorter overview cut.
        id="legacy",
        title="Original Home Manager Cut",
        compositions=(
            CompositionDeclaration("HomeManagerScene", home_manager.SCENE, 1200),
        ),
    ),
)


def make_config(declaration: CompositionDeclaration, settings: Settings) -> CompositionConfig:
    """Resolve a declaration into a concrete composition config."""
    render = settings.render
    return CompositionConfig(
        id=declaration.id,
        duration_in_frames=declaration.duration_in_frames or declaration.scene.default_duration,
        fps=declaration.fps or render.fps,
        width=declaration.width or render.width,
        height=declaration.height or render.height,
    )


def build_registry(
    settings: Settings | None = None,
    catalog: tuple[Series, ...] = CATALOG,
) -> CompositionRegistry:
    """Build and freeze the registry from static declarations.

    Args:
        settings: Render defaults, tuning and diagnostics. Defaults to
            ``Settings()``.
        catalog: Series to register, in order.

    Returns:
        A frozen registry.

    Raises:
        DuplicateIdError: If two declarations share an id.
        ConfigurationError: On a plan/duration mismatch when
            ``settings.diagnostics.strict_durations`` is set.
    """
    settings = settings or Settings()
    tuning = SceneTuning.from_settings(settings)
    registry = CompositionRegistry()

    for series in catalog:
        registry.declare_series(series.id, series.title)
        for declaration in series.compositions:
            config = make_config(declaration, settings)
            scene = declaration.scene
            if scene.plan is not None:
                scene.plan.check_duration(
                    config.duration_in_frames,
                    owner=f"{config.id} ({scene.name})",
                    strict=settings.strict_durations,
                )
            registry.register(config, scene.bind(tuning), series=series.id)

    logger.info(
        "Built composition registry: %d compositions in %d series",
        len(registry),
        len(catalog),
    )
    return registry.freeze()
