"""Process-wide catalogue of compositions.

The registry has two phases. While it is being built, :meth:`register`
adds entries. After :meth:`CompositionRegistry.freeze` it is read-only and
can be shared freely between rendering workers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from framecast.errors import DuplicateIdError, NotFoundError, RegistryFrozenError
from framecast.models.composition import CompositionConfig
from framecast.scenes.base import FrameEvaluator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryEntry:
    """A registered composition: its config, evaluator and optional series."""

    config: CompositionConfig
    evaluator: FrameEvaluator
    series: str | None = None

    @property
    def id(self) -> str:
        return self.config.id

    def evaluate(self, frame: int):
        """Evaluate this composition at ``frame``."""
        return self.evaluator(frame, self.config)


class CompositionRegistry:
    """Insertion-ordered mapping of composition id to entry."""

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._titles: dict[str, str] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        config: CompositionConfig,
        evaluator: FrameEvaluator,
        series: str | None = None,
    ) -> RegistryEntry:
        """Add a composition.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            DuplicateIdError: If ``config.id`` is already registered.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{config.id}': registry is frozen"
            )
        if config.id in self._entries:
            raise DuplicateIdError(f"Composition '{config.id}' is already registered")
        entry = RegistryEntry(config=config, evaluator=evaluator, series=series)
        self._entries[config.id] = entry
        logger.debug(
            "Registered composition %s (%d frames @ %d fps, %dx%d)",
            config.id,
            config.duration_in_frames,
            config.fps,
            config.width,
            config.height,
        )
        return entry

    def declare_series(self, series_id: str, title: str) -> None:
        """Record the display title of a series.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            DuplicateIdError: If ``series_id`` already has a title.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot declare series '{series_id}': registry is frozen"
            )
        if series_id in self._titles:
            raise DuplicateIdError(f"Series '{series_id}' is already declared")
        self._titles[series_id] = title
        logger.debug("Declared series %s (%s)", series_id, title)

    def freeze(self) -> CompositionRegistry:
        """End the build phase. Further registration raises."""
        if not self._frozen:
            self._frozen = True
            logger.info("Composition registry frozen with %d entries", len(self._entries))
        return self

    def list(self) -> tuple[RegistryEntry, ...]:
        """All entries in registration order."""
        return tuple(self._entries.values())

    def ids(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def resolve(self, composition_id: str) -> RegistryEntry:
        """Look up a composition by id.

        Raises:
            NotFoundError: If no composition has that id.
        """
        try:
            return self._entries[composition_id]
        except KeyError:
            raise NotFoundError(
                f"Unknown composition '{composition_id}'. "
                f"Available: {', '.join(self._entries) or 'none'}"
            ) from None

    def series(self) -> dict[str, tuple[str, ...]]:
        """Composition ids grouped by series, in registration order."""
        grouped: dict[str, list[str]] = {}
        for entry in self._entries.values():
            if entry.series is not None:
                grouped.setdefault(entry.series, []).append(entry.id)
        return {name: tuple(ids) for name, ids in grouped.items()}

    def series_title(self, series_id: str) -> str:
        """Display title of a declared series.

        Raises:
            NotFoundError: If the series was never declared.
        """
        try:
            return self._titles[series_id]
        except KeyError:
            raise NotFoundError(
                f"Unknown series '{series_id}'. "
                f"Available: {', '.join(self._titles) or 'none'}"
            ) from None

    def series_titles(self) -> dict[str, str]:
        """Series id to title, in declaration order."""
        return dict(self._titles)

    def __contains__(self, composition_id: object) -> bool:
        return composition_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self.list())
