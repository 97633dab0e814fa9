"""Composition registry and the static catalogue that fills it."""

from .catalog import CATALOG, CompositionDeclaration, Series, build_registry, make_config
from .registry import CompositionRegistry, RegistryEntry

__all__ = [
    "CATALOG",
    "CompositionDeclaration",
    "CompositionRegistry",
    "RegistryEntry",
    "Series",
    "build_registry",
    "make_config",
]
