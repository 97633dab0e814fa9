"""Data models for framecast."""

from .composition import CompositionConfig
from .panels import CompareColumn, PanelContent, PanelKind

__all__ = [
    # Composition models
    "CompositionConfig",
    # Panel models
    "CompareColumn",
    "PanelContent",
    "PanelKind",
]
