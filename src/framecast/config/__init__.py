"""Configuration module for framecast."""

from .loader import ConfigLoader, load_settings
from .settings import (
    DiagnosticsSettings,
    FadeSettings,
    RenderSettings,
    Settings,
    SpringSettings,
)

__all__ = [
    "ConfigLoader",
    "DiagnosticsSettings",
    "FadeSettings",
    "RenderSettings",
    "Settings",
    "SpringSettings",
    "load_settings",
]
