"""Pytest configuration and fixtures for framecast tests."""

from pathlib import Path

import pytest

from framecast.models import CompositionConfig
from framecast.registry import CompositionRegistry, build_registry
from framecast.timeline import SegmentPlan


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def plan() -> SegmentPlan:
    """Three segments of 10, 20 and 5 frames."""
    return SegmentPlan([10, 20, 5])


@pytest.fixture
def make_config():
    """Factory for composition configs with sensible defaults."""

    def _make(**overrides: object) -> CompositionConfig:
        defaults: dict[str, object] = {
            "id": "test-composition",
            "duration_in_frames": 300,
            "fps": 30,
            "width": 1920,
            "height": 1080,
        }
        defaults.update(overrides)
        return CompositionConfig(**defaults)

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any FRAMECAST_ variables leaking in from the outer shell."""
    import os

    for key in list(os.environ):
        if key.startswith("FRAMECAST_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def registry(clean_env: None) -> CompositionRegistry:
    """The default catalogue, built and frozen."""
    return build_registry()
