"""Unit tests for configuration module."""

import logging
from pathlib import Path

import pytest

from framecast.config import (
    ConfigLoader,
    DiagnosticsSettings,
    FadeSettings,
    RenderSettings,
    Settings,
    SpringSettings,
    load_settings,
)
from framecast.errors import ConfigurationError


@pytest.mark.usefixtures("clean_env")
class TestRenderSettings:
    def test_defaults(self) -> None:
        settings = RenderSettings()
        assert settings.fps == 30
        assert settings.width == 3440
        assert settings.height == 1440

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRAMECAST_RENDER_FPS", "60")
        assert RenderSettings().fps == 60

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FPS", "12")
        assert RenderSettings().fps == 30

    def test_fps_bounds(self) -> None:
        with pytest.raises(ValueError):
            RenderSettings(fps=0)
        with pytest.raises(ValueError):
            RenderSettings(fps=241)


@pytest.mark.usefixtures("clean_env")
class TestTuningSettings:
    def test_fade_defaults(self) -> None:
        settings = FadeSettings()
        assert settings.in_frames == 10
        assert settings.out_frames == 10

    def test_fade_allows_zero(self) -> None:
        assert FadeSettings(in_frames=0).in_frames == 0

    def test_fade_rejects_negative(self) -> None:
        with pytest.raises(ValueError):
            FadeSettings(out_frames=-1)

    def test_spring_defaults(self) -> None:
        settings = SpringSettings()
        assert settings.damping == 12.0
        assert settings.stiffness == 150.0
        assert settings.mass == 1.0

    def test_spring_rejects_zero(self) -> None:
        with pytest.raises(ValueError):
            SpringSettings(stiffness=0)

    def test_diagnostics_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRAMECAST_DIAGNOSTICS_STRICT_DURATIONS", "true")
        assert DiagnosticsSettings().strict_durations is True


@pytest.mark.usefixtures("clean_env")
class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.render.fps == 30
        assert settings.fade.in_frames == 10
        assert settings.spring.damping == 12.0
        assert settings.strict_durations is False

    def test_sections_can_be_passed(self) -> None:
        settings = Settings(diagnostics=DiagnosticsSettings(strict_durations=True))
        assert settings.strict_durations is True


@pytest.mark.usefixtures("clean_env")
class TestConfigLoader:
    def test_find_default_file(self, tmp_path: Path) -> None:
        (tmp_path / "framecast.yaml").write_text("render:\n  fps: 25\n")
        loader = ConfigLoader()
        assert loader.find_config_file(tmp_path) == tmp_path / "framecast.yaml"

    def test_find_prefers_framecast_over_config(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("{}")
        (tmp_path / "framecast.yml").write_text("{}")
        assert ConfigLoader().find_config_file(tmp_path) == tmp_path / "framecast.yml"

    def test_no_file_found(self, tmp_path: Path) -> None:
        assert ConfigLoader().find_config_file(tmp_path) is None

    def test_load_yaml_fixture(self, fixtures_dir: Path) -> None:
        settings = ConfigLoader(fixtures_dir / "framecast.yaml").load_settings()
        assert settings.render.fps == 24
        assert settings.render.width == 1280
        assert settings.fade.in_frames == 6
        assert settings.fade.out_frames == 8
        assert settings.spring.damping == 14
        assert settings.spring.mass == 1.0
        assert settings.strict_durations is False

    def test_empty_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("")
        settings = load_settings(config_file)
        assert settings.render.fps == 30

    def test_invalid_yaml_value(self, tmp_path: Path) -> None:
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("fade:\n  in_frames: -4\n")
        with pytest.raises(ValueError):
            load_settings(config_file)

    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        settings = load_settings()
        assert settings.render.fps == 30

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_document_must_be_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("- render\n- fade\n")
        with pytest.raises(ConfigurationError, match="mapping of sections"):
            load_settings(config_file)

    def test_section_must_be_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("render: 30\n")
        with pytest.raises(ConfigurationError, match="'render' must be a mapping"):
            load_settings(config_file)

    def test_unknown_section_warns(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("render:\n  fps: 50\naudio:\n  volume: 3\n")
        with caplog.at_level(logging.WARNING, logger="framecast.config.loader"):
            settings = load_settings(config_file)
        assert settings.render.fps == 50
        assert "ignoring unknown section 'audio'" in caplog.text

    def test_yaml_wins_over_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRAMECAST_RENDER_FPS", "60")
        monkeypatch.setenv("FRAMECAST_FADE_IN_FRAMES", "3")
        config_file = tmp_path / "framecast.yaml"
        config_file.write_text("render:\n  fps: 25\n")
        settings = load_settings(config_file)
        assert settings.render.fps == 25
        assert settings.fade.in_frames == 3
