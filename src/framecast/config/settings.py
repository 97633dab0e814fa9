"""Pydantic settings models for framecast configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseSettings):
    """Default output parameters for compositions that do not override them."""

    model_config = SettingsConfigDict(env_prefix="FRAMECAST_RENDER_", extra="ignore")

    fps: int = Field(
        default=30,
        ge=1,
        le=240,
        description="Default frame rate for catalogued compositions",
    )
    width: int = Field(
        default=3440,
        ge=1,
        description="Default output width in pixels",
    )
    height: int = Field(
        default=1440,
        ge=1,
        description="Default output height in pixels",
    )


class FadeSettings(BaseSettings):
    """Crossfade ramp lengths applied at segment boundaries."""

    model_config = SettingsConfigDict(env_prefix="FRAMECAST_FADE_", extra="ignore")

    in_frames: int = Field(
        default=10,
        ge=0,
        description="Frames used for the fade-in ramp at a segment start",
    )
    out_frames: int = Field(
        default=10,
        ge=0,
        description="Frames used for the fade-out ramp at a segment end",
    )


class SpringSettings(BaseSettings):
    """Default spring parameters for entrance motion."""

    model_config = SettingsConfigDict(env_prefix="FRAMECAST_SPRING_", extra="ignore")

    damping: float = Field(
        default=12.0,
        gt=0.0,
        description="Damping coefficient of the spring",
    )
    stiffness: float = Field(
        default=150.0,
        gt=0.0,
        description="Spring stiffness",
    )
    mass: float = Field(
        default=1.0,
        gt=0.0,
        description="Mass attached to the spring",
    )


class DiagnosticsSettings(BaseSettings):
    """How configuration inconsistencies are reported."""

    model_config = SettingsConfigDict(env_prefix="FRAMECAST_DIAGNOSTICS_", extra="ignore")

    strict_durations: bool = Field(
        default=False,
        description=(
            "Raise ConfigurationError when a segment plan does not add up to "
            "the declared composition duration instead of logging a warning"
        ),
    )


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="FRAMECAST_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    render: RenderSettings = Field(default_factory=RenderSettings)
    fade: FadeSettings = Field(default_factory=FadeSettings)
    spring: SpringSettings = Field(default_factory=SpringSettings)
    diagnostics: DiagnosticsSettings = Field(default_factory=DiagnosticsSettings)

    @property
    def strict_durations(self) -> bool:
        """Convenience accessor for the duration strictness flag."""
        return self.diagnostics.strict_durations
