"""Static composition parameters."""

import math

from pydantic import BaseModel, ConfigDict, Field


class CompositionConfig(BaseModel):
    """Immutable description of one renderable composition.

    Created once when the registry is built and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique composition identifier")
    duration_in_frames: int = Field(..., gt=0, description="Total length in frames")
    fps: int = Field(..., gt=0, description="Frames per second")
    width: int = Field(..., gt=0, description="Output width in pixels")
    height: int = Field(..., gt=0, description="Output height in pixels")

    @property
    def duration_seconds(self) -> float:
        """Composition length in seconds."""
        return self.duration_in_frames / self.fps

    def frames_for(self, seconds: float) -> int:
        """Convert a duration in seconds to whole frames at this fps.

        Args:
            seconds: Duration to convert.

        Returns:
            Frame count, rounded to the nearest frame.
        """
        return int(math.floor(seconds * self.fps + 0.5))
