"""Segment plans: splitting a composition's duration into ordered segments.

A :class:`SegmentPlan` is built once per composition from static
configuration. Resolving a frame against it is a binary search over the
prefix sums computed at construction, so per-frame cost does not grow
with repeated calls.
"""

from __future__ import annotations

import logging
import numbers
import operator
from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import accumulate

from framecast.errors import ConfigurationError, OutOfRangeError

logger = logging.getLogger(__name__)


def _is_integer(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def require_frame(frame: int) -> int:
    """Validate a frame index and return it as a plain ``int``.

    Any integral type is accepted, including numpy integer scalars such as
    the elements of ``np.arange``.

    Raises:
        TypeError: If ``frame`` is not an integer (``bool`` is rejected).
        OutOfRangeError: If ``frame`` is negative.
    """
    if not _is_integer(frame):
        raise TypeError(f"Frame index must be an integer, got {type(frame).__name__}")
    frame = operator.index(frame)
    if frame < 0:
        raise OutOfRangeError(f"Frame index must be >= 0, got {frame}")
    return frame


@dataclass(frozen=True)
class SegmentResolution:
    """Where a frame falls within a segment plan.

    Attributes:
        index: Zero-based index of the active segment.
        start: First frame of the segment.
        end: First frame after the segment (half-open end).
        local_frame: ``frame - start``. Not clamped past the plan's end.
        progress: Position within the segment in ``[0, 1]``. Frames past
            the end of the plan report ``1.0``.
    """

    index: int
    start: int
    end: int
    local_frame: int
    progress: float

    @property
    def length(self) -> int:
        """Number of frames in the active segment."""
        return self.end - self.start


@dataclass(frozen=True)
class SegmentPlan:
    """An ordered, immutable sequence of segment lengths in frames."""

    durations: tuple[int, ...]
    starts: tuple[int, ...] = field(init=False, repr=False)
    ends: tuple[int, ...] = field(init=False, repr=False)

    def __init__(self, durations: Iterable[int]) -> None:
        values = tuple(durations)
        if not values:
            raise ConfigurationError("Segment plan must contain at least one segment")
        for i, value in enumerate(values):
            if not _is_integer(value) or value <= 0:
                raise ConfigurationError(
                    f"Segment {i} must be a positive integer frame count, got {value!r}"
                )
        values = tuple(operator.index(value) for value in values)
        ends = tuple(accumulate(values))
        object.__setattr__(self, "durations", values)
        object.__setattr__(self, "ends", ends)
        object.__setattr__(self, "starts", (0, *ends[:-1]))

    @classmethod
    def from_seconds(cls, seconds: Sequence[float], fps: int) -> SegmentPlan:
        """Build a plan from segment lengths in seconds, rounded to frames."""
        if fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {fps!r}")
        return cls(round(s * fps) for s in seconds)

    @classmethod
    def even(cls, total_frames: int, count: int) -> SegmentPlan:
        """Split ``total_frames`` into ``count`` segments of near-equal length.

        The remainder goes to the earliest segments, so lengths differ by at
        most one frame and always add up to ``total_frames``.
        """
        if count <= 0:
            raise ConfigurationError(f"Segment count must be positive, got {count!r}")
        if total_frames < count:
            raise ConfigurationError(
                f"Cannot split {total_frames} frames into {count} non-empty segments"
            )
        base, extra = divmod(total_frames, count)
        return cls(base + 1 if i < extra else base for i in range(count))

    @property
    def total_frames(self) -> int:
        """Sum of all segment lengths."""
        return self.ends[-1]

    def __len__(self) -> int:
        return len(self.durations)

    def __iter__(self) -> Iterator[int]:
        return iter(self.durations)

    def resolve(self, frame: int) -> SegmentResolution:
        """Resolve the active segment for ``frame``.

        Segments are half-open: ``frame == start`` belongs to the segment
        that starts there. Frames at or past the end of the plan resolve to
        the last segment with ``progress == 1.0``.

        Raises:
            TypeError: If ``frame`` is not an integer.
            OutOfRangeError: If ``frame`` is negative.
        """
        frame = require_frame(frame)
        index = bisect_right(self.starts, frame) - 1
        start = self.starts[index]
        end = self.ends[index]
        local_frame = frame - start
        if frame >= end:
            progress = 1.0
        else:
            progress = local_frame / (end - start)
        return SegmentResolution(
            index=index,
            start=start,
            end=end,
            local_frame=local_frame,
            progress=progress,
        )

    def index_of(self, frame: int) -> int:
        """Index of the active segment for ``frame``."""
        return self.resolve(frame).index

    def check_duration(
        self,
        duration_in_frames: int,
        owner: str = "composition",
        *,
        strict: bool = False,
    ) -> bool:
        """Compare the plan's total against a declared duration.

        A mismatch is a diagnostic, not a failure: frames past the plan clamp
        to the last segment and frames the plan covers beyond the declared
        duration are simply never requested. With ``strict`` the mismatch
        raises instead.

        Returns:
            True if the totals agree, False otherwise.

        Raises:
            ConfigurationError: On mismatch when ``strict`` is set.
        """
        if duration_in_frames == self.total_frames:
            return True
        message = (
            f"{owner} declares {duration_in_frames} frames but its segment plan "
            f"adds up to {self.total_frames}"
        )
        if strict:
            raise ConfigurationError(message)
        logger.warning(
            "%s declares %d frames but its segment plan adds up to %d",
            owner,
            duration_in_frames,
            self.total_frames,
        )
        return False
