"""Code showcase: a pseudo-code panel that scrolls, then dissolves into a summary."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.timeline.crossfade import cross_dissolve
from framecast.timeline.motion import scroll_offset

TRANSITION_FRAMES = 18
SUMMARY_LEAD = 4
CODE_VISIBLE_HEIGHT = 1080
CODE_EXTRA_PADDING = 160


@dataclass(frozen=True)
class CodeShowcase:
    """Static timing of a showcase.

    The code scrolls from the top to its last line over the first
    ``pseudo_frames`` frames. The summary takes over at ``pseudo_frames``.
    """

    code: str
    pseudo_frames: int
    line_height: int
    transition_frames: int = TRANSITION_FRAMES
    summary_lead: int = SUMMARY_LEAD

    @property
    def line_count(self) -> int:
        return len(self.code.strip().split("\n"))

    @property
    def max_scroll(self) -> float:
        """Pixels the code moves up to bring its last line into view."""
        return max(
            0,
            self.line_count * self.line_height + CODE_EXTRA_PADDING - CODE_VISIBLE_HEIGHT,
        )


@dataclass(frozen=True)
class ShowcasePhase:
    code_scroll: float
    pseudo_opacity: float
    summary_opacity: float
    show_summary: bool


def showcase_phase(frame: int, showcase: CodeShowcase) -> ShowcasePhase:
    pseudo_opacity, summary_opacity = cross_dissolve(
        frame,
        showcase.pseudo_frames,
        out_frames=showcase.transition_frames,
        in_frames=showcase.transition_frames,
        lead=showcase.summary_lead,
    )
    return ShowcasePhase(
        code_scroll=-scroll_offset(frame, showcase.pseudo_frames, showcase.max_scroll),
        pseudo_opacity=pseudo_opacity,
        summary_opacity=summary_opacity,
        show_summary=frame >= showcase.pseudo_frames,
    )
