"""Terminal window shared by the scenes that type shell commands.

Every line is always present in the state. Before its start frame a line
has zero presence and no text, so renderers can lay the window out once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import RevealMode, revealed_count

DEFAULT_FRAMES_PER_CHAR = 3
CURSOR_BLINK_FRAMES = 10
PRESENCE_FRAMES = 10


@dataclass(frozen=True)
class TerminalLine:
    prompt: str
    text: str
    start_frame: int
    mode: RevealMode = RevealMode.TYPE
    frames_per_char: int = DEFAULT_FRAMES_PER_CHAR


@dataclass(frozen=True)
class LineState:
    """One terminal line at a frame.

    Attributes:
        prompt: Prompt shown before the text, empty for command output.
        text: Revealed prefix of the line.
        presence: Fade-in of the whole line, 0 before its start frame.
        flash: Highlight behind a pasted line, decaying to 0.
        typing: True while characters are still being revealed.
        cursor: True when the caret is drawn after the text.
    """

    prompt: str
    text: str
    presence: float
    flash: float
    typing: bool
    cursor: bool


def line_state(frame: int, line: TerminalLine) -> LineState:
    count = revealed_count(
        line.text, frame, line.start_frame, line.mode, line.frames_per_char,
    )
    elapsed = frame - line.start_frame
    flash = 0.0
    if line.mode is RevealMode.PASTE:
        flash = clamped_lerp(elapsed, [0, 8, 40], [1.0, 0.2, 0.0])
    typing = count < len(line.text) and frame >= line.start_frame
    return LineState(
        prompt=line.prompt,
        text=line.text[:count],
        presence=clamped_lerp(elapsed, [0, PRESENCE_FRAMES], [0.0, 1.0]),
        flash=flash,
        typing=typing,
        # Only the line being typed shows a caret, blinking every 10 frames.
        cursor=typing and math.floor(frame / CURSOR_BLINK_FRAMES) % 2 == 0,
    )


def terminal_lines(frame: int, lines: tuple[TerminalLine, ...]) -> tuple[LineState, ...]:
    """State of every line in ``lines`` at ``frame``."""
    return tuple(line_state(frame, line) for line in lines)
