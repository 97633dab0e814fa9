"""Terminal migration: shell commands typed out one line at a time."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.easing import ease_in_out, sine
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import RevealMode
from framecast.timeline.segments import require_frame

from .base import SceneDefinition
from .terminal import LineState, TerminalLine, terminal_lines

DURATION = 1260
PROMPT = "λ nixos@luix ~"

LINES: tuple[TerminalLine, ...] = (
    TerminalLine(PROMPT, "mkdir -p ~/luix_nix_config", 20),
    TerminalLine(PROMPT, "sudo cp -r /etc/nixos/* ~/luix_nix_config/", 150),
    TerminalLine(PROMPT, "sudo chown -R luix:users ~/luix_nix_config", 330),
    TerminalLine(PROMPT, "sudo mv /etc/nixos /etc/nixos_backup", 510),
    TerminalLine(PROMPT, "sudo ln -s ~/luix_nix_config /etc/nixos", 690),
    TerminalLine(PROMPT, "sudo nixos-rebuild switch", 870),
    TerminalLine(
        "",
        "system rebuild complete - dotfiles now live in ~/luix_nix_config",
        1080,
        RevealMode.PASTE,
    ),
)


@dataclass(frozen=True)
class TerminalMigrationState:
    lines: tuple[LineState, ...]
    float_offset: float

    @property
    def cursor_visible(self) -> bool:
        """True if any line is drawing its caret."""
        return any(line.cursor for line in self.lines)


def evaluate(frame: int, config: CompositionConfig) -> TerminalMigrationState:
    frame = require_frame(frame)
    # Keeps bobbing between 0 and 18 after the first 140 frames.
    float_offset = clamped_lerp(
        frame,
        [0, 140],
        [0.0, 18.0],
        extrapolate_right="extend",
        easing=ease_in_out(sine),
    )
    return TerminalMigrationState(
        lines=terminal_lines(frame, LINES),
        float_offset=float_offset,
    )


SCENE = SceneDefinition(
    name="TerminalMigrationScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
