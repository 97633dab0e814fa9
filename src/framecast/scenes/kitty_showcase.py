"""Kitty showcase: a scrolling pseudo-code panel dissolving into a summary."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.motion import composition_progress, staggered_spring
from framecast.timeline.segments import require_frame

from .base import DEFAULT_TUNING, SceneDefinition, SceneTuning
from .showcase import CodeShowcase, showcase_phase

DURATION = 1380
PSEUDO_SEGMENT_FRAMES = 600
CALLOUT_STAGGER = 10

PSEUDO_CODE = """{ ... }:
{
  programs.kitty = {
    enable = true;
    font = { name = "MonoLisa Nerd Font"; size = 30; };

    settings = {
      cursor_trail = 3;
      tab_fade = "0.15 0.35 0.65 1";
      url_style = "curly";
      detect_urls = "yes";
      copy_on_select = "clipboard";
      enable_audio_bell = "no";
      window_padding_width = 12;
      background_opacity = "0.92";
    };

    extraConfig = ''
      include themes/vaporwave.conf
    '';
  };
}"""

SHOWCASE = CodeShowcase(PSEUDO_CODE, PSEUDO_SEGMENT_FRAMES, line_height=52)
MAX_CODE_SCROLL = SHOWCASE.max_scroll

CALLOUTS: tuple[str, ...] = (
    "1:1 kitty.conf port",
    "String fidelity",
    "Font block",
    "Safe linking",
)


@dataclass(frozen=True)
class KittyShowcaseState:
    code_scroll: float
    pseudo_opacity: float
    summary_opacity: float
    show_summary: bool
    callout_pop: tuple[float, ...]
    progress: float


def evaluate(
    frame: int,
    config: CompositionConfig,
    *,
    tuning: SceneTuning = DEFAULT_TUNING,
) -> KittyShowcaseState:
    frame = require_frame(frame)
    phase = showcase_phase(frame, SHOWCASE)
    callout_pop = tuple(
        staggered_spring(
            frame,
            i,
            CALLOUT_STAGGER,
            config.fps,
            delay=PSEUDO_SEGMENT_FRAMES,
            damping=tuning.damping,
            stiffness=tuning.stiffness,
            mass=tuning.mass,
        )
        for i in range(len(CALLOUTS))
    )
    return KittyShowcaseState(
        code_scroll=phase.code_scroll,
        pseudo_opacity=phase.pseudo_opacity,
        summary_opacity=phase.summary_opacity,
        show_summary=phase.show_summary,
        callout_pop=callout_pop,
        progress=composition_progress(frame, config.duration_in_frames),
    )


SCENE = SceneDefinition(
    name="KittyShowcaseScene",
    evaluate=evaluate,
    default_duration=DURATION,
    tunable=True,
)
