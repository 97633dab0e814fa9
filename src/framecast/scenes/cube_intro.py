"""Brand intro: letters built from blocks that spring into place one by one."""

from __future__ import annotations

from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.easing import cubic, ease_out
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.motion import oscillate, pseudo_random, staggered_spring
from framecast.timeline.segments import require_frame

from .base import DEFAULT_TUNING, SceneDefinition, SceneTuning

DURATION = 360  # 6s @60fps
FPS = 60

# "1" marks a block; any other character is empty. An empty letter is a spacer.
LETTERS: tuple[tuple[str, ...], ...] = (
    ("1000", "1000", "1000", "1000", "1110"),  # L
    ("1001", "1001", "1001", "1001", "1111"),  # U
    ("111", ".1.", ".1.", ".1.", "111"),  # I
    ("10001", ".100.", "..1..", ".100.", "10001"),  # X
    ("",),
    ("1110", "1001", "1110", "1001", "1110"),  # B
    ("111", ".1.", ".1.", ".1.", "111"),  # I
    ("11111", "..1..", "..1..", "..1..", "..1.."),  # T
    ("0111", "1000", "0110", "0001", "1110"),  # S
)

BLOCK_SIZE = 120
ROWS = 5
BLOCK_STAGGER = 2


@dataclass(frozen=True)
class Block:
    index: int
    x: float
    y: float
    hue: float


def _layout_blocks() -> tuple[Block, ...]:
    cells: list[tuple[int, int]] = []
    offset_x = 0
    for letter in LETTERS:
        letter_width = max(len(row) for row in letter)
        for row_index, row in enumerate(letter):
            for col_index, char in enumerate(row):
                if char == "1":
                    cells.append((offset_x + col_index, row_index))
        offset_x += letter_width + 1
    start_x = -(offset_x * BLOCK_SIZE - BLOCK_SIZE) / 2
    start_y = -(ROWS * BLOCK_SIZE) / 2
    return tuple(
        Block(
            index=i,
            x=col * BLOCK_SIZE + start_x,
            y=row * BLOCK_SIZE + start_y,
            hue=190 + pseudo_random(i) * 120,
        )
        for i, (col, row) in enumerate(cells)
    )


BLOCKS = _layout_blocks()


@dataclass(frozen=True)
class BlockState:
    index: int
    x: float
    y: float
    z: float
    rotate: float
    scale: float
    glow: float
    hue: float


@dataclass(frozen=True)
class CubeIntroState:
    camera_push: float
    tilt: float
    sweep: float
    blocks: tuple[BlockState, ...]


def _block(frame: int, block: Block, fps: int, tuning: SceneTuning) -> BlockState:
    enter = staggered_spring(
        frame,
        block.index,
        BLOCK_STAGGER,
        fps,
        damping=tuning.damping,
        stiffness=tuning.stiffness,
        mass=tuning.mass,
        overshoot_clamping=False,
    )
    # The raw spring overshoots; only the pop is held at 1.
    pop = clamped_lerp(enter, [0, 1], [0.0, 1.0], extrapolate_left="extend")
    return BlockState(
        index=block.index,
        x=block.x,
        y=block.y + oscillate(frame, 16, 6, phase=block.index * 9),
        z=-900 + pop * 1000,
        rotate=clamped_lerp(
            enter,
            [0, 1],
            [160.0, 0.0],
            extrapolate_left="extend",
            extrapolate_right="extend",
            easing=ease_out(cubic),
        ),
        scale=0.7 + pop * 0.35,
        glow=clamped_lerp(pop, [0, 1], [0.1, 0.7]),
        hue=block.hue,
    )


def evaluate(
    frame: int,
    config: CompositionConfig,
    *,
    tuning: SceneTuning = DEFAULT_TUNING,
) -> CubeIntroState:
    frame = require_frame(frame)
    return CubeIntroState(
        camera_push=clamped_lerp(frame, [0, 90, 180], [1400.0, 800.0, 500.0]),
        tilt=clamped_lerp(frame, [0, 120], [22.0, 0.0], easing=ease_out(cubic)),
        sweep=clamped_lerp(frame, [0, 120, 220], [90.0, 30.0, -10.0]),
        blocks=tuple(_block(frame, b, config.fps, tuning) for b in BLOCKS),
    )


SCENE = SceneDefinition(
    name="LuixBitsCubeIntroScene",
    evaluate=evaluate,
    default_duration=DURATION,
    tunable=True,
)
