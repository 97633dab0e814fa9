"""Starculator trailer: four short sequences over a scrolling star field.

Each sequence only exists inside its window and runs on its own local
clock, ``frame - start``. Outside the window its state is None.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from framecast.models.composition import CompositionConfig
from framecast.timeline.easing import cubic, ease_out
from framecast.timeline.interpolate import clamped_lerp
from framecast.timeline.segments import require_frame
from framecast.timeline.spring import spring_progress

from .base import SceneDefinition

DURATION = 420  # 14s @30fps
STAR_COUNT = 120
PARTICLE_COUNT = 32
SMOKE_COUNT = 9

EXPLOSION_START = 26
EXPLOSION_FRAMES = 18


@dataclass(frozen=True)
class Window:
    start: int
    length: int

    def local(self, frame: int) -> int | None:
        """Frame on the sequence clock, or None outside the window."""
        if self.start <= frame < self.start + self.length:
            return frame - self.start
        return None


NIXOS_WINDOW = Window(15, 75)
TECH_WINDOW = Window(90, 105)
JUMP_WINDOW = Window(195, 90)
REVEAL_WINDOW = Window(285, 105)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def _raw_spring(
    frame: float, fps: int, damping: float, stiffness: float, mass: float = 1.0,
) -> float:
    return spring_progress(
        frame, fps, damping=damping, stiffness=stiffness, mass=mass, overshoot_clamping=False,
    )


@dataclass(frozen=True)
class Star:
    x: float
    y: float
    size: float
    speed: float
    sparkle: float


def _build_stars() -> tuple[Star, ...]:
    stars = []
    for i in range(STAR_COUNT):
        seed = math.sin(i * 999)
        # math.fmod keeps the seed's sign, so some stars start left of the frame.
        stars.append(
            Star(
                x=math.fmod(seed * 1000, 100),
                y=math.fmod(math.fmod(seed * 7000, 100) + 100, 100),
                size=1.2 + math.fmod(seed * 13, 2),
                speed=0.04 + math.fmod(seed * 7, 0.08),
                sparkle=0.4 + math.fmod(seed * 5, 0.4),
            )
        )
    return tuple(stars)


@dataclass(frozen=True)
class Particle:
    angle: float
    speed: float
    size: float
    spin: float


def _build_particles() -> tuple[Particle, ...]:
    particles = []
    for i in range(PARTICLE_COUNT):
        seed = math.sin(i * 23.7 + 7.1)
        particles.append(
            Particle(
                angle=(seed + 1) / 2 * math.pi * 2,
                speed=10 + math.fmod(seed * 100, 18),
                size=8 + math.fmod(seed * 1000, 14),
                spin=math.fmod(seed * 10, 1) * 180,
            )
        )
    return tuple(particles)


@dataclass(frozen=True)
class Puff:
    dx: float
    size: float
    delay: int


def _build_smoke() -> tuple[Puff, ...]:
    puffs = []
    for i in range(SMOKE_COUNT):
        seed = math.sin(i * 31.7)
        puffs.append(
            Puff(dx=math.fmod(seed * 40, 28), size=24 + math.fmod(seed * 23, 22), delay=i * 2)
        )
    return tuple(puffs)


STARS = _build_stars()
PARTICLES = _build_particles()
SMOKE = _build_smoke()


@dataclass(frozen=True)
class Tech:
    label: str
    delay: int
    accent: str = ""


TECHS: tuple[Tech, ...] = (
    Tech("NixOS", 6),
    Tech("Dockerized Services", 10, "Local only"),
    Tech("Cloudflare Tunnel", 14, "Secure ingress"),
    Tech("Traefik Routing", 18, "Reverse proxy"),
    Tech("Svelte + Threlte", 22, "Frontend + 3D"),
)


@dataclass(frozen=True)
class StarState:
    x: float
    y: float
    size: float
    opacity: float


@dataclass(frozen=True)
class ParticleState:
    x: float
    y: float
    size: float
    rotation: float
    opacity: float


@dataclass(frozen=True)
class NixosState:
    scale: float
    tilt: float
    exit_fade: float
    explosion: float
    icon_opacity: float
    icon_scale: float
    hue: float
    particles: tuple[ParticleState, ...]


@dataclass(frozen=True)
class TechState:
    label: str
    accent: str
    pop: float
    float_y: float
    pew_opacity: float


@dataclass(frozen=True)
class TechStackState:
    title_opacity: float
    title_y: float
    techs: tuple[TechState, ...]


@dataclass(frozen=True)
class PuffState:
    x: float
    rise: float
    size: float
    opacity: float


@dataclass(frozen=True)
class JumpDriveState:
    pop: float
    y: float
    glow: float
    flame_scale: float
    jitter: float
    rocket_tilt: float
    smoke: tuple[PuffState, ...]


@dataclass(frozen=True)
class RevealState:
    scale: float
    opacity: float
    slide_x: float
    tilt: float
    ribbon_shift: float
    pulse: float


@dataclass(frozen=True)
class StarculatorTrailerState:
    star_opacity: float
    stars: tuple[StarState, ...]
    nixos: NixosState | None
    tech_stack: TechStackState | None
    jump_drive: JumpDriveState | None
    reveal: RevealState | None
    darken: float


def _stars(frame: int, layer_opacity: float) -> tuple[StarState, ...]:
    states = []
    for i, star in enumerate(STARS):
        twinkle = clamped_lerp(math.sin((frame + i * 8) / 10), [-1, 1], [0.35, 1.0])
        states.append(
            StarState(
                x=star.x,
                y=math.fmod(star.y + frame * star.speed, 100),
                size=star.size,
                opacity=layer_opacity * (0.5 + star.sparkle * twinkle),
            )
        )
    return tuple(states)


def _nixos(local: int, fps: int) -> NixosState:
    bounce = _raw_spring(local, fps, damping=10, stiffness=180, mass=0.8)
    elapsed = max(0, local - EXPLOSION_START)
    explosion = clamped_lerp(
        elapsed, [0, EXPLOSION_FRAMES], [0.0, 1.0], easing=ease_out(cubic),
    )
    particles = tuple(
        ParticleState(
            x=math.cos(p.angle) * p.speed * explosion,
            y=math.sin(p.angle) * p.speed * explosion - explosion * 20,
            size=p.size * (0.6 + explosion * 0.6),
            rotation=p.spin * explosion,
            opacity=_unit(1 - explosion * 1.1),
        )
        for p in PARTICLES
    ) if elapsed > 0 else ()
    return NixosState(
        scale=clamped_lerp(bounce, [0, 1], [0.5, 1.05], extrapolate_left="extend"),
        tilt=clamped_lerp(local, [0, 20], [12.0, 0.0], "extend", "extend"),
        exit_fade=clamped_lerp(local, [42, 72], [1.0, 0.0]),
        explosion=explosion,
        icon_opacity=max(0.0, 1 - explosion * 1.3) if elapsed > 0 else 1.0,
        icon_scale=1 + explosion * 0.08,
        hue=(local * 2) % 360,
        particles=particles,
    )


def _tech_stack(local: int, fps: int) -> TechStackState:
    techs = []
    for i, tech in enumerate(TECHS):
        enter = _raw_spring(local - tech.delay, fps, damping=11, stiffness=150, mass=0.7)
        techs.append(
            TechState(
                label=tech.label,
                accent=tech.accent,
                pop=_unit(enter),
                float_y=math.sin((local + i * 8) / 20) * 6,
                pew_opacity=clamped_lerp(local - tech.delay, [0, 16], [0.9, 0.0]),
            )
        )
    return TechStackState(
        title_opacity=clamped_lerp(local, [0, 10], [0.0, 1.0]),
        title_y=clamped_lerp(local, [0, 20], [30.0, 0.0], easing=ease_out(cubic)),
        techs=tuple(techs),
    )


def _jump_drive(local: int, fps: int) -> JumpDriveState:
    pop = _raw_spring(local, fps, damping=9, stiffness=170, mass=0.7)
    smoke = []
    for puff in SMOKE:
        progress = _unit((local - puff.delay) / 20)
        smoke.append(
            PuffState(
                x=puff.dx,
                rise=progress * -65,
                size=puff.size * (0.6 + progress * 0.9),
                opacity=0.8 - progress * 0.8,
            )
        )
    return JumpDriveState(
        pop=pop,
        y=clamped_lerp(pop, [0, 1], [90.0, -40.0], extrapolate_left="extend"),
        glow=clamped_lerp(local, [0, 30], [0.3, 0.9]),
        flame_scale=clamped_lerp(local, [0, 30], [0.8, 1.4]),
        jitter=math.sin(local / 6) * (1 - pop) * 3,
        rocket_tilt=clamped_lerp(pop, [0, 1], [6.0, -4.0], extrapolate_left="extend"),
        smoke=tuple(smoke),
    )


def _reveal(local: int, fps: int) -> RevealState:
    pop = _raw_spring(local, fps, damping=12, stiffness=150)
    return RevealState(
        scale=clamped_lerp(pop, [0, 1], [0.85, 1.08], extrapolate_left="extend"),
        opacity=clamped_lerp(local, [0, 12], [0.0, 1.0]),
        slide_x=clamped_lerp(local, [0, 24], [160.0, 0.0], easing=ease_out(cubic)),
        tilt=clamped_lerp(local, [0, 24], [18.0, 8.0], easing=ease_out(cubic)),
        ribbon_shift=clamped_lerp(local, [0, 24], [-120.0, 40.0]),
        pulse=clamped_lerp(local % 50, [0, 25, 50], [0.4, 1.0, 0.4]),
    )


def evaluate(frame: int, config: CompositionConfig) -> StarculatorTrailerState:
    frame = require_frame(frame)
    star_opacity = clamped_lerp(frame, [0, 15], [0.0, 1.0])
    nixos = NIXOS_WINDOW.local(frame)
    tech = TECH_WINDOW.local(frame)
    jump = JUMP_WINDOW.local(frame)
    reveal = REVEAL_WINDOW.local(frame)
    return StarculatorTrailerState(
        star_opacity=star_opacity,
        stars=_stars(frame, star_opacity),
        nixos=None if nixos is None else _nixos(nixos, config.fps),
        tech_stack=None if tech is None else _tech_stack(tech, config.fps),
        jump_drive=None if jump is None else _jump_drive(jump, config.fps),
        reveal=None if reveal is None else _reveal(reveal, config.fps),
        darken=clamped_lerp(frame, [360, 420], [0.0, 0.9]),
    )


SCENE = SceneDefinition(
    name="StarculatorTrailerScene",
    evaluate=evaluate,
    default_duration=DURATION,
)
