"""Animated cursor effects: expanding highlights and particle trails."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Any

from neoframe.animation import Point
from neoframe.vfx_mode import VfxMode

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_PCG_MULTIPLIER = 6_364_136_223_846_793_005


def _to_f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _rotate_right32(value: int, amount: int) -> int:
    amount &= 31
    return ((value >> amount) | (value << (32 - amount))) & _MASK32


class Pcg32:
    """A small PCG (XSH-RR) random number generator with a fixed default seed."""

    def __init__(
        self,
        state: int = 0x853C_49E6_748F_EA9B,
        inc: int = ((0xDA3E_39CB_94B9_5BDB << 1) | 1) & _MASK64,
    ) -> None:
        self.state = state & _MASK64
        self.inc = inc & _MASK64

    def next_u32(self) -> int:
        old_state = self.state
        self.state = (old_state * _PCG_MULTIPLIER + self.inc) & _MASK64
        rotation = old_state >> 59
        xorshifted = (((old_state >> 18) ^ old_state) >> 27) & _MASK32
        return _rotate_right32(xorshifted, rotation)

    def next_float(self) -> float:
        """A value in [0, 1) taken from the next 32 random bits."""
        return _to_f32(math.ldexp(self.next_u32(), -32))

    def rand_dir(self) -> Point:
        """A vector with both components in [-1, 1); not normalized."""
        x = self.next_float()
        y = self.next_float()
        return Point(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Point:
        return self.rand_dir().normalized()


def rotate_vec(v: Point, rot: float) -> Point:
    """Rotate ``v`` by ``rot`` radians."""
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Point(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


class PointHighlight:
    """A shape that grows from the cursor position and fades out."""

    def __init__(self, mode: VfxMode) -> None:
        self.t = 0.0
        self.center_position = Point(0.0, 0.0)
        self.mode = mode

    def update(
        self, settings: Any, destination: Point, font_size: tuple[int, int], dt: float
    ) -> bool:
        """Advance the animation; True while it is still running."""
        self.t = min(self.t + dt * 5.0, 1.0)
        return self.t < 1.0

    def restart(self, position: Point) -> None:
        self.t = 0.0
        self.center_position = position


@dataclass
class Particle:
    pos: Point
    speed: Point
    rotation_speed: float
    lifetime: float


def _particle_count(value: float) -> int:
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value)


class ParticleTrail:
    """Particles spawned along the path the cursor travels.

    ``settings`` passed to ``update`` needs the ``vfx_particle_*`` attributes
    of the cursor settings.
    """

    def __init__(self, trail_mode: VfxMode) -> None:
        self.particles: list[Particle] = []
        self.previous_cursor_dest = Point(0.0, 0.0)
        self.trail_mode = trail_mode
        self.rng = Pcg32()

    def _speed(self, settings: Any, travel: Point, distance: float, font_width: int, t: float) -> Point:
        if self.trail_mode is VfxMode.RAILGUN:
            phase = t / math.pi * settings.vfx_particle_phase * (distance / font_width)
            return Point(math.sin(phase), math.cos(phase)) * 2.0 * settings.vfx_particle_speed
        if self.trail_mode is VfxMode.TORPEDO:
            travel_dir = travel.normalized()
            particle_dir = (self.rng.rand_dir_normalized() - travel_dir * 1.5).normalized()
            return particle_dir * settings.vfx_particle_speed
        base_dir = self.rng.rand_dir_normalized()
        direction = Point(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
        return direction * 3.0 * settings.vfx_particle_speed

    def update(
        self, settings: Any, destination: Point, font_size: tuple[int, int], dt: float
    ) -> bool:
        """Age, move and spawn particles; True while any particle is alive."""
        font_width, font_height = font_size

        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if destination != self.previous_cursor_dest:
            previous = self.previous_cursor_dest
            travel = destination - previous
            distance = travel.length()

            # Longer jumps leave more particles behind.
            count = _particle_count(
                (distance / font_width) ** 1.5 * settings.vfx_particle_density * 0.01
            )

            for i in range(count):
                t = i / count
                speed = self._speed(settings, travel, distance, font_width, t)

                if self.trail_mode is VfxMode.RAILGUN:
                    pos = previous + travel * t
                    rotation_speed = math.pi * settings.vfx_particle_curl
                else:
                    pos = (
                        previous
                        + travel * self.rng.next_float()
                        + Point(0.0, font_height * 0.5)
                    )
                    rotation_speed = (
                        (self.rng.next_float() - 0.5)
                        * (math.pi / 2.0)
                        * settings.vfx_particle_curl
                    )

                self.particles.append(
                    Particle(pos, speed, rotation_speed, t * settings.vfx_particle_lifetime)
                )

            self.previous_cursor_dest = destination

        return bool(self.particles)

    def restart(self, position: Point) -> None:
        """Trails keep running across cursor shape changes."""


def new_cursor_vfx(mode: VfxMode) -> PointHighlight | ParticleTrail | None:
    """The effect object for ``mode``, or None when effects are disabled."""
    if mode.is_highlight():
        return PointHighlight(mode)
    if mode.is_trail():
        return ParticleTrail(mode)
    return None