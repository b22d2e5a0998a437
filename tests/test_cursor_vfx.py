import math
from types import SimpleNamespace

import pytest

from neoframe.animation import Point
from neoframe.cursor_vfx import (
    Particle,
    ParticleTrail,
    Pcg32,
    PointHighlight,
    new_cursor_vfx,
    rotate_vec,
)
from neoframe.vfx_mode import VfxMode


@pytest.fixture
def settings():
    return SimpleNamespace(
        vfx_opacity=200.0,
        vfx_particle_lifetime=1.2,
        vfx_particle_density=7.0,
        vfx_particle_speed=10.0,
        vfx_particle_phase=1.5,
        vfx_particle_curl=1.0,
    )


FONT = (8, 16)


def test_rng_is_deterministic():
    a, b = Pcg32(), Pcg32()
    assert [a.next_u32() for _ in range(20)] == [b.next_u32() for _ in range(20)]


def test_rng_values_in_range():
    rng = Pcg32()
    values = [rng.next_u32() for _ in range(200)]
    assert all(0 <= v < 2**32 for v in values)
    assert len(set(values)) > 190


def test_next_float_in_unit_range():
    rng = Pcg32()
    floats = [rng.next_float() for _ in range(500)]
    assert all(0.0 <= f <= 1.0 for f in floats)
    assert min(floats) < 0.2
    assert max(floats) > 0.8


def test_rand_dir_range_and_normalized():
    rng = Pcg32()
    for _ in range(100):
        d = rng.rand_dir()
        assert -1.0 <= d.x <= 1.0
        assert -1.0 <= d.y <= 1.0
    for _ in range(100):
        n = rng.rand_dir_normalized()
        assert n.length() == pytest.approx(1.0)


def test_rotate_vec_preserves_length_and_inverts():
    v = Point(3.0, -2.0)
    rotated = rotate_vec(v, 0.7)
    assert rotated.length() == pytest.approx(v.length())
    back = rotate_vec(rotated, -0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)
    assert rotate_vec(v, 0.0) == v


def test_rotate_quarter_turn_is_perpendicular():
    v = Point(1.0, 2.0)
    assert rotate_vec(v, math.pi / 2).dot(v) == pytest.approx(0.0, abs=1e-12)


def test_point_highlight_runs_then_stops(settings):
    highlight = PointHighlight(VfxMode.RIPPLE)
    assert highlight.update(settings, Point(1.0, 1.0), FONT, 0.01) is True
    assert highlight.update(settings, Point(1.0, 1.0), FONT, 10.0) is False
    assert highlight.t == 1.0


def test_point_highlight_restart(settings):
    highlight = PointHighlight(VfxMode.SONIC_BOOM)
    highlight.update(settings, Point(), FONT, 10.0)
    highlight.restart(Point(4.0, 5.0))
    assert highlight.t == 0.0
    assert highlight.center_position == Point(4.0, 5.0)


def test_trail_without_movement_spawns_nothing(settings):
    trail = ParticleTrail(VfxMode.TORPEDO)
    assert trail.update(settings, Point(0.0, 0.0), FONT, 0.016) is False
    assert trail.particles == []


@pytest.mark.parametrize("mode", [VfxMode.RAILGUN, VfxMode.TORPEDO, VfxMode.PIXIE_DUST])
def test_trail_spawns_and_dies(settings, mode):
    trail = ParticleTrail(mode)
    destination = Point(800.0, 320.0)
    assert trail.update(settings, destination, FONT, 0.016) is True
    assert trail.particles
    assert trail.previous_cursor_dest == destination
    for particle in trail.particles:
        assert 0.0 <= particle.lifetime < settings.vfx_particle_lifetime
    assert trail.update(settings, destination, FONT, 5.0) is False
    assert trail.particles == []


def test_longer_travel_spawns_more_particles(settings):
    short, long = ParticleTrail(VfxMode.RAILGUN), ParticleTrail(VfxMode.RAILGUN)
    short.update(settings, Point(160.0, 0.0), FONT, 0.0)
    long.update(settings, Point(1600.0, 0.0), FONT, 0.0)
    assert len(long.particles) > len(short.particles) > 0


def test_zero_density_spawns_nothing(settings):
    settings.vfx_particle_density = 0.0
    trail = ParticleTrail(VfxMode.PIXIE_DUST)
    assert trail.update(settings, Point(1000.0, 1000.0), FONT, 0.0) is False


def test_railgun_particles_lie_on_travel_path(settings):
    trail = ParticleTrail(VfxMode.RAILGUN)
    trail.update(settings, Point(800.0, 0.0), FONT, 0.0)
    assert trail.particles[0].pos == Point(0.0, 0.0)
    for particle in trail.particles:
        assert particle.pos.y == 0.0
        assert 0.0 <= particle.pos.x < 800.0
        assert particle.rotation_speed == pytest.approx(math.pi)


def test_particles_move_with_their_speed(settings):
    trail = ParticleTrail(VfxMode.RAILGUN)
    trail.particles = [Particle(Point(1.0, 1.0), Point(2.0, 0.0), 0.0, 1.0)]
    assert trail.update(settings, Point(0.0, 0.0), FONT, 0.5) is True
    assert trail.particles[0].pos == Point(2.0, 1.0)
    assert trail.particles[0].lifetime == pytest.approx(0.5)


def test_trail_restart_changes_nothing(settings):
    trail = ParticleTrail(VfxMode.TORPEDO)
    trail.update(settings, Point(500.0, 200.0), FONT, 0.0)
    before = list(trail.particles)
    trail.restart(Point(9.0, 9.0))
    assert trail.particles == before
    assert trail.previous_cursor_dest == Point(500.0, 200.0)


def test_new_cursor_vfx():
    highlight = new_cursor_vfx(VfxMode.WIREFRAME)
    assert isinstance(highlight, PointHighlight)
    assert highlight.mode is VfxMode.WIREFRAME
    trail = new_cursor_vfx(VfxMode.PIXIE_DUST)
    assert isinstance(trail, ParticleTrail)
    assert trail.trail_mode is VfxMode.PIXIE_DUST
    assert new_cursor_vfx(VfxMode.DISABLED) is None