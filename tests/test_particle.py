"""
Tests for spark particles
"""

import pytest
from src.core.constants import PrimitiveKind, SPARK_SIZE, PARTICLE_GRAVITY
from src.entities.particle import Particle

def make_particle(surface, vel=(2.0, -3.0)):
    return Particle((100.0, 200.0), vel, (255, 0, 0), surface)

def test_particle_creates_spark_primitive(surface):
    """Test particle registers one spark on construction."""
    particle = make_particle(surface)

    assert particle.life == 1.0
    assert not particle.is_dead()
    primitive = surface.primitives[particle.handle]
    assert primitive["kind"] == PrimitiveKind.SPARK
    assert primitive["size"] == SPARK_SIZE
    assert primitive["position"] == (100.0, 200.0)

def test_particle_motion_and_gravity(surface):
    """Test position moves by velocity, then gravity pulls velocity down."""
    particle = make_particle(surface)
    particle.advance()

    assert particle.x == pytest.approx(102.0)
    assert particle.y == pytest.approx(197.0)
    assert particle.vy == pytest.approx(-3.0 + PARTICLE_GRAVITY)

    particle.advance()
    assert particle.y == pytest.approx(197.0 - 3.0 + PARTICLE_GRAVITY)

def test_particle_alpha_follows_life(surface):
    """Test the surface receives an alpha proportional to life."""
    particle = make_particle(surface)
    particle.advance()

    _, handle, position, color = surface.calls[-1]
    assert handle == particle.handle
    assert position == (particle.x, particle.y)
    assert color == (255, 0, 0, int(255 * 0.985))

def test_particle_life_strictly_decreasing(surface):
    """Test life drops every tick until the particle dies."""
    particle = make_particle(surface)
    previous = particle.life
    while particle.advance():
        assert particle.life < previous
        previous = particle.life
    assert particle.life < previous

def test_particle_dies_after_67_ticks(surface):
    """Test the spark burns out on the first tick life reaches zero."""
    particle = make_particle(surface)
    handle = particle.handle

    for _ in range(66):
        assert particle.advance()
    assert particle.life > 0

    assert not particle.advance()
    assert particle.is_dead()
    assert handle not in surface.primitives
    assert particle.handle is None
    assert surface.calls[-1] == ("remove", handle)

def test_particle_release_is_idempotent(surface):
    """Test releasing twice removes the primitive only once."""
    particle = make_particle(surface)
    particle.release()
    particle.release()
    assert surface.count("remove") == 1
