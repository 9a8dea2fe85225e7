import pytest

from wrach.body import MAX_VELOCITY, Body
from wrach.models import Vec2, WorldSettings


def _settings():
    return WorldSettings(view_dimensions=Vec2(10.0, 10.0), view_anchor=Vec2(0.0, 0.0))


def test_load_reads_the_indexed_particle():
    positions = [Vec2(1.0, 2.0), Vec2(3.0, 4.0)]
    velocities = [Vec2(0.1, 0.2), Vec2(0.3, 0.4)]
    body = Body.load(1, positions, velocities)
    assert body.index == 1
    assert body.position == Vec2(3.0, 4.0)
    assert body.velocity == Vec2(0.3, 0.4)


def test_load_out_of_range_raises():
    with pytest.raises(IndexError):
        Body.load(5, [Vec2()], [Vec2()])


def test_integrate_moves_by_velocity():
    body = Body(0, Vec2(1.0, 1.0), Vec2(1.0, 0.0))
    body.integrate()
    assert body.position == Vec2(2.0, 1.0)
    assert body.velocity == Vec2(1.0, 0.0)


def test_zero_velocity_integration_keeps_position():
    body = Body(0, Vec2(3.5, 4.5), Vec2(0.0, 0.0))
    body.integrate()
    assert body.position == Vec2(3.5, 4.5)


def test_enforce_velocity_clamps_to_max():
    body = Body(0, Vec2(), Vec2(5.0, -5.0))
    body.enforce_velocity()
    assert body.velocity == Vec2(MAX_VELOCITY, -MAX_VELOCITY)


def test_enforce_velocity_leaves_small_velocities():
    body = Body(0, Vec2(), Vec2(0.25, -0.5))
    body.enforce_velocity()
    assert body.velocity == Vec2(0.25, -0.5)


def test_boundary_right_and_top_clamp_and_reflect():
    body = Body(0, Vec2(12.0, 15.0), Vec2(0.5, 0.75))
    body.enforce_boundaries(_settings())
    assert body.position == Vec2(10.0, 10.0)
    assert body.velocity == Vec2(-0.5, -0.75)


def test_boundary_left_and_bottom_clamp_and_reflect():
    body = Body(0, Vec2(-2.0, -3.0), Vec2(-0.5, -0.25))
    body.enforce_boundaries(_settings())
    assert body.position == Vec2(0.0, 0.0)
    assert body.velocity == Vec2(0.5, 0.25)


def test_boundary_respects_anchor():
    settings = WorldSettings(view_dimensions=Vec2(4.0, 4.0), view_anchor=Vec2(2.0, 2.0))
    body = Body(0, Vec2(1.0, 7.0), Vec2(-0.5, 0.5))
    body.enforce_boundaries(settings)
    assert body.position == Vec2(2.0, 6.0)
    assert body.velocity == Vec2(0.5, -0.5)


def test_inside_viewport_untouched():
    body = Body(0, Vec2(5.0, 5.0), Vec2(0.5, -0.5))
    body.enforce_limits(_settings())
    assert body.position == Vec2(5.0, 5.0)
    assert body.velocity == Vec2(0.5, -0.5)


def test_enforce_limits_applies_both():
    body = Body(0, Vec2(20.0, 5.0), Vec2(3.0, 0.0))
    body.enforce_limits(_settings())
    assert body.position == Vec2(10.0, 5.0)
    assert body.velocity == Vec2(-MAX_VELOCITY, 0.0)


def test_write_round_trip():
    positions = [Vec2(), Vec2(), Vec2()]
    velocities = [Vec2(), Vec2(), Vec2()]
    body = Body(2, Vec2(1.5, 2.5), Vec2(0.1, 0.2))
    body.write(positions, velocities)
    assert positions[2] == Vec2(1.5, 2.5)
    assert velocities[2] == Vec2(0.1, 0.2)
    assert positions[0] == Vec2()
    assert Body.load(2, positions, velocities) == body