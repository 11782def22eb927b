import math
import random

import pytest

from nbody.simulation import (
    Body,
    BodyKind,
    Simulation,
    initialize_bodies,
    torus_positions,
)


def _momentum(sim):
    px = sum(b.mass * b.vx for b in sim.bodies)
    py = sum(b.mass * b.vy for b in sim.bodies)
    return px, py


def test_torus_points_lie_on_torus():
    for x, y, z in torus_positions(25):
        ring = math.hypot(x, y) - 2.0
        assert ring * ring + z * z == pytest.approx(1.0)


def test_torus_positions_count():
    assert len(list(torus_positions(17))) == 17


def test_torus_positions_four_points():
    points = list(torus_positions(4))
    assert points[0] == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
    assert points[1] == pytest.approx((-3.0, 0.0, 0.0), abs=1e-12)


def test_torus_positions_rejects_zero():
    with pytest.raises(ValueError):
        list(torus_positions(0))


def test_initialize_bodies_fixed_bodies():
    bodies = initialize_bodies(10, random.Random(1))
    assert len(bodies) == 10
    assert bodies[0].mass == 2.0e2
    assert bodies[0].position == (0.0, 0.0, 0.0)
    assert (bodies[0].vx, bodies[0].vy) == (-0.000001, -0.000001)
    assert bodies[1].mass == 1.0e1
    assert bodies[1].position == (-1.0, 0.0, 0.0)
    assert bodies[1].vy == 0.0001


def test_initialize_bodies_kind_determines_mass_and_colour():
    masses = {BodyKind.STAR: 0.008, BodyKind.DUST: 0.004, BodyKind.H2: 0.001}
    for body in initialize_bodies(50, random.Random(7))[2:]:
        assert body.mass == pytest.approx(masses[body.kind])
        if body.kind is BodyKind.DUST:
            assert (body.r, body.g, body.b) == (1.0, 0.0, 0.0)
        else:
            assert (body.r, body.g, body.b) == (1.0, 1.0, 1.0)
        assert (body.vx, body.vy, body.vz) == (0.0, 0.0, 0.0)


def test_initialize_bodies_is_deterministic_with_seed():
    a = initialize_bodies(20, random.Random(3))
    b = initialize_bodies(20, random.Random(3))
    assert a == b


def test_initialize_bodies_rejects_too_few():
    with pytest.raises(ValueError):
        initialize_bodies(1, random.Random(0))


def test_forces_are_equal_and_opposite():
    sim = Simulation([Body(mass=3.0), Body(mass=5.0, px=2.0, py=1.0, pz=-1.0)], 1)
    sim.compute_forces(0, 2)
    f0, f1 = sim.forces
    assert f0[0] > 0
    for a, b in zip(f0, f1):
        assert a == pytest.approx(-b)


def test_coincident_bodies_exert_no_force():
    sim = Simulation([Body(mass=1.0, px=1.0), Body(mass=2.0, px=1.0)], 1)
    sim.step()
    assert [(b.vx, b.vy) for b in sim.bodies] == [(0.0, 0.0), (0.0, 0.0)]


def test_partial_range_only_updates_partners_inside():
    bodies = [Body(mass=1.0), Body(mass=1.0, px=1.0), Body(mass=1.0, py=1.0)]
    sim = Simulation(bodies, 1)
    sim.compute_forces(0, 1)
    assert sim.forces[1] == [0.0, 0.0, 0.0]
    assert sim.forces[2] == [0.0, 0.0, 0.0]
    assert sim.forces[0][0] > 0 and sim.forces[0][1] > 0


def test_step_conserves_planar_momentum():
    sim = Simulation(initialize_bodies(16, random.Random(5)), 1)
    before = _momentum(sim)
    sim.run(3)
    after = _momentum(sim)
    assert after[0] == pytest.approx(before[0], abs=1e-12)
    assert after[1] == pytest.approx(before[1], abs=1e-12)


def test_z_coordinate_is_not_integrated():
    sim = Simulation(initialize_bodies(9, random.Random(2)), 1)
    zs = [p[2] for p in sim.positions()]
    sim.run(4)
    assert [p[2] for p in sim.positions()] == zs


def test_move_bodies_uses_velocity_and_clears_forces():
    body = Body(mass=1.0, px=1.0, vx=0.5)
    sim = Simulation([body], 2)
    sim.move_bodies(0, 1)
    assert body.px == pytest.approx(2.0)
    assert sim.forces == [[0.0, 0.0, 0.0]]


def test_step_clears_forces():
    sim = Simulation([Body(mass=1.0), Body(mass=1.0, px=1.0)], 1)
    sim.step()
    assert sim.forces == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]
    assert sim.bodies[0].vx > 0 > sim.bodies[1].vx


def test_run_zero_steps_leaves_positions():
    bodies = initialize_bodies(8, random.Random(4))
    sim = Simulation(bodies, 1)
    start = sim.positions()
    sim.run(0)
    assert sim.positions() == start


def test_bodies_attract_each_other():
    sim = Simulation([Body(mass=1e6), Body(mass=1e6, px=1.0)], 1)
    sim.run(2)
    (x0, _, _), (x1, _, _) = sim.positions()
    assert x1 - x0 < 1.0