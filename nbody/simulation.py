"""Direct-summation gravitational N-body simulation on a torus of bodies."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator

G = 6.673e-11

TORUS_MINOR_RADIUS = 1.0
TORUS_MAJOR_RADIUS = 2.0 * TORUS_MINOR_RADIUS


class BodyKind(IntEnum):
    """The kind of material a body represents."""

    STAR = 0
    DUST = 1
    H2 = 2


_MASS = {
    BodyKind.STAR: 0.001 * 8,
    BodyKind.DUST: 0.001 * 4,
    BodyKind.H2: 0.001,
}

_COLOUR = {
    BodyKind.STAR: (1.0, 1.0, 1.0),
    BodyKind.DUST: (1.0, 0.0, 0.0),
    BodyKind.H2: (1.0, 1.0, 1.0),
}


@dataclass
class Body:
    """A point mass with position, velocity and display colour."""

    mass: float
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    kind: BodyKind = BodyKind.STAR

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.px, self.py, self.pz)


class Simulation:
    """Holds a set of bodies and advances them with a fixed time step."""

    def __init__(self, bodies: Iterable[Body], dt: float) -> None:
        self.bodies = list(bodies)
        self.dt = dt
        self.forces = [[0.0, 0.0, 0.0] for _ in self.bodies]

    def compute_forces(self, start: int = 0, stop: int | None = None) -> None:
        """Accumulate pairwise forces for bodies in ``[start, stop)``.

        Every body in the range interacts with all bodies after it; the
        reaction is applied only to partners that also lie in the range.
        """
        bodies = self.bodies
        forces = self.forces
        n = len(bodies)
        if stop is None:
            stop = n
        for i in range(start, stop):
            a = bodies[i]
            fa = forces[i]
            for j in range(i + 1, n):
                b = bodies[j]
                if a.px == b.px and a.py == b.py and a.pz == b.pz:
                    continue
                dx = b.px - a.px
                dy = b.py - a.py
                dz = b.pz - a.pz
                dist_sq = dx * dx + dy * dy + dz * dz
                f = (G * a.mass * b.mass) / dist_sq
                dx *= f
                dy *= f
                dz *= f
                fa[0] += dx
                fa[1] += dy
                fa[2] += dz
                if start <= j < stop:
                    fb = forces[j]
                    fb[0] -= dx
                    fb[1] -= dy
                    fb[2] -= dz

    def move_bodies(self, start: int = 0, stop: int | None = None) -> None:
        """Integrate bodies in ``[start, stop)`` in the plane and clear their forces."""
        if stop is None:
            stop = len(self.bodies)
        dt = self.dt
        for body, force in zip(self.bodies[start:stop], self.forces[start:stop]):
            inv_mass = 1 / body.mass
            ax = force[0] * inv_mass
            ay = force[1] * inv_mass
            body.vx += ax * dt
            body.vy += ay * dt
            body.px += body.vx * dt
            body.py += body.vy * dt
            force[0] = force[1] = force[2] = 0.0

    def step(self) -> None:
        """Advance all bodies by one time step."""
        self.compute_forces(0, len(self.bodies))
        self.move_bodies(0, len(self.bodies))

    def run(self, steps: int) -> None:
        """Advance all bodies by ``steps`` time steps."""
        for _ in range(steps):
            self.step()

    def positions(self) -> list[tuple[float, float, float]]:
        """Current position of every body, in order."""
        return [body.position for body in self.bodies]


def torus_positions(n: int) -> Iterator[tuple[float, float, float]]:
    """Yield ``n`` points laid out around a torus, sqrt(n) per ring."""
    if n < 1:
        raise ValueError("number of bodies must be at least 1")
    increment = 2 * math.pi / math.sqrt(n)
    alpha = 0.0
    theta = 0.0
    for _ in range(n):
        if alpha + increment >= 2 * math.pi:
            alpha = 0.0
            theta += increment
        else:
            alpha += increment
        ring = TORUS_MAJOR_RADIUS + TORUS_MINOR_RADIUS * math.cos(alpha)
        yield (
            ring * math.cos(theta),
            ring * math.sin(theta),
            TORUS_MINOR_RADIUS * math.sin(alpha),
        )


def initialize_bodies(n: int, rng: random.Random | None = None) -> list[Body]:
    """Create ``n`` bodies of random kind on a torus, with two heavy bodies first."""
    if n < 2:
        raise ValueError("number of bodies must be at least 2")
    if rng is None:
        rng = random.Random()
    bodies = []
    for px, py, pz in torus_positions(n):
        kind = BodyKind(rng.randrange(3))
        r, g, b = _COLOUR[kind]
        bodies.append(
            Body(mass=_MASS[kind], px=px, py=py, pz=pz, r=r, g=g, b=b, kind=kind)
        )

    central = bodies[0]
    central.mass = 2.0e2
    central.px = central.py = central.pz = 0.0
    central.vx = -0.000001
    central.vy = -0.000001
    central.vz = 0.0

    companion = bodies[1]
    companion.mass = 1.0e1
    companion.px = -1.0
    companion.py = 0.0
    companion.pz = 0.0
    companion.vx = 0.0
    companion.vy = 0.0001
    companion.vz = 0.0
    return bodies