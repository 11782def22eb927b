# nbody

A small gravitational N-body simulation. Bodies start on the surface of a
torus, with one heavy central body at the origin and one companion at
`(-1, 0, 0)`. Each step computes pairwise gravitational forces by direct
summation and then moves every body in the x–y plane; the z coordinate and
z velocity are never changed. The work can be done in one thread or shared
among several threads, one contiguous slice of bodies per thread.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
nbody <bodies> <dt> <steps> [threads] [--seed SEED] [--positions]
```

* `bodies`: number of bodies, at least 2
* `dt`: length of one time step; only its whole part is used (`1.7` becomes `1`)
* `steps`: number of steps to simulate, not negative
* `threads`: optional, at least 1; when given, the work is shared among that
  many threads, otherwise the simulation runs in the calling thread
* `--seed`: seed for the random choice of each body's kind, so runs can be repeated
* `--positions`: after the timing line, print a table of every body's final position

The command prints the wall-clock time the simulation took:

```
$ nbody 1000 1 10
Tiempo en segundos: 2.317802
```

## Library use

```python
import random

from nbody.simulation import Simulation, initialize_bodies
from nbody.threaded import run_threaded

bodies = initialize_bodies(500, random.Random(42))
sim = Simulation(bodies, dt=1)
sim.run(10)
print(sim.positions()[:3])

# The same starting bodies spread across four threads
other = Simulation(initialize_bodies(500, random.Random(42)), dt=1)
run_threaded(other, steps=10, threads=4)
```

`nbody.simulation`:

* `BodyKind` names the three kinds of body: `STAR`, `DUST` and `H2`
  (molecular hydrogen), each with its own mass.
* `Body` is a dataclass holding a body's mass, position, velocity, colour
  and kind; `Body.position` gives `(px, py, pz)`.
* `torus_positions(n)` yields the `n` starting positions on the torus.
* `initialize_bodies(n, rng)` builds the starting bodies, choosing each kind
  with `rng` (a fresh `random.Random` when `None`).
* `Simulation(bodies, dt)` holds the bodies and their accumulated forces.
  `step()` advances one step, `run(steps)` advances many, and `positions()`
  returns every body's current position. `compute_forces(start, stop)` and
  `move_bodies(start, stop)` work on one slice of bodies.

`nbody.threaded`:

* `partition(n, threads)` gives each thread an equal `(start, stop)` slice of
  `n // threads` bodies. Bodies left over after the last full slice belong to
  no thread and are not moved.
* `run_threaded(simulation, steps, threads)` runs the steps with one worker
  per slice, the workers waiting for each other after computing forces and
  after moving. A worker applies the reaction of a pair only when both bodies
  lie in its own slice, so results differ from a sequential run whenever more
  than one thread is used.

`nbody.cli.main(argv)` is the command above; `build_parser()` returns its
argument parser.

## What it does not do

There is no display or animation of the bodies, no saving of a run to a file,
and no way to spread a run over several processes or machines; the threaded
mode uses Python threads within one process.