"""Run a simulation with worker threads that each own a slice of the bodies."""

from __future__ import annotations

import threading

from nbody.simulation import Simulation


def partition(n: int, threads: int) -> list[tuple[int, int]]:
    """Split ``n`` bodies into ``threads`` equal ``(start, stop)`` slices.

    Each slice holds ``n // threads`` bodies. Bodies left over after the
    last full slice belong to no slice and are never advanced.
    """
    if threads < 1:
        raise ValueError("number of threads must be at least 1")
    if n < 0:
        raise ValueError("number of bodies must not be negative")
    size = n // threads
    return [(worker * size, worker * size + size) for worker in range(threads)]


def run_threaded(simulation: Simulation, steps: int, threads: int) -> None:
    """Advance ``simulation`` by ``steps`` steps using ``threads`` workers.

    Each worker accumulates forces for its own slice, waits for the others,
    moves its slice and waits again before the next step. A pair whose
    partner lies outside the worker's slice acts only on the worker's body.
    """
    slices = partition(len(simulation.bodies), threads)
    if steps < 0:
        raise ValueError("number of steps must not be negative")
    barrier = threading.Barrier(threads)
    errors: list[BaseException] = []
    errors_lock = threading.Lock()

    def worker(start: int, stop: int) -> None:
        try:
            for _ in range(steps):
                simulation.compute_forces(start, stop)
                barrier.wait()
                simulation.move_bodies(start, stop)
                barrier.wait()
        except threading.BrokenBarrierError:
            pass
        except BaseException as exc:  # noqa: BLE001 - re-raised in caller
            with errors_lock:
                errors.append(exc)
            barrier.abort()

    workers = [
        threading.Thread(target=worker, args=bounds, name=f"nbody-worker-{index}")
        for index, bounds in enumerate(slices)
    ]
    for thread in workers:
        thread.start()
    for thread in workers:
        thread.join()
    if errors:
        raise errors[0]