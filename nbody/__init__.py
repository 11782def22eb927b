"""Gravitational N-body simulation on a torus of bodies, run sequentially or across threads."""

__version__ = "0.1.0"
__all__ = ["simulation", "threaded", "cli"]