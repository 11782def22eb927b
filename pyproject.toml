[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nbody"
version = "0.1.0"
description = "Direct-summation gravitational N-body simulation on a torus of bodies, sequential or threaded"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "gravitation", "simulation", "physics", "threads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nbody = "nbody.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nbody"]

[tool.pytest.ini_options]
addopts = "-ra"
