[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cfdlab"
version = "0.1.0"
description = "Building blocks for a 2D incompressible flow solver on staggered grids: geometry, boundaries, multigrid operators and domain decomposition"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["cfd", "navier-stokes", "multigrid", "staggered-grid", "pgm", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cfdlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
