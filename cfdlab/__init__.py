"""Grid, boundary, multigrid, decomposition and file components for a 2D staggered-grid flow solver."""

__version__ = "0.1.0"