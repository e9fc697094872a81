"""Velocity and temperature boundary conditions."""

from __future__ import annotations

import numpy as np

from .cell import BoundaryType, Cell, CellType
from .config import Config
from .grid import Grid


def _no_slip(cell: Cell) -> None:
    top, bottom, left, right = cell.top, cell.bottom, cell.left, cell.right
    side = cell.boundary

    if side is BoundaryType.B_N:
        cell.velocity_v = 0.0
        cell.velocity_u = -top.velocity_u
    elif side is BoundaryType.B_S:
        bottom.velocity_v = 0.0
        cell.velocity_u = -bottom.velocity_u
    elif side is BoundaryType.B_E:
        cell.velocity_u = 0.0
        cell.velocity_v = -right.velocity_v
    elif side is BoundaryType.B_W:
        left.velocity_u = 0.0
        cell.velocity_v = -left.velocity_v
    elif side is BoundaryType.B_NE:
        cell.velocity_u = 0.0
        cell.velocity_v = 0.0
    elif side is BoundaryType.B_NW:
        left.velocity_u = 0.0
        cell.velocity_v = 0.0
        cell.velocity_u = -top.velocity_u
    elif side is BoundaryType.B_SE:
        cell.velocity_u = 0.0
        bottom.velocity_v = 0.0
        cell.velocity_v = -right.velocity_v
    elif side is BoundaryType.B_SW:
        left.velocity_u = 0.0
        bottom.velocity_v = 0.0
        u = -bottom.velocity_u
        v = -left.velocity_v
        cell.velocity_u = u
        cell.velocity_v = v


def _free_slip(cell: Cell) -> None:
    top, bottom, left, right = cell.top, cell.bottom, cell.left, cell.right
    side = cell.boundary

    if side is BoundaryType.B_N:
        cell.velocity_v = 0.0
        cell.velocity_u = top.velocity_u
        left.velocity_u = left.top.velocity_u
    elif side is BoundaryType.B_S:
        bottom.velocity_v = 0.0
        left.velocity_u = left.bottom.velocity_u
        cell.velocity_u = bottom.velocity_u
    elif side is BoundaryType.B_E:
        cell.velocity_u = 0.0
        cell.velocity_v = right.velocity_v
        bottom.velocity_v = right.bottom.velocity_v
    elif side is BoundaryType.B_W:
        left.velocity_u = 0.0
        bottom.velocity_v = left.bottom.velocity_v
        cell.velocity_v = left.velocity_v
    elif side is BoundaryType.B_NE:
        cell.velocity_u = 0.0
        cell.velocity_v = 0.0
        u = left.top.velocity_u
        v = right.bottom.velocity_v
        left.velocity_u = u
        bottom.velocity_v = v
    elif side is BoundaryType.B_NW:
        cell.velocity_v = 0.0
        left.velocity_u = 0.0
        u = top.velocity_u
        v = left.bottom.velocity_v
        cell.velocity_u = u
        bottom.velocity_v = v
    elif side is BoundaryType.B_SE:
        cell.velocity_u = 0.0
        bottom.velocity_v = 0.0
        u = left.bottom.velocity_u
        v = right.velocity_v
        left.velocity_u = u
        cell.velocity_v = v
    elif side is BoundaryType.B_SW:
        left.velocity_u = 0.0
        bottom.velocity_v = 0.0
        u = bottom.velocity_u
        v = left.velocity_v
        cell.velocity_u = u
        cell.velocity_v = v


def _outlet(cell: Cell) -> None:
    top, bottom, left, right = cell.top, cell.bottom, cell.left, cell.right
    if top is not None and top.is_fluid():
        cell.velocity_v = top.velocity_v
    if bottom is not None and bottom.is_fluid():
        cell.velocity_v = bottom.velocity_v
    if left is not None and left.is_fluid():
        cell.velocity_u = left.velocity_u
    elif right is not None and right.is_fluid():
        cell.velocity_u = right.velocity_u


def _apply(cell: Cell) -> None:
    kind = cell.type
    if kind is CellType.FLUID:
        return
    if kind is CellType.FREESLIP:
        _free_slip(cell)
    elif kind is CellType.NOSLIP:
        _no_slip(cell)
    elif kind is CellType.INLET:
        cell.velocity_u = 1.0
        cell.velocity_v = 0.0
    elif kind is CellType.OUTLET:
        _outlet(cell)
    elif kind is CellType.LID:
        if cell.bottom is not None:
            cell.velocity_v = 0.0
            cell.velocity_u = 2.0 - cell.bottom.velocity_u


def apply_velocity_boundaries(grid: Grid, config: Config) -> None:
    """Set u and v on every non-fluid cell of ``grid`` in place."""
    for j in range(config.jmax + 2):
        for i in range(config.imax + 2):
            _apply(grid.cell(i, j))


def apply_temperature_boundaries(grid: Grid, config: Config, temperature: np.ndarray) -> None:
    """Set the temperature on walls in place.

    Obstacle walls are adiabatic; the heated and cooled walls of the
    convection scenarios get Dirichlet values on the outer domain edges.
    """
    T = temperature
    for i in range(config.imax + 2):
        for j in range(config.jmax + 2):
            side = grid.cell(i, j).boundary
            if side is BoundaryType.B_E:
                T[i, j] = T[i + 1, j]
            elif side is BoundaryType.B_W:
                T[i, j] = T[i - 1, j]
            elif side is BoundaryType.B_N:
                T[i, j] = T[i, j + 1]
            elif side is BoundaryType.B_S:
                T[i, j] = T[i, j - 1]
            elif side is BoundaryType.B_NE:
                T[i, j] = (T[i, j + 1] + T[i + 1, j]) / 2
            elif side is BoundaryType.B_NW:
                T[i, j] = (T[i, j + 1] + T[i - 1, j]) / 2
            elif side is BoundaryType.B_SE:
                T[i, j] = (T[i, j - 1] + T[i + 1, j]) / 2
            elif side is BoundaryType.B_SW:
                T[i, j] = (T[i, j - 1] + T[i - 1, j]) / 2

    imax, jmax = config.imax, config.jmax
    problem = config.problem

    if problem in ("NaturalConvection", "FluidTrap", "FluidTrapReversed"):
        left, right = (
            (config.T_c, config.T_h) if problem == "FluidTrapReversed" else (config.T_h, config.T_c)
        )
        if config.omg_i == 1:
            T[0, : jmax + 2] = 2 * left - T[1, : jmax + 2]
        if config.omg_i == config.iproc:
            T[imax + 1, : jmax + 2] = 2 * right - T[imax, : jmax + 2]

    if problem == "RayleighBenardConvection":
        if config.omg_j == 1:
            T[: imax + 2, 0] = 2 * config.T_h - T[: imax + 2, 1]
        if config.omg_j == config.jproc:
            T[: imax + 2, jmax + 1] = 2 * config.T_c - T[: imax + 2, jmax]