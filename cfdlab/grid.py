"""The simulation grid: field arrays and the cells that view them."""

from __future__ import annotations

from typing import Any

import numpy as np

from .cell import Cell, CellType, lookup_cell_type
from .config import Config


class Grid:
    """Cells of a domain with ``boundary_size`` ghost layers on each side.

    The field arrays ``u``, ``v``, ``p``, ``t`` and ``types`` are indexed
    ``[i, j]`` and shared with the cells.
    """

    def __init__(self, config: Config, geometry: Any) -> None:
        self.boundary_size = config.boundary_size
        self.imax = config.imax
        self.jmax = config.jmax
        self.imaxb = config.imax + 2 * config.boundary_size
        self.jmaxb = config.jmax + 2 * config.boundary_size
        shape = (self.imaxb, self.jmaxb)

        geo = np.asarray(geometry, dtype=int)
        if geo.shape != shape:
            raise ValueError(f"geometry has shape {geo.shape}, expected {shape}")

        self.types = np.vectorize(lambda value: int(lookup_cell_type(value)), otypes=[int])(geo)
        fluid = self.types == int(CellType.FLUID)
        self.u = np.where(fluid, float(config.UI), 0.0)
        self.v = np.where(fluid, float(config.VI), 0.0)
        self.p = np.where(fluid, float(config.PI), 0.0)
        self.t = np.where(fluid, float(config.TI), 0.0)

        self._cells = [[Cell(self, i, j) for j in range(self.jmaxb)] for i in range(self.imaxb)]
        for column in self._cells:
            for c in column:
                i, j = c.i, c.j
                c.set_neighbours(
                    self._cells[i][j + 1] if j < self.jmaxb - 1 else None,
                    self._cells[i][j - 1] if j > 0 else None,
                    self._cells[i - 1][j] if i > 0 else None,
                    self._cells[i + 1][j] if i < self.imaxb - 1 else None,
                )

    def cell(self, i: int, j: int) -> Cell:
        return self._cells[i][j]

    def max_u(self) -> float:
        """Largest u velocity, never below zero."""
        return max(0.0, float(self.u.max()))

    def max_v(self) -> float:
        """Largest v velocity, never below zero."""
        return max(0.0, float(self.v.max()))

    def set_temperature(self, values: Any) -> None:
        self.t[...] = np.asarray(values, dtype=float)

    def format_pressure(self) -> str:
        """Pressure field as text, top row first."""
        return _format_field(self.p)

    def format_temperature(self) -> str:
        """Temperature field as text, top row first."""
        return _format_field(self.t)


def _format_field(field: np.ndarray) -> str:
    return "".join(
        "".join(f"{value:g} " for value in row) + "\n" for row in field.T[::-1]
    )