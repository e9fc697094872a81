"""Cell types and a cell view onto the shared field arrays."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Optional


class CellType(IntEnum):
    """Kinds of cell, numbered as in geometry files."""

    FLUID = 1
    NOSLIP = 2
    INLET = 3
    OUTLET = 4
    FREESLIP = 5
    LID = 6


class BoundaryType(Enum):
    """Side(s) of an obstacle cell that face fluid."""

    UNSET = "unset"
    B_N = "N"
    B_S = "S"
    B_E = "E"
    B_W = "W"
    B_NE = "NE"
    B_NW = "NW"
    B_SE = "SE"
    B_SW = "SW"


class NeighbourPosition(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class BorderPosition(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


def lookup_cell_type(value: int) -> CellType:
    """Map a geometry file value to its :class:`CellType`."""
    try:
        return CellType(int(value))
    except ValueError as exc:
        raise ValueError(f"unknown cell type value {value!r}") from exc


def _is_fluid(cell: Optional["Cell"]) -> bool:
    return cell is not None and cell.is_fluid()


def _is_open(cell: Optional["Cell"]) -> bool:
    return cell is not None and cell.type in (CellType.FLUID, CellType.INLET, CellType.OUTLET)


class Cell:
    """One grid cell; its values live in the arrays of ``fields``.

    ``fields`` must provide the arrays ``u``, ``v``, ``p``, ``t`` and
    ``types``, each indexed ``[i, j]``.
    """

    def __init__(self, fields: Any, i: int, j: int) -> None:
        self._fields = fields
        self.i = i
        self.j = j
        self.top: Optional[Cell] = None
        self.bottom: Optional[Cell] = None
        self.left: Optional[Cell] = None
        self.right: Optional[Cell] = None
        self.boundary = BoundaryType.UNSET
        self._borders = {position: False for position in BorderPosition}

    def __repr__(self) -> str:
        return f"Cell(i={self.i}, j={self.j}, type={self.type.name})"

    @property
    def pressure(self) -> float:
        return float(self._fields.p[self.i, self.j])

    @pressure.setter
    def pressure(self, value: float) -> None:
        self._fields.p[self.i, self.j] = value

    @property
    def temperature(self) -> float:
        return float(self._fields.t[self.i, self.j])

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._fields.t[self.i, self.j] = value

    @property
    def velocity_u(self) -> float:
        return float(self._fields.u[self.i, self.j])

    @velocity_u.setter
    def velocity_u(self, value: float) -> None:
        self._fields.u[self.i, self.j] = value

    @property
    def velocity_v(self) -> float:
        return float(self._fields.v[self.i, self.j])

    @velocity_v.setter
    def velocity_v(self, value: float) -> None:
        self._fields.v[self.i, self.j] = value

    @property
    def type(self) -> CellType:
        return CellType(int(self._fields.types[self.i, self.j]))

    @type.setter
    def type(self, value: CellType) -> None:
        self._fields.types[self.i, self.j] = int(value)

    def is_type(self, cell_type: CellType) -> bool:
        return self.type == cell_type

    def is_fluid(self) -> bool:
        return self.type == CellType.FLUID

    def border(self, position: BorderPosition) -> bool:
        return self._borders[position]

    def set_border(self, position: BorderPosition) -> None:
        self._borders[position] = True

    def neighbour(self, position: NeighbourPosition) -> Optional["Cell"]:
        return {
            NeighbourPosition.TOP: self.top,
            NeighbourPosition.BOTTOM: self.bottom,
            NeighbourPosition.LEFT: self.left,
            NeighbourPosition.RIGHT: self.right,
        }[position]

    def set_neighbours(
        self,
        top: Optional["Cell"],
        bottom: Optional["Cell"],
        left: Optional["Cell"],
        right: Optional["Cell"],
    ) -> None:
        """Link the neighbours and classify a no-slip cell's boundary side.

        Raises ValueError for an obstacle cell with more than two fluid
        neighbours.
        """
        self.top, self.bottom, self.left, self.right = top, bottom, left, right
        if self.type != CellType.NOSLIP:
            return

        t, b, l, r = (_is_fluid(cell) for cell in (top, bottom, left, right))
        if t + b + l + r > 2:
            raise ValueError("Obstacle cell has more than 2 fluid neighbours!")

        rules = (
            (_is_open(top) and not l and not r and not b, BoundaryType.B_N),
            (not t and not l and r and not b, BoundaryType.B_E),
            (not t and l and not r and not b, BoundaryType.B_W),
            (not t and not l and not r and _is_open(bottom), BoundaryType.B_S),
            (t and not l and r and not b, BoundaryType.B_NE),
            (t and l and not r and not b, BoundaryType.B_NW),
            (not t and not l and r and b, BoundaryType.B_SE),
            (not t and l and not r and b, BoundaryType.B_SW),
        )
        for matches, boundary in rules:
            if matches:
                self.boundary = boundary