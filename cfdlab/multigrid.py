"""Grid hierarchy and transfer operators of the multigrid pressure solver."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .cell import CellType
from .config import Config


@dataclass
class Level:
    """One level of the multigrid hierarchy; sizes include ghost cells."""

    level: int
    imax: int
    jmax: int
    dx: float
    dy: float
    types: np.ndarray
    x: np.ndarray
    b: np.ndarray
    e: np.ndarray
    res: np.ndarray


def slice_types(types, nth: int, imax: int, jmax: int) -> np.ndarray:
    """Every ``nth`` cell type of ``types`` in an ``imax`` x ``jmax`` array.

    Cells not covered by the sample stay fluid.
    """
    org = np.asarray(types, dtype=int)
    sampled = org[::nth, ::nth]
    if sampled.shape[0] > imax or sampled.shape[1] > jmax:
        raise ValueError(
            f"sampled types of shape {sampled.shape} do not fit into ({imax}, {jmax})"
        )
    sliced = np.full((imax, jmax), int(CellType.FLUID), dtype=int)
    sliced[: sampled.shape[0], : sampled.shape[1]] = sampled
    return sliced


def build_levels(config: Config, p: np.ndarray, rhs: np.ndarray, types) -> list[Level]:
    """Create ``config.levels`` levels, the finest sharing ``p`` and ``rhs``."""
    types = np.asarray(types, dtype=int)
    imax, jmax = p.shape
    dx, dy = config.dx, config.dy
    levels: list[Level] = []

    for depth in range(config.levels):
        if depth == 0:
            level_types, x, b = types, p, rhs
        else:
            level_types = slice_types(types, 2**depth, imax, jmax)
            x = np.zeros((imax, jmax))
            b = np.zeros((imax, jmax))
        levels.append(
            Level(
                level=depth,
                imax=imax,
                jmax=jmax,
                dx=dx,
                dy=dy,
                types=level_types,
                x=x,
                b=b,
                e=np.zeros((imax, jmax)),
                res=np.zeros((imax, jmax)),
            )
        )
        if depth < config.levels - 1:
            imax = (imax - 1) // 2 + 1
            jmax = (jmax - 1) // 2 + 1
            dx = 1.0 / (imax - 1.0)
            dy = 1.0 / (jmax - 1.0)

    return levels


def coarse_system_matrix(types, imax: int, jmax: int, dx: float, dy: float) -> np.ndarray:
    """Negative five-point Laplacian for the ``imax`` x ``jmax`` interior unknowns.

    ``types`` covers the level including ghost cells. Walls are Neumann
    boundaries; an outlet ghost cell keeps the full diagonal weight.
    Unknown ``(i, j)`` has index ``j * imax + i``.
    """
    types = np.asarray(types, dtype=int)
    outlet = int(CellType.OUTLET)
    hxx = 1.0 / (dx * dx)
    hyy = 1.0 / (dy * dy)
    size = imax * jmax
    A = np.zeros((size, size))

    for i in range(imax):
        for j in range(jmax):
            nx = ny = 2
            node = j * imax + i
            if j != 0:
                A[node, node - imax] = -hyy
            elif types[i + 1, j] != outlet:
                ny -= 1
            if j != jmax - 1:
                A[node, node + imax] = -hyy
            elif types[i + 1, j + 2] != outlet:
                ny -= 1
            if i != 0:
                A[node, node - 1] = -hxx
            elif types[i, j + 1] != outlet:
                nx -= 1
            if i != imax - 1:
                A[node, node + 1] = -hxx
            elif types[i + 2, j + 1] != outlet:
                nx -= 1
            A[node, node] = nx * hxx + ny * hyy

    return A


def restriction_fullweight(fine: np.ndarray, coarse: np.ndarray) -> np.ndarray:
    """Restrict ``fine`` onto ``coarse`` in place and return ``coarse``.

    Edges are injected. Interior points take a quarter of the matching
    fine value; the neighbour weights of this stencil are zero.
    """
    rows, cols = fine.shape
    imax = (cols - 1) // 2
    jmax = (rows - 1) // 2

    if imax > 1 and jmax > 1:
        coarse[1:imax, 1:jmax] = 0.25 * fine[2 : 2 * imax : 2, 2 : 2 * jmax : 2]

    coarse[0, : jmax + 1] = fine[0, 0 : 2 * jmax + 1 : 2]
    coarse[imax, : jmax + 1] = fine[rows - 1, 0 : 2 * jmax + 1 : 2]
    coarse[: imax + 1, 0] = fine[0 : 2 * imax + 1 : 2, 0]
    coarse[: imax + 1, jmax] = fine[0 : 2 * imax + 1 : 2, rows - 1]
    return coarse


def prolongate(fine: np.ndarray, coarse: np.ndarray) -> np.ndarray:
    """Bilinearly interpolate ``coarse`` onto ``fine`` in place and return ``fine``."""
    ic = coarse.shape[0] - 1
    jc = coarse.shape[1] - 1
    if_ = fine.shape[0] - 1
    jf = fine.shape[1] - 1

    c00 = coarse[:ic, :jc]
    c10 = coarse[1 : ic + 1, :jc]
    c01 = coarse[:ic, 1 : jc + 1]
    c11 = coarse[1 : ic + 1, 1 : jc + 1]
    fine[0 : 2 * ic : 2, 0 : 2 * jc : 2] = c00
    fine[1 : 2 * ic : 2, 0 : 2 * jc : 2] = 0.5 * (c00 + c10)
    fine[0 : 2 * ic : 2, 1 : 2 * jc : 2] = 0.5 * (c00 + c01)
    fine[1 : 2 * ic : 2, 1 : 2 * jc : 2] = 0.25 * (c00 + c10 + c01 + c11)

    right = coarse[ic, :]
    fine[if_, 0 : 2 * jc : 2] = right[:jc]
    fine[if_, 1 : 2 * jc : 2] = 0.5 * (right[:jc] + right[1:])

    top = coarse[:, jc]
    fine[0 : 2 * ic : 2, jf] = top[:ic]
    fine[1 : 2 * ic : 2, jf] = 0.5 * (top[:ic] + top[1:])

    fine[if_, jf] = coarse[ic, jc]
    return fine


def gauss_seidel(p: np.ndarray, rhs: np.ndarray, types, dx: float, dy: float) -> np.ndarray:
    """One lexicographic Gauss-Seidel sweep over fluid cells of ``p``, in place."""
    types = np.asarray(types, dtype=int)
    ix = 1.0 / (dx * dx)
    iy = 1.0 / (dy * dy)
    coeff = 1.0 / (2.0 * (ix + iy))
    fluid = types[1:-1, 1:-1] == int(CellType.FLUID)
    for i, j in np.argwhere(fluid) + 1:
        p[i, j] = coeff * (
            (p[i + 1, j] + p[i - 1, j]) * ix + (p[i, j + 1] + p[i, j - 1]) * iy - rhs[i, j]
        )
    return p