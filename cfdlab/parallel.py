"""Domain decomposition and halo buffers for process-parallel runs."""

from __future__ import annotations

import numpy as np

from .cell import NeighbourPosition
from .config import Config

PROC_NULL = -1
"""Rank given to a neighbour that does not exist."""


def _prime_factors(n: int) -> list[int]:
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def dims_create(nnodes: int, ndims: int) -> list[int]:
    """Split ``nnodes`` processes into ``ndims`` balanced, non-increasing dimensions."""
    if nnodes < 1:
        raise ValueError(f"number of processes must be positive, got {nnodes}")
    if ndims < 1:
        raise ValueError(f"number of dimensions must be positive, got {ndims}")
    dims = [1] * ndims
    for factor in sorted(_prime_factors(nnodes), reverse=True):
        smallest = min(range(ndims), key=dims.__getitem__)
        dims[smallest] *= factor
    return sorted(dims, reverse=True)


def _lower_bound(omg: int, cells: int, leftover: int) -> int:
    return (omg - 1) * cells + min(omg - 1, leftover) + 1


def _upper_bound(omg: int, cells: int, leftover: int) -> int:
    return omg * cells + (omg if leftover >= omg else leftover)


def init_parallel(config: Config) -> Config:
    """Assign this rank its subdomain and neighbour ranks, in place.

    If both ``iproc`` and ``jproc`` are 1 the process grid is chosen from
    ``num_proc``. Sets ``omg_i``, ``omg_j``, ``il``, ``ir``, ``jb``, ``jt``
    and the ``rank_*`` neighbours (``PROC_NULL`` where there is none).
    """
    if config.iproc == 1 and config.jproc == 1:
        config.iproc, config.jproc = dims_create(config.num_proc, 2)

    if config.rank == 0:
        print(
            f"Number of Processors: {config.num_proc}: "
            f"Grid Dimensions = [{config.iproc} x {config.jproc}] "
        )

    rows = config.jmax // config.jproc
    cols = config.imax // config.iproc

    config.omg_i = config.rank % config.iproc + 1
    config.omg_j = config.rank // config.iproc + 1

    leftover_i = config.imax % config.iproc
    leftover_j = config.jmax % config.jproc

    config.il = _lower_bound(config.omg_i, cols, leftover_i)
    config.ir = _upper_bound(config.omg_i, cols, leftover_i)
    config.jb = _lower_bound(config.omg_j, rows, leftover_j)
    config.jt = _upper_bound(config.omg_j, rows, leftover_j)

    if config.omg_i == config.iproc:
        config.ir = config.imax
    if config.omg_j == config.jproc:
        config.jt = config.jmax

    config.rank_l = config.rank - 1 if config.il > 1 else PROC_NULL
    config.rank_r = config.rank + 1 if config.ir < config.imax else PROC_NULL
    config.rank_b = config.rank - config.iproc if config.jb > 1 else PROC_NULL
    config.rank_t = config.rank + config.iproc if config.jt < config.jmax else PROC_NULL
    return config


def _inner_index(position: NeighbourPosition, width: int, height: int):
    """Index of the first interior line next to ``position``."""
    return {
        NeighbourPosition.LEFT: (1, slice(0, height)),
        NeighbourPosition.RIGHT: (width - 2, slice(0, height)),
        NeighbourPosition.TOP: (slice(0, width), height - 2),
        NeighbourPosition.BOTTOM: (slice(0, width), 1),
    }[position]


def _ghost_index(position: NeighbourPosition, width: int, height: int):
    """Index of the ghost line at ``position``."""
    return {
        NeighbourPosition.LEFT: (0, slice(0, height)),
        NeighbourPosition.RIGHT: (width - 1, slice(0, height)),
        NeighbourPosition.TOP: (slice(0, width), height - 1),
        NeighbourPosition.BOTTOM: (slice(0, width), 0),
    }[position]


def _line_length(position: NeighbourPosition, width: int, height: int) -> int:
    if position in (NeighbourPosition.LEFT, NeighbourPosition.RIGHT):
        return height
    return width


def get_from_matrix(
    m: np.ndarray, width: int, height: int, position: NeighbourPosition
) -> np.ndarray:
    """Copy of the interior line of ``m`` next to the boundary at ``position``."""
    return np.array(m[_inner_index(position, width, height)], dtype=float)


def store_in_matrix(
    m: np.ndarray, values, width: int, height: int, position: NeighbourPosition
) -> None:
    """Write ``values`` into the ghost line of ``m`` at ``position``."""
    values = np.asarray(values, dtype=float)
    expected = _line_length(position, width, height)
    if values.shape != (expected,):
        raise ValueError(f"expected {expected} values, got shape {values.shape}")
    m[_ghost_index(position, width, height)] = values


def get_vel_from_matrix(
    u: np.ndarray, v: np.ndarray, width: int, height: int, position: NeighbourPosition
) -> np.ndarray:
    """Interior line of ``u`` and ``v`` at ``position``, interleaved as u0, v0, u1, v1, ..."""
    index = _inner_index(position, width, height)
    return np.column_stack((u[index], v[index])).astype(float).ravel()


def store_vel_in_matrix(
    u: np.ndarray,
    v: np.ndarray,
    values,
    width: int,
    height: int,
    position: NeighbourPosition,
) -> None:
    """Write interleaved u, v ``values`` into the ghost lines at ``position``."""
    values = np.asarray(values, dtype=float)
    expected = 2 * _line_length(position, width, height)
    if values.shape != (expected,):
        raise ValueError(f"expected {expected} values, got shape {values.shape}")
    index = _ghost_index(position, width, height)
    u[index] = values[0::2]
    v[index] = values[1::2]