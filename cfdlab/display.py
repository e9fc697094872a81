"""Text renderings of fields, cell types and configurations."""

from __future__ import annotations

import os
from dataclasses import fields
from typing import Any, Union

import numpy as np

from .config import Config
from .grid import Grid

PathLike = Union[str, "os.PathLike[str]"]

_CONFIG_FIELDS = (
    "rank", "xlength", "ylength", "Re", "itermax", "imax", "jmax", "l_imax",
    "l_jmax", "calcTemp", "iproc", "jproc", "levels", "n_fluid",
    "boundary_size", "num_proc", "rank_l", "rank_r", "rank_t", "rank_b",
    "il", "ir", "jb", "jt", "omg_i", "omg_j", "t_end", "dt", "omg", "eps",
    "tau", "alpha", "dt_value", "UI", "VI", "GX", "GY", "PI", "PR", "TI",
    "T_h", "T_c", "beta", "dx", "dy",
)

_SEPARATOR = "----------------------"


def _stream_value(value: Any) -> str:
    """A value as a default-formatted output stream would write it."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(value)


def format_matrix(m: Any, imax: int, jmax: int) -> str:
    """Render ``m[0..imax+1, 0..jmax+1]`` with the top row first.

    Floating-point values are written as ``%f`` followed by a space;
    integer values are written as ``%d`` with no separator.
    """
    array = np.asarray(m)
    if array.ndim != 2 or array.shape[0] < imax + 2 or array.shape[1] < jmax + 2:
        raise ValueError(
            f"matrix of shape {array.shape} does not cover ({imax + 2}, {jmax + 2})"
        )
    block = array[: imax + 2, : jmax + 2]
    if np.issubdtype(block.dtype, np.integer):
        render = lambda value: f"{int(value)}"  # noqa: E731
    else:
        render = lambda value: f"{float(value):f} "  # noqa: E731
    return "".join(
        "".join(render(value) for value in row) + "\n" for row in block.T[::-1]
    )


def format_domain_matrix(m: Any) -> str:
    """Render the whole of ``m`` as ``%f`` values, top row first."""
    array = np.asarray(m, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got shape {array.shape}")
    return "".join(
        "".join(f"{value:f} " for value in row) + "\n" for row in array.T[::-1]
    )


def format_grid_types(grid: Grid, imax: int, jmax: int) -> str:
    """Render the cell type numbers of ``grid``, top row first."""
    return "".join(
        "".join(f"{int(grid.cell(i, j).type)} " for i in range(imax + 2)) + "\n"
        for j in range(jmax + 1, -1, -1)
    )


def write_matrix_to_file(fname: PathLike, m: Any) -> None:
    """Write ``m`` as comma-separated text, one line per column index ``j``."""
    array = np.asarray(m, dtype=float)
    if array.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got shape {array.shape}")
    with open(fname, "w", encoding="utf-8") as handle:
        for column in array.T:
            handle.write(",".join(_stream_value(value) for value in column) + "\n")


def format_config(config: Config) -> str:
    """All simulation parameters as ``name: value`` lines between separators."""
    known = {field.name for field in fields(config)}
    lines = [_SEPARATOR]
    lines.extend(
        f"{name}: {_stream_value(getattr(config, name))}"
        for name in _CONFIG_FIELDS
        if name in known
    )
    lines.append(_SEPARATOR)
    return "\n".join(lines) + "\n"