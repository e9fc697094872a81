"""Reading parameter data files, binary matrix dumps and PGM geometries."""

from __future__ import annotations

import os
import re
from typing import Union

import numpy as np

from .cell import CellType
from .config import Config

PathLike = Union[str, "os.PathLike[str]"]

_C_SPACE = " \t\n\r\v\f"
_NAME = re.compile(r"[A-Za-z0-9_]*")
_INT = re.compile(r"[ \t\n\r\v\f]*([+-]?\d+)")
_DOUBLE = re.compile(
    r"[ \t\n\r\v\f]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class DataFileError(Exception):
    """Raised when a data, matrix or geometry file cannot be read or written."""


def _read_error(message: str, name: str, filename: PathLike, lineno: int) -> DataFileError:
    text = f"{message}  File: {os.fspath(filename)}   Variable: {name}"
    if lineno:
        text += f"  Line: {lineno}"
    return DataFileError(text)


def _report(filename: PathLike, name: str, value_text: str) -> None:
    pad = " " * (15 - min(len(name), 15))
    print(f"File: {os.fspath(filename)}\t\t{name}{pad}= {value_text}")


def find_string(filename: PathLike, name: str) -> str:
    """Return the value text of the line that defines ``name``.

    Everything after ``#`` is a comment. Each non-empty line must hold a
    name followed by a value; a malformed line or a missing name raises
    :class:`DataFileError`.
    """
    try:
        with open(filename, encoding="latin-1", newline="") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise _read_error("Could not open file", name, filename, 0) from exc

    lineno = 0
    for lineno, raw in enumerate(lines, 1):
        line = raw.split("#", 1)[0].lstrip(_C_SPACE)
        if not line:
            continue
        key = _NAME.match(line).group()
        rest = line[len(key):]
        if not rest or rest[0] == "\n":
            raise _read_error("wrong format", key, filename, lineno)
        rest = rest[1:]
        if key != name:
            continue
        value = rest.lstrip(_C_SPACE)
        if not value:
            raise _read_error("wrong format", key, filename, lineno)
        return value.rstrip("\r\n")

    raise _read_error("variable not found", name, filename, lineno)


def _lookup(filename: PathLike, name: str) -> str:
    if not name:
        raise DataFileError("empty variable name given")
    return find_string(filename, name[1:] if name.startswith("*") else name)


def read_string(filename: PathLike, name: str) -> str:
    """First whitespace-separated word of the value of ``name``.

    A leading ``*`` in ``name`` is not part of the looked-up name.
    """
    words = _lookup(filename, name).split()
    if not words:
        raise _read_error("wrong format", name, filename, 0)
    value = words[0]
    _report(filename, name, value)
    return value


def read_int(filename: PathLike, name: str) -> int:
    """Integer value of ``name``, read from the start of its value text."""
    match = _INT.match(_lookup(filename, name))
    if match is None:
        raise _read_error("wrong format", name, filename, 0)
    value = int(match.group(1))
    _report(filename, name, str(value))
    return value


def read_double(filename: PathLike, name: str) -> float:
    """Floating-point value of ``name``, read from the start of its value text."""
    match = _DOUBLE.match(_lookup(filename, name))
    if match is None:
        raise _read_error("wrong format", name, filename, 0)
    value = float(match.group(1))
    _report(filename, name, f"{value:f}")
    return value


def write_matrix(
    filename: PathLike,
    m,
    nrl: int,
    nrh: int,
    ncl: int,
    nch: int,
    xlength: float,
    ylength: float,
    first: bool,
) -> None:
    """Write ``m[nrl..nrh, ncl..nch]`` as native 32-bit floats, column index outermost.

    ``first`` overwrites the file; otherwise the values are appended.
    ``xlength`` and ``ylength`` describe the geometry and are not stored.
    """
    block = np.asarray(m, dtype=float)[nrl : nrh + 1, ncl : nch + 1]
    expected = (nrh - nrl + 1, nch - ncl + 1)
    if block.shape != expected:
        raise DataFileError(
            f"matrix of shape {np.shape(m)} does not cover rows {nrl}..{nrh}, columns {ncl}..{nch}"
        )
    data = block.T.astype(np.float32).tobytes()
    mode = "wb" if first else "ab"
    try:
        with open(filename, mode) as handle:
            handle.write(data)
    except OSError as exc:
        action = "created" if first else "opened"
        raise DataFileError(f"Outputfile {os.fspath(filename)} cannot be {action}") from exc


def read_matrix(filename: PathLike, nrl: int, nrh: int, ncl: int, nch: int) -> np.ndarray:
    """Read a block written by :func:`write_matrix`.

    Returns an array of shape ``(nrh - nrl + 1, nch - ncl + 1)`` whose
    ``[0, 0]`` entry is the matrix element ``(nrl, ncl)``.
    """
    rows = nrh - nrl + 1
    cols = nch - ncl + 1
    if rows <= 0 or cols <= 0:
        raise DataFileError(f"empty index range rows {nrl}..{nrh}, columns {ncl}..{nch}")
    size = rows * cols
    try:
        with open(filename, "rb") as handle:
            data = handle.read(size * 4)
    except OSError as exc:
        raise DataFileError(f"Can not read file {os.fspath(filename)} !!!") from exc
    if len(data) < size * 4:
        raise DataFileError(
            f"file {os.fspath(filename)} holds fewer than {size} values"
        )
    values = np.frombuffer(data, dtype=np.float32).astype(float)
    return values.reshape(cols, rows).T.copy()


def read_pgm(config: Config) -> np.ndarray:
    """Read the ASCII PGM geometry ``config.geometry`` for this subdomain.

    Returns the cell values of the local domain with ghost layers, shape
    ``(l_imax + 2, l_jmax + 2)``, sampled from the image scaled to
    ``imax`` x ``jmax`` interior cells. Sets ``config.total_n_fluid`` and
    ``config.n_fluid``.
    """
    path = config.geometry
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise DataFileError(f"Can not read file {path} !!!") from exc

    lines = text.splitlines(keepends=True)
    if not lines:
        raise DataFileError("cannot read PGM.")
    if not lines[0].startswith("P2"):
        raise DataFileError(
            "file is not a valid PGM file. If file is a valid PGM file, "
            "first two characters of the first line must read P2"
        )

    index = 1
    while True:
        if index >= len(lines):
            raise DataFileError("cannot read PGM.")
        line = lines[index]
        index += 1
        if not line.startswith("#"):
            break
        print(f"Skipping comment line: {line}", end="")

    size = _INT.match(line)
    second = _INT.match(line, size.end()) if size else None
    if size is None or second is None:
        raise DataFileError("cannot read PGM size.")
    geo_x, geo_y = int(size.group(1)), int(second.group(1))
    print(f"Image size: {geo_x} x {geo_y}")

    tokens = "".join(lines[index:]).split()
    if not tokens:
        raise DataFileError("read of geometry file failed!")
    values = iter(tokens[1:])  # the first token is the number of grey levels

    pic = np.zeros((geo_x, geo_y), dtype=int)
    print("Image initialised...")
    for j in range(geo_y - 1, -1, -1):
        for i in range(geo_x):
            token = next(values, None)
            if token is None:
                raise DataFileError("read of geometry file failed!")
            try:
                pic[i, j] = int(token)
            except ValueError as exc:
                raise DataFileError("read of geometry file failed!") from exc
    config.total_n_fluid = int(np.count_nonzero(pic == int(CellType.FLUID)))

    x_step = (geo_x - 2.0) / config.imax
    y_step = (geo_y - 2.0) / config.jmax

    scaled = np.zeros((config.l_imax + 2, config.l_jmax + 2), dtype=int)
    config.n_fluid = 0
    for j in range(config.l_jmax + 2):
        y = config.jb - 1 if j == 0 else config.jb - 1 + int(1 + (j - 1) * y_step)
        for i in range(config.l_imax + 2):
            x = config.il - 1 if i == 0 else config.il - 1 + int(1 + (i - 1) * x_step)
            if not (0 <= x < geo_x and 0 <= y < geo_y):
                raise DataFileError(f"geometry index ({x}, {y}) outside the image")
            value = int(pic[x, y])
            if value == int(CellType.FLUID):
                config.n_fluid += 1
            scaled[i, j] = value
    return scaled