"""Simulation parameters and the reader for scenario files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]


class ConfigError(Exception):
    """Raised when a scenario file cannot be read or holds an invalid value."""


@dataclass
class Config:
    """All parameters of one simulation run."""

    xlength: float = 0.0
    ylength: float = 0.0
    Re: float = 0.0
    t_end: float = 0.0
    dt: float = 0.0
    omg: float = 0.0
    eps: float = 0.0
    tau: float = 0.0
    alpha: float = 0.0
    dt_value: float = 0.0
    UI: float = 0.0
    VI: float = 0.0
    GX: float = 0.0
    GY: float = 0.0
    PI: float = 0.0
    PR: float = 0.0
    TI: float = 0.0
    T_h: float = 0.0
    T_c: float = 0.0
    beta: float = 0.0
    itermax: int = 0
    imax: int = 0
    jmax: int = 0
    calcTemp: int = 0
    iproc: int = 1
    jproc: int = 1
    levels: int = 1
    problem: str = ""
    geometry: str = ""
    solver: str = ""
    dx: float = 0.0
    dy: float = 0.0
    # runtime / domain decomposition values
    rank: int = 0
    num_proc: int = 1
    boundary_size: int = 1
    l_imax: int = 0
    l_jmax: int = 0
    il: int = 0
    ir: int = 0
    jb: int = 0
    jt: int = 0
    omg_i: int = 0
    omg_j: int = 0
    rank_l: int = 0
    rank_r: int = 0
    rank_t: int = 0
    rank_b: int = 0
    n_fluid: int = 0
    total_n_fluid: int = 0


_PARAMETERS: dict[str, Callable[[str], object]] = {
    **{
        name: float
        for name in (
            "xlength", "ylength", "Re", "t_end", "dt", "omg", "eps", "tau",
            "alpha", "dt_value", "UI", "VI", "GX", "GY", "PI", "PR", "TI",
            "T_h", "T_c", "beta",
        )
    },
    **{
        name: int
        for name in ("itermax", "imax", "jmax", "calcTemp", "iproc", "jproc", "levels")
    },
    **{name: str for name in ("problem", "geometry", "solver")},
}


def _tokens(text: str) -> Iterator[tuple[int, str]]:
    for lineno, line in enumerate(text.splitlines()):
        for token in line.split():
            yield lineno, token


def read_parameters(path: PathLike) -> Config:
    """Read a scenario file of ``name value`` pairs into a :class:`Config`.

    Tokens are whitespace separated; a name starting with ``#`` turns the
    rest of its line into a comment. Unknown names are ignored.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ConfigError(f"cannot open parameter file {os.fspath(path)!r}: {exc}") from exc

    config = Config()
    tokens = _tokens(text)
    comment_line = None
    for lineno, name in tokens:
        if lineno == comment_line:
            continue
        if name.startswith("#"):
            comment_line = lineno
            continue
        convert = _PARAMETERS.get(name)
        if convert is None:
            continue
        entry = next(tokens, None)
        if entry is None:
            break
        _, raw = entry
        try:
            value = convert(raw)
        except ValueError as exc:
            raise ConfigError(f"invalid value {raw!r} for parameter {name!r}") from exc
        setattr(config, name, value)

    if config.imax == 0 or config.jmax == 0:
        raise ConfigError("imax and jmax must be non-zero")
    config.dx = config.xlength / config.imax
    config.dy = config.ylength / config.jmax
    return config