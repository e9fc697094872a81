# cfdlab

Parts for a two-dimensional incompressible flow solver on a staggered grid.
Every field is a NumPy array indexed `[i, j]`. The index `i` runs along x and
`j` runs along y. There is one ghost layer on each side of the domain.

## Modules

- `cfdlab.config`: the `Config` dataclass. `read_parameters(path)` reads a
  scenario file made of whitespace-separated `name value` pairs. It ignores
  unknown names and treats everything after a `#` name as a comment to the end
  of the line. It sets `dx` and `dy` from the lengths and the cell counts. It
  raises `ConfigError` when the file cannot be opened, when a value is invalid,
  or when `imax` or `jmax` is zero.
- `cfdlab.cell`: the enums `CellType` (`FLUID`, `NOSLIP`, `INLET`, `OUTLET`,
  `FREESLIP`, `LID`), `BoundaryType`, `NeighbourPosition` and `BorderPosition`,
  plus `lookup_cell_type`.
  - `Cell` is a view onto the arrays of a grid. It reads and writes
    `velocity_u`, `velocity_v`, `pressure`, `temperature` and `type` in those
    arrays.
  - `Cell.set_neighbours` links the four neighbours. For a no-slip cell it also
    records which sides face fluid. It raises `ValueError` when a no-slip cell
    has more than two fluid neighbours.
- `cfdlab.grid`: `Grid(config, geometry)`.
  - It builds the arrays `u`, `v`, `p`, `t` and `types` from an integer
    geometry array of shape `(imax + 2, jmax + 2)`. Fluid cells start at
    `UI`, `VI`, `PI` and `TI`; all other cells start at zero.
  - It provides `cell(i, j)`, `max_u()`, `max_v()`, `set_temperature(values)`,
    `format_pressure()` and `format_temperature()`.
- `cfdlab.boundary`: these functions work on a grid in place.
  - `apply_velocity_boundaries(grid, config)` handles no-slip, free-slip,
    inlet, outlet and lid cells.
  - `apply_temperature_boundaries(grid, config, temperature)` applies
    adiabatic obstacle walls. It applies hot and cold walls for the problems
    `NaturalConvection`, `FluidTrap`, `FluidTrapReversed` and
    `RayleighBenardConvection`.
- `cfdlab.multigrid`: the pieces of a multigrid hierarchy.
  - `Level` and `build_levels` build the levels. `slice_types` samples the
    cell types for each coarser level.
  - `coarse_system_matrix` returns the coarse-level Laplacian as a dense
    matrix.
  - `restriction_fullweight` and `prolongate` move values between levels.
  - `gauss_seidel` performs one smoothing sweep over the fluid cells.
- `cfdlab.parallel`: Cartesian domain decomposition.
  - `dims_create` splits a process count into a process grid.
  - `init_parallel` sets a rank's subdomain bounds and its neighbour ranks.
    `PROC_NULL` marks a missing neighbour.
  - `get_from_matrix`, `store_in_matrix`, `get_vel_from_matrix` and
    `store_vel_in_matrix` pack and unpack halo lines.
- `cfdlab.datafile`: readers for data files. It raises `DataFileError` on
  failure.
  - `find_string`, `read_string`, `read_int` and `read_double` read
    `name value` data files.
  - `write_matrix` and `read_matrix` write and read binary float32 matrix
    blocks.
  - `read_pgm(config)` reads an ASCII PGM geometry. It scales the geometry to
    the local subdomain and sets `n_fluid` and `total_n_fluid`.
- `cfdlab.display`: text renderings.
  - `format_matrix`, `format_domain_matrix`, `format_grid_types` and
    `format_config` return text.
  - `write_matrix_to_file` writes a matrix as CSV.

## Installation

```
pip install .
```

## Example

```python
from cfdlab.config import read_parameters
from cfdlab.datafile import read_pgm
from cfdlab.grid import Grid
from cfdlab.boundary import apply_velocity_boundaries

config = read_parameters("scenarios/Cavity100.dat")
config.il, config.jb = 1, 1
config.l_imax, config.l_jmax = config.imax, config.jmax
geometry = read_pgm(config)
grid = Grid(config, geometry)
apply_velocity_boundaries(grid, config)
print(grid.max_u(), grid.max_v())
```

## What the package does not do

It has no command and no time-stepping simulation loop. It also leaves out
the following:

- There is no complete pressure solver. Only the multigrid operators are
  included, with no driver for them.
- No results are written in a visualisation format.
- No messages are exchanged between processes. `cfdlab.parallel` computes the
  decomposition and the halo buffers, but the transport is up to the caller.

## Tests

```
pip install .[test]
pytest
```