import numpy as np
import pytest

from cfdlab.boundary import apply_temperature_boundaries, apply_velocity_boundaries
from cfdlab.cell import CellType
from cfdlab.config import Config
from cfdlab.grid import Grid


def _geometry(top=CellType.NOSLIP, left=CellType.NOSLIP, right=CellType.NOSLIP):
    geo = np.full((5, 5), int(CellType.NOSLIP))
    geo[1:4, 1:4] = int(CellType.FLUID)
    geo[1:4, 4] = int(top)
    geo[0, 1:4] = int(left)
    geo[4, 1:4] = int(right)
    return geo


def _config(**kwargs):
    return Config(imax=3, jmax=3, UI=0.5, VI=0.25, **kwargs)


def test_no_slip_walls_average_to_zero():
    config = _config()
    grid = Grid(config, _geometry())
    apply_velocity_boundaries(grid, config)
    for k in range(1, 4):
        # bottom wall: tangential u averages to zero, v on wall is zero
        assert grid.u[k, 0] + grid.u[k, 1] == pytest.approx(0.0)
        assert grid.v[k, 0] == 0.0
        # left wall
        assert grid.u[0, k] == 0.0
        assert grid.v[0, k] + grid.v[1, k] == pytest.approx(0.0)
        # top wall
        assert grid.v[k, 3] == 0.0
        assert grid.u[k, 4] + grid.u[k, 3] == pytest.approx(0.0)
        # right wall
        assert grid.u[3, k] == 0.0
        assert grid.v[4, k] + grid.v[3, k] == pytest.approx(0.0)


def test_lid_moves_with_unit_velocity():
    config = _config()
    grid = Grid(config, _geometry(top=CellType.LID))
    apply_velocity_boundaries(grid, config)
    for i in range(1, 4):
        assert (grid.u[i, 4] + grid.u[i, 3]) / 2 == pytest.approx(1.0)
        assert grid.v[i, 4] == 0.0


def test_inlet_and_outlet():
    config = _config()
    grid = Grid(config, _geometry(left=CellType.INLET, right=CellType.OUTLET))
    apply_velocity_boundaries(grid, config)
    for j in range(1, 4):
        assert grid.u[0, j] == 1.0
        assert grid.v[0, j] == 0.0
        assert grid.u[4, j] == grid.u[3, j]


def test_fluid_cells_untouched():
    config = _config()
    grid = Grid(config, _geometry())
    before = grid.v[1:4, 1:3].copy()
    apply_velocity_boundaries(grid, config)
    np.testing.assert_array_equal(grid.v[1:4, 1:3], before)


def _temperature_grid(problem):
    config = _config(problem=problem, T_h=1.0, T_c=0.0, omg_i=1, omg_j=1)
    grid = Grid(config, _geometry())
    t = np.zeros((5, 5))
    t[1:4, 1:4] = np.arange(9, dtype=float).reshape(3, 3) / 10
    return config, grid, t


def test_natural_convection_hot_left_cold_right():
    config, grid, t = _temperature_grid("NaturalConvection")
    apply_temperature_boundaries(grid, config, t)
    for j in range(5):
        assert (t[0, j] + t[1, j]) / 2 == pytest.approx(config.T_h)
        assert (t[4, j] + t[3, j]) / 2 == pytest.approx(config.T_c)
    for i in range(1, 4):
        assert t[i, 4] == t[i, 3]
        assert t[i, 0] == t[i, 1]


def test_fluid_trap_reversed_swaps_walls():
    config, grid, t = _temperature_grid("FluidTrapReversed")
    apply_temperature_boundaries(grid, config, t)
    for j in range(5):
        assert (t[0, j] + t[1, j]) / 2 == pytest.approx(config.T_c)
        assert (t[4, j] + t[3, j]) / 2 == pytest.approx(config.T_h)


def test_rayleigh_benard_hot_bottom_cold_top():
    config, grid, t = _temperature_grid("RayleighBenardConvection")
    apply_temperature_boundaries(grid, config, t)
    for i in range(5):
        assert (t[i, 0] + t[i, 1]) / 2 == pytest.approx(config.T_h)
        assert (t[i, 4] + t[i, 3]) / 2 == pytest.approx(config.T_c)
    for j in range(1, 4):
        assert t[0, j] == t[1, j]
        assert t[4, j] == t[3, j]


def test_other_problem_is_adiabatic():
    config, grid, t = _temperature_grid("Cavity")
    apply_temperature_boundaries(grid, config, t)
    for k in range(1, 4):
        assert t[0, k] == t[1, k]
        assert t[4, k] == t[3, k]
        assert t[k, 0] == t[k, 1]
        assert t[k, 4] == t[k, 3]