# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest

from hyperflux.equations.inviscid_burgers import InviscidBurgersEquation1D
from hyperflux.equations.linear_scalar_advection import (
    LinearScalarAdvectionEquation1D,
    LinearScalarAdvectionEquation2D,
)
from hyperflux.numerical_fluxes import flux_ec, flux_hll, flux_lax_friedrichs


@pytest.mark.parametrize("orientation", [0, 2, -1, True, 1.0, "1", None])
def test_burgers_rejects_bad_orientation(orientation):
    eq = InviscidBurgersEquation1D()
    u = np.array([1.0])
    with pytest.raises(ValueError):
        eq.flux(u, orientation)
    with pytest.raises(ValueError):
        flux_lax_friedrichs(u, u, orientation, eq)
    with pytest.raises(ValueError):
        flux_ec(u, u, orientation, eq)


def test_numpy_integer_orientation_accepted():
    eq = LinearScalarAdvectionEquation2D((1.0, 2.0))
    assert np.array_equal(eq.flux(np.array([1.0]), np.int64(2)), [2.0])


def test_2d_rejects_orientation_three():
    eq = LinearScalarAdvectionEquation2D((1.0, 2.0))
    u = np.array([1.0])
    with pytest.raises(ValueError):
        flux_hll(u, u, 3, eq)


def test_rejects_wrong_state_length():
    eq = InviscidBurgersEquation1D()
    with pytest.raises(ValueError):
        eq.flux(np.array([1.0, 2.0]), 1)
    with pytest.raises(ValueError):
        eq.cons2prim(np.zeros(0))


def test_rejects_wrong_point_dimension():
    with pytest.raises(ValueError):
        InviscidBurgersEquation1D().initial_condition_convergence_test(np.array([0.1, 0.2]), 0.0)
    with pytest.raises(ValueError):
        LinearScalarAdvectionEquation2D((1.0, 1.0)).initial_condition_gauss(0.5, 0.0)


def test_advection_velocity_validation():
    with pytest.raises(ValueError):
        LinearScalarAdvectionEquation2D(1.0)
    with pytest.raises(ValueError):
        LinearScalarAdvectionEquation1D((1.0, 2.0))
    with pytest.raises(ValueError):
        LinearScalarAdvectionEquation2D((np.nan, 1.0))
    with pytest.raises(ValueError):
        LinearScalarAdvectionEquation1D(np.inf)
