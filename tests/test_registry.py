# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging

import numpy as np
import pytest

from hyperflux.equations.base import UnsupportedCapabilityError
from hyperflux.equations.inviscid_burgers import InviscidBurgersEquation1D
from hyperflux.equations.linear_scalar_advection import LinearScalarAdvectionEquation2D
from hyperflux.numerical_fluxes import flux_ec, flux_godunov, flux_lax_friedrichs
from hyperflux.registry import (
    EQUATIONS,
    NUMERICAL_FLUXES,
    build_equations,
    build_setup,
    check_flux_support,
    get_initial_condition,
    get_numerical_flux,
    get_source_terms,
)

from test_equations_base import ScalarTransport


def test_registered_names():
    assert set(EQUATIONS) == {
        "inviscid_burgers_1d",
        "linear_scalar_advection_1d",
        "linear_scalar_advection_2d",
    }
    assert set(NUMERICAL_FLUXES) == {
        "lax_friedrichs", "rusanov", "central", "hll",
        "ec", "godunov", "engquist_osher",
    }


def test_build_equations_with_parameters():
    eq = build_equations({
        "equation": "linear_scalar_advection_2d",
        "advection_velocity": (1.0, 1.0),
        "surface_flux": "hll",
    })
    assert eq == LinearScalarAdvectionEquation2D((1.0, 1.0))


def test_build_equations_unknown():
    with pytest.raises(ValueError, match="Unknown equation"):
        build_equations({"equation": "euler_3d"})


def test_build_equations_requires_name():
    with pytest.raises(ValueError):
        build_equations({"advection_velocity": 1.0})


def test_get_numerical_flux():
    assert get_numerical_flux("ec") is flux_ec
    assert get_numerical_flux("rusanov") is flux_lax_friedrichs
    with pytest.raises(ValueError, match="Unknown numerical flux"):
        get_numerical_flux("roe")


def test_named_initial_conditions_and_sources():
    eq = InviscidBurgersEquation1D()
    ic = get_initial_condition(eq, "convergence_test")
    st = get_source_terms(eq, "convergence_test")
    u = ic(0.3, 0.1)
    assert np.isfinite(st(u, 0.3, 0.1)[0])
    assert get_source_terms(eq, None) is None
    with pytest.raises(UnsupportedCapabilityError):
        get_initial_condition(eq, "gauss")


def test_check_flux_support():
    check_flux_support(flux_lax_friedrichs, ScalarTransport())
    check_flux_support(flux_godunov, InviscidBurgersEquation1D())
    with pytest.raises(UnsupportedCapabilityError):
        check_flux_support(flux_ec, ScalarTransport())


def test_build_setup_burgers_convergence():
    setup = build_setup({
        "equation": "inviscid_burgers_1d",
        "surface_flux": "ec",
        "initial_condition": "convergence_test",
        "source_terms": "convergence_test",
    })
    eq = setup["equations"]
    assert eq == InviscidBurgersEquation1D()
    assert setup["surface_flux"] is flux_ec
    u = setup["initial_condition"](0.3, 0.1)
    assert setup["source_terms"](u, 0.3, 0.1).shape == (1,)


def test_build_setup_advection_defaults_to_lax_friedrichs():
    setup = build_setup({
        "equation": "linear_scalar_advection_2d",
        "advection_velocity": (1.0, 1.0),
        "initial_condition": "gauss",
    })
    assert setup["surface_flux"] is flux_lax_friedrichs
    assert setup["source_terms"] is None
    assert setup["initial_condition"](np.zeros(2), 0.0)[0] == 1.0


def test_build_setup_requires_initial_condition():
    with pytest.raises(ValueError):
        build_setup({"equation": "inviscid_burgers_1d"})


def test_build_setup_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="hyperflux.registry"):
        build_setup({
            "equation": "inviscid_burgers_1d",
            "surface_flux": "godunov",
            "initial_condition": "constant",
        })
    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "flux_godunov" in messages
    assert "InviscidBurgersEquation1D" in messages
