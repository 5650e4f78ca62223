# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Name-based selection of equations, numerical fluxes, initial conditions
and source terms.

A solver setup is described by a plain dict, e.g.

    {"equation": "linear_scalar_advection_2d",
     "advection_velocity": (1.0, 1.0),
     "surface_flux": "lax_friedrichs",
     "initial_condition": "gauss"}

and resolved once, up front, so that a bad name or an unsupported
equation/flux pairing fails before any flux is evaluated.
"""

import logging

from hyperflux.equations.base import UnsupportedCapabilityError
from hyperflux.equations.inviscid_burgers import InviscidBurgersEquation1D
from hyperflux.equations.linear_scalar_advection import (
    LinearScalarAdvectionEquation1D,
    LinearScalarAdvectionEquation2D,
)
from hyperflux.numerical_fluxes import (
    flux_central,
    flux_ec,
    flux_engquist_osher,
    flux_godunov,
    flux_hll,
    flux_lax_friedrichs,
    flux_rusanov,
)

logger = logging.getLogger(__name__)

EQUATIONS = {
    "inviscid_burgers_1d": InviscidBurgersEquation1D,
    "linear_scalar_advection_1d": LinearScalarAdvectionEquation1D,
    "linear_scalar_advection_2d": LinearScalarAdvectionEquation2D,
}

NUMERICAL_FLUXES = {
    "lax_friedrichs": flux_lax_friedrichs,
    "rusanov": flux_rusanov,
    "central": flux_central,
    "hll": flux_hll,
    "ec": flux_ec,
    "godunov": flux_godunov,
    "engquist_osher": flux_engquist_osher,
}

# Numerical fluxes that delegate to an equation-specific derivation
_EQUATION_SPECIFIC = {
    flux_ec: "flux_ec",
    flux_godunov: "flux_godunov",
    flux_engquist_osher: "flux_engquist_osher",
}


def _choose(table, name, kind):
    try:
        return table[name]
    except KeyError:
        raise ValueError(
            f"Unknown {kind}: {name!r}. Choose from {sorted(table)}"
        ) from None


_SETUP_KEYS = ("equation", "surface_flux", "initial_condition", "source_terms")


def build_equations(params):
    """Instantiate the equation named by ``params["equation"]``.

    Keys other than the setup keys are passed to the equation constructor.
    """
    if "equation" not in params:
        raise ValueError("params must name an 'equation'")
    cls = _choose(EQUATIONS, params["equation"], "equation")
    kwargs = {k: v for k, v in params.items() if k not in _SETUP_KEYS}
    equations = cls(**kwargs)
    logger.debug("Built %r from %s", equations, params["equation"])
    return equations


def get_numerical_flux(name):
    flux = _choose(NUMERICAL_FLUXES, name, "numerical flux")
    logger.debug("Selected numerical flux %s -> %s", name, flux.__name__)
    return flux


def check_flux_support(numerical_flux, equations):
    """Raise UnsupportedCapabilityError if ``equations`` cannot evaluate ``numerical_flux``."""
    capability = _EQUATION_SPECIFIC.get(numerical_flux)
    if capability is not None and not equations.supports(capability):
        raise UnsupportedCapabilityError(equations, capability)


def get_initial_condition(equations, name):
    ic = equations.initial_condition(name)
    logger.debug("Selected initial condition %s for %r", name, equations)
    return ic


def get_source_terms(equations, name):
    """Source terms by name; ``None`` means an unforced problem."""
    if name is None:
        return None
    source = equations.source_terms(name)
    logger.debug("Selected source terms %s for %r", name, equations)
    return source


def build_setup(params):
    """Resolve a setup dict into callables.

    Args:
        params: dict with ``equation``, ``surface_flux``, ``initial_condition``,
            optional ``source_terms`` and any equation constructor arguments.

    Returns:
        dict with keys equations, surface_flux, initial_condition, source_terms.
    """
    equations = build_equations(params)
    surface_flux = get_numerical_flux(params.get("surface_flux", "lax_friedrichs"))
    check_flux_support(surface_flux, equations)

    if "initial_condition" not in params:
        raise ValueError("params must name an 'initial_condition'")
    initial_condition = get_initial_condition(equations, params["initial_condition"])
    source_terms = get_source_terms(equations, params.get("source_terms"))

    logger.info(
        "Setup: %r, surface_flux=%s, initial_condition=%s, source_terms=%s",
        equations, surface_flux.__name__, params["initial_condition"],
        params.get("source_terms"),
    )
    return {
        "equations": equations,
        "surface_flux": surface_flux,
        "initial_condition": initial_condition,
        "source_terms": source_terms,
    }
