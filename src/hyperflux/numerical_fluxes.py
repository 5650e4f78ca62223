# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Two-point numerical fluxes for interfaces between neighbouring states.

Every function has the signature

    flux_X(u_ll, u_rr, orientation, equations) -> ndarray, shape (nvariables,)

so they can be swapped at the same call site. The generic ones are built
only from the equation's capabilities (``flux``, ``max_abs_speed_naive``,
``min_max_speed_naive``); ``flux_ec``, ``flux_godunov`` and
``flux_engquist_osher`` need a derivation specific to each equation and
raise ``UnsupportedCapabilityError`` when it has none.
"""

import numpy as np


def flux_central(u_ll, u_rr, orientation, equations):
    """Arithmetic mean of the physical fluxes. No dissipation."""
    f_ll = equations.flux(u_ll, orientation)
    f_rr = equations.flux(u_rr, orientation)
    return 0.5 * (f_ll + f_rr)


def flux_lax_friedrichs(u_ll, u_rr, orientation, equations):
    """Local Lax-Friedrichs (Rusanov) flux.

        f* = (f(u_L) + f(u_R))/2 - lambda_max/2 * (u_R - u_L)

    with lambda_max from ``max_abs_speed_naive``. Robust, but smears
    discontinuities.
    """
    u_ll = equations.check_state(u_ll)
    u_rr = equations.check_state(u_rr)
    f_ll = equations.flux(u_ll, orientation)
    f_rr = equations.flux(u_rr, orientation)
    lambda_max = equations.max_abs_speed_naive(u_ll, u_rr, orientation)
    return 0.5 * (f_ll + f_rr) - 0.5 * lambda_max * (u_rr - u_ll)


flux_rusanov = flux_lax_friedrichs


def flux_hll(u_ll, u_rr, orientation, equations):
    """Harten-Lax-van Leer flux from the wave speed bounds of ``min_max_speed_naive``."""
    u_ll = equations.check_state(u_ll)
    u_rr = equations.check_state(u_rr)
    f_ll = equations.flux(u_ll, orientation)
    f_rr = equations.flux(u_rr, orientation)
    lambda_min, lambda_max = equations.min_max_speed_naive(u_ll, u_rr, orientation)

    if lambda_min >= 0.0:
        return f_ll
    if lambda_max <= 0.0:
        return f_rr
    # lambda_min < 0 < lambda_max here, so the denominator is positive
    return (
        lambda_max * f_ll - lambda_min * f_rr
        + lambda_min * lambda_max * (u_rr - u_ll)
    ) / (lambda_max - lambda_min)


def flux_ec(u_ll, u_rr, orientation, equations):
    """Entropy-conserving flux of ``equations``."""
    return equations.flux_ec(u_ll, u_rr, orientation)


def flux_godunov(u_ll, u_rr, orientation, equations):
    """Flux of the exact local Riemann solution."""
    return equations.flux_godunov(u_ll, u_rr, orientation)


def flux_engquist_osher(u_ll, u_rr, orientation, equations):
    """Engquist-Osher flux splitting."""
    return equations.flux_engquist_osher(u_ll, u_rr, orientation)


def entropy_production(numerical_flux, u_ll, u_rr, orientation, equations):
    """Entropy produced at one interface by ``numerical_flux``.

        r = (v_R - v_L) . f* - (psi_R - psi_L)

    where v are the entropy variables and psi the entropy potential.
    r == 0 for an entropy-conserving flux and r <= 0 for an entropy-stable one.

    Returns:
        float
    """
    f_num = numerical_flux(u_ll, u_rr, orientation, equations)
    v_ll = equations.cons2entropy(u_ll)
    v_rr = equations.cons2entropy(u_rr)
    psi_ll = equations.entropy_potential(u_ll, orientation)
    psi_rr = equations.entropy_potential(u_rr, orientation)
    return float(np.dot(v_rr - v_ll, f_num) - (psi_rr - psi_ll))
