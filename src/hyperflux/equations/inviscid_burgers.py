# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Inviscid Burgers' equation in one space dimension.

    u_t + (u^2 / 2)_x = 0

Scalar, convex flux. The entropy is eta(u) = u^2 / 2 with entropy flux
F(u) = u^3 / 3, so the entropy variable equals the conserved variable.
"""

import numpy as np
from numba import njit

from hyperflux.equations.base import AbstractEquations

# Only FMA contraction is allowed in the flux kernels; no reassociation,
# so results differ from plain numpy by at most a few ulp.
_FASTMATH = {"contract"}


@njit(cache=True, fastmath=_FASTMATH)
def flux_impl(u):
    return 0.5 * u * u


@njit(cache=True, fastmath=_FASTMATH)
def flux_ec_impl(u_L, u_R):
    return (u_L * u_L + u_L * u_R + u_R * u_R) / 6.0


@njit(cache=True, fastmath=_FASTMATH)
def flux_godunov_impl(u_L, u_R):
    """Exact Riemann solution flux for a convex scalar law.

    Mishra, Hyperbolic PDEs lecture notes, section 4.1.5, eq. (4.16).
    """
    u_plus = max(u_L, 0.0)
    u_minus = min(u_R, 0.0)
    return 0.5 * max(u_plus * u_plus, u_minus * u_minus)


@njit(cache=True, fastmath=_FASTMATH)
def flux_engquist_osher_impl(u_L, u_R):
    """Flux splitting f+(u_L) + f-(u_R).

    Mishra, Hyperbolic PDEs lecture notes, section 4.2.5, eq. (4.34).
    """
    u_plus = max(u_L, 0.0)
    u_minus = min(u_R, 0.0)
    return 0.5 * (u_plus * u_plus + u_minus * u_minus)


class InviscidBurgersEquation1D(AbstractEquations):
    """The inviscid Burgers' equation, D=1, N=1.

    The descriptor is stateless: all instances compare equal.
    """

    NDIMS = 1
    NVARIABLES = 1

    VARNAMES = {
        "cons2cons": ("scalar",),
        "cons2prim": ("scalar",),
        "cons2entropy": ("scalar",),
    }

    # Manufactured solution u = c + A*sin(omega*(x - t)), omega = 2*pi/L
    CONVERGENCE_C = 2.0
    CONVERGENCE_A = 1.0
    CONVERGENCE_L = 1.0

    def _scalar(self, u):
        if np.ndim(u) == 0:
            return float(u)
        return float(self.check_state(u)[0])

    # --- Initial conditions ------------------------------------------------

    def initial_condition_constant(self, x, t):
        """Constant state, used to test free-stream preservation."""
        self.check_point(x)
        return np.array([2.0])

    def initial_condition_convergence_test(self, x, t):
        """Smooth travelling wave for convergence tests."""
        x = self.check_point(x)
        omega = 2.0 * np.pi / self.CONVERGENCE_L
        scalar = self.CONVERGENCE_C + self.CONVERGENCE_A * np.sin(omega * (x[0] - t))
        return np.array([scalar])

    # --- Source terms ------------------------------------------------------

    def source_terms_convergence_test(self, u, x, t):
        """Source term matching ``initial_condition_convergence_test``.

        With w = omega*(x - t) and u = c + A*sin(w):
            u_t + u*u_x = A*omega*cos(w) * (u - 1)
        which for c = 2, A = 1 is omega*cos(w)*(1 + sin(w)).
        """
        self.check_state(u)
        x = self.check_point(x)
        c = self.CONVERGENCE_C
        A = self.CONVERGENCE_A
        omega = 2.0 * np.pi / self.CONVERGENCE_L
        w = omega * (x[0] - t)
        du = A * omega * np.cos(w) * (c - 1.0 + A * np.sin(w))
        return np.array([du])

    # --- Fluxes and wave speeds ----------------------------------------------

    def flux(self, u, orientation=1):
        self.check_orientation(orientation)
        return np.array([flux_impl(self._scalar(u))])

    def max_abs_speed_naive(self, u_ll, u_rr, orientation=1):
        """max(|u_L|, |u_R|); f'(u) = u is monotone, so the extremes sit at the ends."""
        self.check_orientation(orientation)
        return max(abs(self._scalar(u_ll)), abs(self._scalar(u_rr)))

    def min_max_speed_naive(self, u_ll, u_rr, orientation=1):
        self.check_orientation(orientation)
        u_L = self._scalar(u_ll)
        u_R = self._scalar(u_rr)
        return min(u_L, u_R), max(u_L, u_R)

    def max_abs_speeds(self, u):
        return (abs(self._scalar(u)),)

    def flux_ec(self, u_ll, u_rr, orientation=1):
        """Symmetric entropy-conserving flux (u_L^2 + u_L*u_R + u_R^2) / 6."""
        self.check_orientation(orientation)
        return np.array([flux_ec_impl(self._scalar(u_ll), self._scalar(u_rr))])

    def flux_godunov(self, u_ll, u_rr, orientation=1):
        self.check_orientation(orientation)
        return np.array([flux_godunov_impl(self._scalar(u_ll), self._scalar(u_rr))])

    def flux_engquist_osher(self, u_ll, u_rr, orientation=1):
        self.check_orientation(orientation)
        return np.array(
            [flux_engquist_osher_impl(self._scalar(u_ll), self._scalar(u_rr))]
        )

    # --- Variable conversions ----------------------------------------------

    def cons2prim(self, u):
        return self.check_state(u).copy()

    def prim2cons(self, u):
        return self.check_state(u).copy()

    def cons2entropy(self, u):
        return self.check_state(u).copy()

    # --- Entropy and energy --------------------------------------------------

    def entropy(self, u):
        u = self._scalar(u)
        return 0.5 * u * u

    def energy_total(self, u):
        u = self._scalar(u)
        return 0.5 * u * u

    def entropy_potential(self, u, orientation=1):
        """psi = u*f(u) - F(u) = u^3/2 - u^3/3 = u^3/6."""
        self.check_orientation(orientation)
        u = self._scalar(u)
        return u * u * u / 6.0
