# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Linear scalar advection with a constant velocity a.

    u_t + sum_i (a_i u)_{x_i} = 0

Every initial condition here is an exact solution, u(x, t) = u0(x - a t).
"""

import numpy as np

from hyperflux.equations.base import AbstractEquations


class LinearScalarAdvectionEquation(AbstractEquations):
    """Shared implementation for the 1D and 2D variants.

    Parameters
    ----------
    advection_velocity : float or sequence of float
        Constant velocity, one component per spatial dimension. A scalar is
        accepted in 1D.
    """

    NVARIABLES = 1

    VARNAMES = {
        "cons2cons": ("scalar",),
        "cons2prim": ("scalar",),
        "cons2entropy": ("scalar",),
    }

    # u0 = c + A*sin(omega*sum(x)), omega = 2*pi/L
    CONVERGENCE_C = 1.0
    CONVERGENCE_A = 0.5
    CONVERGENCE_L = 2.0

    def __init__(self, advection_velocity):
        velocity = np.atleast_1d(np.asarray(advection_velocity, dtype=float))
        if velocity.shape != (self.NDIMS,):
            raise ValueError(
                f"advection_velocity must have {self.NDIMS} component(s), "
                f"got {advection_velocity!r}"
            )
        if not np.all(np.isfinite(velocity)):
            raise ValueError(
                f"advection_velocity must be finite, got {advection_velocity!r}"
            )
        velocity.setflags(write=False)
        self._velocity = velocity

    @property
    def advection_velocity(self):
        return self._velocity

    def _parameters(self):
        return (tuple(float(a) for a in self._velocity),)

    def _speed(self, orientation):
        return float(self._velocity[self.check_orientation(orientation) - 1])

    # --- Initial conditions ------------------------------------------------

    def _translated(self, x, t):
        return self.check_point(x) - self._velocity * t

    def initial_condition_constant(self, x, t):
        """Constant state, used to test free-stream preservation."""
        self.check_point(x)
        return np.array([2.0])

    def initial_condition_gauss(self, x, t):
        """Gaussian bump exp(-|x - a t|^2); not periodic."""
        x_trans = self._translated(x, t)
        return np.array([np.exp(-np.sum(x_trans ** 2))])

    def initial_condition_convergence_test(self, x, t):
        """Smooth plane wave for convergence tests."""
        x_trans = self._translated(x, t)
        omega = 2.0 * np.pi / self.CONVERGENCE_L
        scalar = self.CONVERGENCE_C + self.CONVERGENCE_A * np.sin(omega * np.sum(x_trans))
        return np.array([scalar])

    def initial_condition_sin(self, x, t):
        x_trans = self._translated(x, t)
        return np.array([np.prod(np.sin(np.pi * x_trans))])

    # --- Fluxes and wave speeds ----------------------------------------------

    def flux(self, u, orientation):
        u = self.check_state(u)
        return self._speed(orientation) * u

    def max_abs_speed_naive(self, u_ll, u_rr, orientation):
        return abs(self._speed(orientation))

    def min_max_speed_naive(self, u_ll, u_rr, orientation):
        a = self._speed(orientation)
        return a, a

    def max_abs_speeds(self, u):
        self.check_state(u)
        return tuple(float(abs(a)) for a in self._velocity)

    def flux_ec(self, u_ll, u_rr, orientation):
        """Central flux a*(u_L + u_R)/2.

        With eta = u^2/2 and F = a u^2/2 the potential is psi = a u^2/2, and
        (u_R - u_L) f* = psi_R - psi_L gives the arithmetic mean.
        """
        a = self._speed(orientation)
        return 0.5 * a * (self.check_state(u_ll) + self.check_state(u_rr))

    def flux_godunov(self, u_ll, u_rr, orientation):
        """Upwind flux; for a linear flux the Riemann solution is a single jump."""
        a = self._speed(orientation)
        return max(a, 0.0) * self.check_state(u_ll) + min(a, 0.0) * self.check_state(u_rr)

    def flux_engquist_osher(self, u_ll, u_rr, orientation):
        # f+ = max(a, 0) u and f- = min(a, 0) u, so this coincides with Godunov
        return self.flux_godunov(u_ll, u_rr, orientation)

    # --- Variable conversions ----------------------------------------------

    def cons2prim(self, u):
        return self.check_state(u).copy()

    def prim2cons(self, u):
        return self.check_state(u).copy()

    def cons2entropy(self, u):
        return self.check_state(u).copy()

    # --- Entropy and energy --------------------------------------------------

    def entropy(self, u):
        u = self.check_state(u)
        return 0.5 * float(u[0]) ** 2

    def energy_total(self, u):
        u = self.check_state(u)
        return 0.5 * float(u[0]) ** 2

    def entropy_potential(self, u, orientation):
        a = self._speed(orientation)
        u = self.check_state(u)
        return 0.5 * a * float(u[0]) ** 2


class LinearScalarAdvectionEquation1D(LinearScalarAdvectionEquation):
    NDIMS = 1


class LinearScalarAdvectionEquation2D(LinearScalarAdvectionEquation):
    NDIMS = 2
