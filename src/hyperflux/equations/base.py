# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Capability contract shared by every equation type.

An equation is a small immutable descriptor. The class constants ``NDIMS``
and ``NVARIABLES`` fix the spatial dimension D and the number of conserved
variables N; the methods supply the physics. Required capabilities are
abstract, so a subclass that forgets one fails when it is instantiated.
Optional capabilities raise ``UnsupportedCapabilityError`` unless the
subclass overrides them.

Orientations are 1-based: ``orientation`` is in ``[1, NDIMS]``.
"""

from abc import ABC, abstractmethod

import numpy as np

INITIAL_CONDITION_PREFIX = "initial_condition_"
SOURCE_TERMS_PREFIX = "source_terms_"


class UnsupportedCapabilityError(NotImplementedError):
    """Raised when an equation does not define the requested capability."""

    def __init__(self, equations, capability):
        self.equations = equations
        self.capability = capability
        super().__init__(
            f"{type(equations).__name__} does not implement {capability!r}"
        )


class AbstractEquations(ABC):
    NDIMS = None
    NVARIABLES = None

    # conversion name -> ordered variable names
    VARNAMES = {}

    @property
    def ndims(self):
        return self.NDIMS

    @property
    def nvariables(self):
        return self.NVARIABLES

    # ------------------------------------------------------------------
    # Argument validation
    # ------------------------------------------------------------------

    def check_orientation(self, orientation):
        """Return ``orientation`` as int, or raise ValueError if not in [1, D]."""
        if isinstance(orientation, (bool, np.bool_)) or not isinstance(
            orientation, (int, np.integer)
        ):
            raise ValueError(
                f"orientation must be an integer in [1, {self.NDIMS}], "
                f"got {orientation!r}"
            )
        if not 1 <= orientation <= self.NDIMS:
            raise ValueError(
                f"orientation must be in [1, {self.NDIMS}] for "
                f"{type(self).__name__}, got {orientation}"
            )
        return int(orientation)

    def check_state(self, u):
        u = np.asarray(u, dtype=float)
        if u.shape != (self.NVARIABLES,):
            raise ValueError(
                f"state must have shape ({self.NVARIABLES},) for "
                f"{type(self).__name__}, got {u.shape}"
            )
        return u

    def check_point(self, x):
        x = np.atleast_1d(np.asarray(x, dtype=float))
        if x.shape != (self.NDIMS,):
            raise ValueError(
                f"point must have {self.NDIMS} coordinate(s) for "
                f"{type(self).__name__}, got shape {x.shape}"
            )
        return x

    # ------------------------------------------------------------------
    # Required capabilities
    # ------------------------------------------------------------------

    @abstractmethod
    def flux(self, u, orientation):
        """Physical flux f(u) along axis ``orientation``."""

    @abstractmethod
    def max_abs_speed_naive(self, u_ll, u_rr, orientation):
        """Upper bound on |characteristic speed| between two states."""

    @abstractmethod
    def min_max_speed_naive(self, u_ll, u_rr, orientation):
        """Bounds (lambda_min, lambda_max) on the wave speeds between two states."""

    @abstractmethod
    def max_abs_speeds(self, u):
        """Per-axis spectral radius bound, a tuple of length NDIMS."""

    @abstractmethod
    def cons2prim(self, u):
        pass

    @abstractmethod
    def cons2entropy(self, u):
        pass

    @abstractmethod
    def entropy(self, u):
        pass

    @abstractmethod
    def energy_total(self, u):
        pass

    # ------------------------------------------------------------------
    # Optional capabilities
    # ------------------------------------------------------------------

    def cons2cons(self, u):
        return self.check_state(u).copy()

    def prim2cons(self, u):
        raise UnsupportedCapabilityError(self, "prim2cons")

    def entropy_potential(self, u, orientation):
        """Entropy potential psi = v . f(u) - F(u) along ``orientation``."""
        raise UnsupportedCapabilityError(self, "entropy_potential")

    def flux_ec(self, u_ll, u_rr, orientation):
        """Entropy-conserving two-point flux.

        There is no generic formula; every equation derives its own from its
        entropy/entropy-flux pair.
        """
        raise UnsupportedCapabilityError(self, "flux_ec")

    def flux_godunov(self, u_ll, u_rr, orientation):
        raise UnsupportedCapabilityError(self, "flux_godunov")

    def flux_engquist_osher(self, u_ll, u_rr, orientation):
        raise UnsupportedCapabilityError(self, "flux_engquist_osher")

    def supports(self, capability):
        """True if ``capability`` is overridden away from the raising default."""
        method = getattr(type(self), capability, None)
        if method is None:
            return False
        return method is not getattr(AbstractEquations, capability, None)

    # ------------------------------------------------------------------
    # Metadata and named initial conditions / source terms
    # ------------------------------------------------------------------

    def varnames(self, conversion):
        """Variable names for a conversion (callable or its name)."""
        name = conversion if isinstance(conversion, str) else getattr(
            conversion, "__name__", None
        )
        try:
            return self.VARNAMES[name]
        except KeyError:
            raise UnsupportedCapabilityError(self, f"varnames({name})") from None

    def initial_condition(self, name):
        return self._lookup(INITIAL_CONDITION_PREFIX, name)

    def source_terms(self, name):
        return self._lookup(SOURCE_TERMS_PREFIX, name)

    def available_initial_conditions(self):
        return self._available(INITIAL_CONDITION_PREFIX)

    def available_source_terms(self):
        return self._available(SOURCE_TERMS_PREFIX)

    def _lookup(self, prefix, name):
        method = getattr(self, prefix + name, None)
        if not callable(method):
            raise UnsupportedCapabilityError(self, prefix + name)
        return method

    def _available(self, prefix):
        return sorted(
            attr[len(prefix):] for attr in dir(type(self))
            if attr.startswith(prefix) and callable(getattr(self, attr))
        )

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def _parameters(self):
        return ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._parameters() == other._parameters()

    def __hash__(self):
        return hash((type(self), self._parameters()))

    def __repr__(self):
        params = ", ".join(repr(p) for p in self._parameters())
        return f"{type(self).__name__}({params})"
