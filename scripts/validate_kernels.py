#!/usr/bin/env python
"""Validate the numba Burgers kernels against plain numpy formulas.

The kernels are compiled with FMA contraction enabled, so they may differ
from the numpy reference by a few ulp. This script evaluates every kernel
over random states, including exact zeros and sonic pairs, and asserts the
relative deviation stays below REL_TOL.
"""

import os
import sys

import numpy as np

# Allow running without pip install -e .
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from hyperflux.equations.inviscid_burgers import (
    flux_impl,
    flux_ec_impl,
    flux_godunov_impl,
    flux_engquist_osher_impl,
)

REL_TOL = 1e-13
N_SAMPLES = 20000


def reference_fluxes(u_L, u_R):
    u_plus = np.maximum(u_L, 0.0)
    u_minus = np.minimum(u_R, 0.0)
    return {
        "flux": 0.5 * u_L**2,
        "flux_ec": (u_L**2 + u_L * u_R + u_R**2) / 6.0,
        "flux_godunov": 0.5 * np.maximum(u_plus**2, u_minus**2),
        "flux_engquist_osher": 0.5 * (u_plus**2 + u_minus**2),
    }


def kernel_fluxes(u_L, u_R):
    return {
        "flux": np.array([flux_impl(a) for a in u_L]),
        "flux_ec": np.array([flux_ec_impl(a, b) for a, b in zip(u_L, u_R)]),
        "flux_godunov": np.array([flux_godunov_impl(a, b) for a, b in zip(u_L, u_R)]),
        "flux_engquist_osher": np.array(
            [flux_engquist_osher_impl(a, b) for a, b in zip(u_L, u_R)]
        ),
    }


def main():
    rng = np.random.default_rng(2026)
    u_L = rng.uniform(-10.0, 10.0, size=N_SAMPLES)
    u_R = rng.uniform(-10.0, 10.0, size=N_SAMPLES)
    # Exact zeros and sonic pairs
    u_L[:100] = 0.0
    u_R[100:200] = -u_L[100:200]

    ref = reference_fluxes(u_L, u_R)
    out = kernel_fluxes(u_L, u_R)

    print(f"Kernel validation: {N_SAMPLES} state pairs, rel tol {REL_TOL:.0e}")
    print("=" * 60)

    all_pass = True
    for name in ref:
        scale = np.maximum(np.abs(ref[name]), 1e-300)
        rel = np.max(np.abs(out[name] - ref[name]) / scale)
        ok = rel <= REL_TOL
        all_pass &= ok
        print(f"{name:<22} max rel diff {rel:.3e}  {'PASS' if ok else 'FAIL'}")

    print("=" * 60)
    if not all_pass:
        print("FAILED")
        sys.exit(1)
    print("All kernels within tolerance")


if __name__ == "__main__":
    main()
