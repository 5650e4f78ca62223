# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling the numerical flux hot paths.

Provides micro-benchmarks (one numerical flux over a batch of interfaces),
a comparison of the numba kernels against plain numpy formulas, and an
optional cProfile dump.
"""

import cProfile
import io
import logging
import pstats
import time

import numpy as np

from hyperflux.utils import print_benchmark_table

logger = logging.getLogger(__name__)


def _make_test_states(n_states=256, seed=0):
    """Random left/right Burgers states spanning shocks, rarefactions and sonic points."""
    rng = np.random.default_rng(seed)
    u_ll = rng.uniform(-2.0, 2.0, size=(n_states, 1))
    u_rr = rng.uniform(-2.0, 2.0, size=(n_states, 1))
    return u_ll, u_rr


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_numerical_flux(name, equations=None, n_states=256, n_iter=20):
    """Benchmark one numerical flux evaluated over ``n_states`` interfaces."""
    from hyperflux.equations.inviscid_burgers import InviscidBurgersEquation1D
    from hyperflux.registry import get_numerical_flux

    equations = equations or InviscidBurgersEquation1D()
    numerical_flux = get_numerical_flux(name)
    u_ll, u_rr = _make_test_states(n_states)

    def sweep():
        for i in range(n_states):
            numerical_flux(u_ll[i], u_rr[i], 1, equations)

    return _time_fn(sweep, n_iter=n_iter)


def bench_kernel_vs_numpy(n_states=256, n_iter=200):
    """Time the jitted Burgers flux_ec kernel against the same formula in numpy.

    Returns:
        dict with 'kernel' and 'numpy' timing dicts and 'max_abs_diff',
        the largest deviation between the two (FMA contraction).
    """
    from hyperflux.equations.inviscid_burgers import flux_ec_impl

    u_ll, u_rr = _make_test_states(n_states)
    u_L = u_ll[:, 0]
    u_R = u_rr[:, 0]

    def kernel():
        return [flux_ec_impl(a, b) for a, b in zip(u_L, u_R)]

    def reference():
        return (u_L * u_L + u_L * u_R + u_R * u_R) / 6.0

    max_abs_diff = float(np.max(np.abs(np.array(kernel()) - reference())))
    return {
        "kernel": _time_fn(kernel, n_iter=n_iter),
        "numpy": _time_fn(reference, n_iter=n_iter),
        "max_abs_diff": max_abs_diff,
    }


def profile_numerical_fluxes(n_states=1024):
    """Run cProfile over every registered numerical flux, return stats as string."""
    from hyperflux.equations.inviscid_burgers import InviscidBurgersEquation1D
    from hyperflux.registry import NUMERICAL_FLUXES

    equations = InviscidBurgersEquation1D()
    u_ll, u_rr = _make_test_states(n_states)
    pr = cProfile.Profile()
    pr.enable()
    for numerical_flux in NUMERICAL_FLUXES.values():
        for i in range(n_states):
            numerical_flux(u_ll[i], u_rr[i], 1, equations)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(n_states=256, n_iter=20, verbose=True):
    """Benchmark every registered numerical flux on Burgers states. Returns dict of results."""
    from hyperflux.registry import NUMERICAL_FLUXES

    logger.info("Benchmarking %d numerical fluxes, %d interfaces each",
                len(NUMERICAL_FLUXES), n_states)
    results = {}
    for name in NUMERICAL_FLUXES:
        results[name] = bench_numerical_flux(name, n_states=n_states, n_iter=n_iter)
        logger.debug("%s: %.4f ms median", name, results[name]["median_ms"])

    if verbose:
        print_benchmark_table(results)
    return results


def compare_results(before, after):
    """Print a comparison table of two benchmark result sets."""
    print(f"\n{'Benchmark':<22} {'Before':>10} {'After':>10} {'Speedup':>10}")
    print("-" * 55)
    for key in before:
        b = before[key]["median_ms"]
        a = after[key]["median_ms"]
        speedup = b / a if a > 0 else float("inf")
        print(f"{key:<22} {b:>8.3f}ms {a:>8.3f}ms {speedup:>9.1f}x")


if __name__ == "__main__":
    print("=" * 55)
    print("hyperflux benchmarks")
    print("=" * 55)
    print()

    print("cProfile of all numerical fluxes (1024 interfaces):")
    print(profile_numerical_fluxes())

    print("Numerical fluxes (256 interfaces):")
    run_all_benchmarks(n_states=256)

    r = bench_kernel_vs_numpy()
    print(f"\nflux_ec kernel vs numpy: max |diff| = {r['max_abs_diff']:.3e}")
