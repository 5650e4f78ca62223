# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Smoke tests for the benchmark module."""

import pytest


@pytest.mark.slow
def test_run_all_benchmarks_smoke():
    """Smoke test: run_all_benchmarks returns every registered flux with positive timings."""
    from hyperflux.benchmark import run_all_benchmarks
    from hyperflux.registry import NUMERICAL_FLUXES

    results = run_all_benchmarks(n_states=8, n_iter=2, verbose=False)

    assert set(results) == set(NUMERICAL_FLUXES)
    for key, r in results.items():
        assert r["median_ms"] > 0, f"{key} median_ms should be positive"
        assert r["n_iter"] == 2


@pytest.mark.slow
def test_kernel_matches_numpy():
    """The jitted flux_ec kernel agrees with numpy to rounding (FMA contraction only)."""
    from hyperflux.benchmark import bench_kernel_vs_numpy

    r = bench_kernel_vs_numpy(n_states=64, n_iter=2)
    assert r["max_abs_diff"] < 1e-13
    assert r["kernel"]["median_ms"] > 0


@pytest.mark.slow
def test_profile_numerical_fluxes():
    from hyperflux.benchmark import profile_numerical_fluxes

    stats = profile_numerical_fluxes(n_states=4)
    assert "flux_lax_friedrichs" in stats
