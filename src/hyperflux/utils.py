# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities: logging setup and summary tables."""

import logging
import os


def configure_logging(outdir, name, level=logging.INFO):
    """Set up file + console logging on the 'hyperflux' logger.

    Args:
        outdir: directory for the log file.
        name: used in the log filename.
        level: logging level for the logger and both handlers.

    Returns:
        the configured logger.
    """
    os.makedirs(outdir, exist_ok=True)
    logger = logging.getLogger("hyperflux")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    # File handler
    log_path = os.path.join(outdir, f"{name}.log")
    fh = logging.FileHandler(log_path)
    fh.setLevel(level)
    fh.setFormatter(fmt)
    logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_benchmark_table(results):
    """Print a formatted table of benchmark results to stdout."""
    header = f"{'benchmark':<32} {'median':>10} {'min':>10} {'n':>6}"
    print(header)
    print("-" * len(header))
    for name, r in results.items():
        print(
            f"{name:<32} {r['median_ms']:>8.4f}ms {r['min_ms']:>8.4f}ms "
            f"{r['n_iter']:>6d}"
        )
