#!/usr/bin/env python3
# Copyright 2026 cdparse Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline: formatting, lint, tests with coverage, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["pytest", "--cov=cdparse", "--cov-report=term-missing"]),
    ("Build", [sys.executable, "-m", "build"]),
]


def main() -> int:
    """Run every step, then print a colored pass/fail summary."""
    results = [_run_step(name, cmd) for name, cmd in STEPS]

    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue('  Summary')}\n{sep}")
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()

    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}\n{chalk.blue(name)}\n{sep}")
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).resolve().parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main())
