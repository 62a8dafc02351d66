#!/usr/bin/env python3
# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the yangkit CI checks locally and print a colored summary.

Usage:
    python tools/ci.py                 # every step
    python tools/ci.py --only lint tests
"""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["ruff", "check", "src/", "tests/", "tools/"],
    "typecheck": ["ty", "check", "src/"],
    "tests": ["pytest", "--cov=yangkit", "--cov-report=term-missing"],
    "docs": ["sphinx-build", "-q", "-b", "html", "docs/sphinx", "build/docs"],
    "build": ["python", "-m", "build"],
}


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps; return 0 when all of them pass."""
    parser = argparse.ArgumentParser(prog="ci", description="Run yangkit CI checks.")
    parser.add_argument(
        "--only",
        nargs="+",
        choices=list(STEPS),
        metavar="STEP",
        help=f"Run only these steps ({', '.join(STEPS)})",
    )
    args = parser.parse_args(argv)
    selected = args.only or list(STEPS)

    results = [_run_step(name, STEPS[name]) for name in selected]
    return _report(results)


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one step from the repository root and return (name, passed, seconds)."""
    print(chalk.blue(f"\n=== {name}: {' '.join(cmd)}"))
    start = time.monotonic()
    try:
        passed = subprocess.run(cmd, cwd=_REPO_ROOT).returncode == 0
    except FileNotFoundError:
        print(chalk.red(f"'{cmd[0]}' is not installed"))
        passed = False
    return name, passed, time.monotonic() - start


def _report(results: list[tuple[str, bool, float]]) -> int:
    print(chalk.blue("\n=== Summary"))
    for name, passed, elapsed in results:
        label = chalk.green("PASS") if passed else chalk.red("FAIL")
        print(f"  {label}  {name} ({elapsed:.1f}s)")
    return 0 if all(passed for _, passed, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
