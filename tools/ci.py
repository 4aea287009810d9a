#!/usr/bin/env python3
# Copyright 2026 CAVPGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally.

Usage::

    python tools/ci.py                  # every step
    python tools/ci.py --skip build     # everything but the wheel build
    python tools/ci.py --only tests     # a single step
    python tools/ci.py --fail-fast      # stop at the first failing step
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

# (key, title, command); keys are what --skip and --only accept.
STEPS: list[tuple[str, str, list[str]]] = [
    ("format", "Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("lint", "Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("types", "Type check", ["uv", "run", "ty", "check", "src/"]),
    ("tests", "Tests", ["uv", "run", "pytest", "--cov=cavpgen", "--cov-report=term-missing"]),
    ("cli", "CLI smoke test", ["uv", "run", "cavpgen", "--help"]),
    ("build", "Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a pass/fail summary."""
    keys = [key for key, _, _ in STEPS]
    parser = argparse.ArgumentParser(description="Run CAVPGen CI checks locally.")
    parser.add_argument("--skip", action="append", default=[], choices=keys, help="Step to leave out (repeatable)")
    parser.add_argument("--only", action="append", default=[], choices=keys, help="Step to run (repeatable)")
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    args = parser.parse_args(argv)

    selected = [step for step in STEPS if (not args.only or step[0] in args.only) and step[0] not in args.skip]
    if not selected:
        print(chalk.yellow("No CI steps selected."))
        return 0

    root = Path(__file__).resolve().parent.parent
    results: list[tuple[str, bool, float]] = []
    for _, title, cmd in selected:
        _banner(title)
        start = time.monotonic()
        passed = subprocess.run(cmd, cwd=root).returncode == 0
        results.append((title, passed, time.monotonic() - start))
        if not passed and args.fail_fast:
            break

    _banner("Summary")
    for title, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        print(colour(f"  {'PASS' if passed else 'FAIL'}  {title} ({elapsed:.1f}s)"))
    not_run = len(selected) - len(results)
    if not_run:
        print(chalk.yellow(f"  {not_run} step(s) not run"))
    print()

    return 0 if all(passed for _, passed, _ in results) and not not_run else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
