#!/usr/bin/env python3
# Copyright 2026 LUML Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, sample render, and build."""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

SAMPLE = "tests/data/shapes.luml"

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=luml", "--cov-report=term-missing"]),
    ("Render sample", ["uv", "run", "luml", "-v", SAMPLE]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every CI step, even after a failure, and print a pass/fail summary."""
    results: list[tuple[str, bool, float]] = [_run_step(name, cmd) for name, cmd in STEPS]

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(paint(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


def _repo_root() -> str:
    return str(pathlib.Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
