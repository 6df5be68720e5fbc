#!/usr/bin/env python3
"""Development task runner for mdfolio.

Usage:
    python scripts/dev.py lint        # Check linting
    python scripts/dev.py format      # Auto-format code
    python scripts/dev.py check       # Format check + lint + type check
    python scripts/dev.py test        # Run all tests
    python scripts/dev.py test:cov    # Run tests with coverage
    python scripts/dev.py clean       # Remove cache files
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SOURCES = ["packages/", "examples/", "scripts/"]
COVERED = ["mdfolio_core", "mdfolio_fs"]

_PY = sys.executable


def _run(cmd: list[str], *, check: bool = True) -> int:
    """Run a command from the repo root and return its exit code."""
    print(f"\n$ {' '.join(cmd)}\n")
    result = subprocess.run(cmd, cwd=ROOT, check=False)
    if check and result.returncode != 0:
        sys.exit(result.returncode)
    return result.returncode


def lint() -> None:
    """Run ruff linter (check only)."""
    _run([_PY, "-m", "ruff", "check", *SOURCES])


def fmt() -> None:
    """Format with ruff and apply safe lint fixes."""
    _run([_PY, "-m", "ruff", "format", *SOURCES])
    _run([_PY, "-m", "ruff", "check", "--fix", *SOURCES])


def check() -> None:
    """Format check, lint and mypy, without modifying files."""
    _run([_PY, "-m", "ruff", "format", "--check", *SOURCES])
    lint()
    _run([_PY, "-m", "mypy", "packages/core/mdfolio-core/mdfolio_core",
          "packages/providers/mdfolio-fs/mdfolio_fs"], check=False)


def test() -> None:
    """Run the test suite."""
    _run([_PY, "-m", "pytest", "-v"])


def test_cov() -> None:
    """Run tests with a coverage report."""
    cov = [f"--cov={name}" for name in COVERED]
    _run([_PY, "-m", "pytest", "-v", *cov, "--cov-report=term-missing"])


def clean() -> None:
    """Remove cache and build artifacts."""
    patterns = ["__pycache__", ".pytest_cache", ".mypy_cache", ".ruff_cache", "*.egg-info",
                "build", "dist", "htmlcov", ".coverage"]
    root_venv = ROOT / ".venv"
    removed = 0
    for pattern in patterns:
        for path in ROOT.rglob(pattern):
            if root_venv in (path, *path.parents):
                continue
            if path.is_dir():
                shutil.rmtree(path)
            else:
                path.unlink()
            print(f"  Removed {path.relative_to(ROOT)}")
            removed += 1
    print("  Nothing to clean." if removed == 0 else f"\n  Cleaned {removed} item(s).")


TASKS = {
    "lint": lint,
    "format": fmt,
    "fmt": fmt,
    "check": check,
    "test": test,
    "test:cov": test_cov,
    "clean": clean,
}


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help", "help"):
        print(__doc__)
        sys.exit(0)

    task = TASKS.get(sys.argv[1])
    if task is None:
        print(f"Unknown task: {sys.argv[1]}")
        print(f"Available: {', '.join(TASKS)}")
        sys.exit(1)
    task()


if __name__ == "__main__":
    main()
