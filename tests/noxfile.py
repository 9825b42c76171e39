"""
Nox multi-session runner for gasunit.

Sessions:
  - lint      : ruff + black + mypy over the package and tests
  - unit      : unit tests (tests/unit)
  - property  : Hypothesis property tests (tests/property), HYPOTHESIS_PROFILE=ci

Pass extra args to pytest like:
  nox -f tests/noxfile.py -s unit -- -k "envelope" -vv
"""

from __future__ import annotations

from pathlib import Path

import nox

nox.options.reuse_venv = True
nox.options.stop_on_first_error = False

REPO_ROOT = Path(__file__).resolve().parents[1]
PY_PATHS = ["gasunit", "tests"]

TEST_PYTHONS = ["3.10", "3.11", "3.12"]


def _install_test_stack(session: nox.Session) -> None:
    session.run("python", "-m", "pip", "install", "--upgrade", "pip", silent=True)
    session.install("-e", f"{REPO_ROOT}[test]")
    session.env.setdefault("PYTHONUNBUFFERED", "1")


@nox.session(name="lint", python="3.11")
def lint(session: nox.Session) -> None:
    """Static analysis: ruff, black (check), mypy."""
    _install_test_stack(session)
    session.install("ruff>=0.6.0", "black>=24.3.0", "mypy>=1.10.0")
    with session.chdir(str(REPO_ROOT)):
        session.run("ruff", "check", *PY_PATHS)
        session.run("black", "--check", *PY_PATHS)
        session.run("mypy", "--pretty", "--show-error-codes", "--ignore-missing-imports", "gasunit")


@nox.session(name="unit", python=TEST_PYTHONS)
def unit(session: nox.Session) -> None:
    """Unit tests only."""
    _install_test_stack(session)
    with session.chdir(str(REPO_ROOT)):
        session.run("pytest", "tests/unit", "-q", *session.posargs)


@nox.session(name="property", python=TEST_PYTHONS)
def property_tests(session: nox.Session) -> None:
    """Hypothesis property tests with the deterministic CI profile."""
    _install_test_stack(session)
    session.env.setdefault("HYPOTHESIS_PROFILE", "ci")
    with session.chdir(str(REPO_ROOT)):
        session.run("pytest", "tests/property", "-q", *session.posargs)
