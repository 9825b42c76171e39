# -*- coding: utf-8 -*-
"""
tests.property package bootstrap.

Shared configuration for property-based tests (Hypothesis):

- Registers named Hypothesis profiles (dev/ci/fast/stress).
- Selects the active profile using HYPOTHESIS_PROFILE, otherwise "ci" on CI
  (CI env var present/truthy) and "dev" locally.
- Exposes common strategies for gas magnitudes and Gas values.

Usage in tests:
    from tests.property import gas_values, given

    @given(gas_values())
    def test_something(g):
        ...
"""
from __future__ import annotations

import os
from typing import Final, Tuple

from hypothesis import HealthCheck, Verbosity, given, settings
from hypothesis import strategies as st

from gasunit.types.gas import U64_MAX, Gas


def _hc(*items: HealthCheck) -> Tuple[HealthCheck, ...]:
    return items


settings.register_profile(
    "dev",
    settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.function_scoped_fixture),
        verbosity=Verbosity.normal,
        derandomize=False,
    ),
)

settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.function_scoped_fixture),
        verbosity=Verbosity.verbose,
        derandomize=True,
    ),
)

settings.register_profile(
    "fast",
    settings(
        max_examples=25,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.function_scoped_fixture),
        derandomize=False,
    ),
)

settings.register_profile(
    "stress",
    settings(
        max_examples=2000,
        deadline=None,
        suppress_health_check=_hc(HealthCheck.too_slow, HealthCheck.filter_too_much, HealthCheck.function_scoped_fixture),
        derandomize=True,
    ),
)


def _env_truthy(name: str) -> bool:
    v = os.getenv(name)
    return (v or "").lower() not in ("", "0", "false", "no", "off")


_active: Final[str] = os.getenv("HYPOTHESIS_PROFILE") or (
    "ci" if _env_truthy("CI") else "dev"
)
settings.load_profile(_active)

# tests/conftest.py resets config and log context once per test, not per example.


def magnitudes(max_value: int = U64_MAX):
    """u64 magnitudes, biased toward the edges of the range."""
    return st.one_of(
        st.sampled_from([0, 1, max_value]),
        st.integers(min_value=0, max_value=max_value),
    )


def gas_values(max_value: int = U64_MAX):
    return magnitudes(max_value).map(Gas)


__all__ = [
    "st",
    "given",
    "magnitudes",
    "gas_values",
]
