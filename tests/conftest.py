"""Hypothesis profiles and pytest fixtures for settled_forward."""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from settled_forward.infra.memory_adapter import InMemoryConfigStore

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


@pytest.fixture
def store() -> InMemoryConfigStore:
    return InMemoryConfigStore()
