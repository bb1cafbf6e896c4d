"""Shared fixtures for the planeforge test-suite."""

import pytest

from planeforge import Geometry, ToleranceContext


@pytest.fixture
def ctx():
    """Default tolerance context (epsilon = 1e-3)."""
    return ToleranceContext(1e-3)


@pytest.fixture
def geo():
    """Geometry session sharing the default precision."""
    return Geometry(precision=1e-3)
