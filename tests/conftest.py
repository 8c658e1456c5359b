"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_intervals import QualityType

# Diatonic steps split by quality axis
PERFECT_STEPS = [1, 4, 5]  # unison, fourth, fifth
IMPERFECT_STEPS = [2, 3, 6, 7]  # second, third, sixth, seventh


@pytest.fixture(params=PERFECT_STEPS)
def perfect_size(request: pytest.FixtureRequest) -> int:
    """Numeric sizes measured on the perfect axis."""
    return request.param


@pytest.fixture(params=IMPERFECT_STEPS)
def imperfect_size(request: pytest.FixtureRequest) -> int:
    """Numeric sizes measured on the major/minor axis."""
    return request.param


@pytest.fixture(params=list(QualityType))
def quality_type(request: pytest.FixtureRequest) -> QualityType:
    """Every quality type."""
    return request.param
