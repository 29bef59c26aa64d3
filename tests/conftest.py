"""Shared test fixtures."""

import pytest

from human_duration import Duration

# Seconds values that cover every component boundary.
SAMPLE_SECONDS = [
    0,
    1,
    59,
    60,
    61,
    3599,
    3600,
    3661,
    5400,
    86399,
    86400,
    90061,
    183300,
    2764800,
    2**32,
    2**64 - 1,
]


@pytest.fixture
def zero():
    return Duration(0)


@pytest.fixture
def ninety_minutes():
    return Duration.from_components(minutes=90)


@pytest.fixture(params=SAMPLE_SECONDS)
def sample_seconds(request):
    return request.param
