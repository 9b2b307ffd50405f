"""Shared test fixtures."""

import pytest

from pytimeunits import Duration


@pytest.fixture
def full_duration():
    return Duration(days=2, hours=3, minutes=45, seconds=30)


@pytest.fixture
def zero_duration():
    return Duration()
