"""Shared test fixtures."""

import pytest

from pyduration import Duration


@pytest.fixture
def sample():
    return Duration.parse("1h15m30.918273645s")
