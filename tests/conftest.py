"""Pytest configuration and fixtures."""

import pytest

from overflower.dispatch import resolve
from overflower.ints import FixedInt
from tests.helpers import FIXED_TYPES, SIGNED_TYPES, UNSIGNED_TYPES


@pytest.fixture(params=FIXED_TYPES, ids=lambda t: t.KIND.name)
def fixed(request) -> type[FixedInt]:
    """Each of the ten fixed-width types."""
    return request.param


@pytest.fixture(params=SIGNED_TYPES, ids=lambda t: t.KIND.name)
def signed_fixed(request) -> type[FixedInt]:
    """Each signed fixed-width type."""
    return request.param


@pytest.fixture(params=UNSIGNED_TYPES, ids=lambda t: t.KIND.name)
def unsigned_fixed(request) -> type[FixedInt]:
    """Each unsigned fixed-width type."""
    return request.param


@pytest.fixture(autouse=True)
def _fresh_resolution_cache():
    """Start every test with an empty resolution cache."""
    resolve.cache_clear()
    yield
    resolve.cache_clear()
