import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def _clear_cache():
    # Budget counters and throttle history live in the cache
    cache.clear()
    yield
    cache.clear()
