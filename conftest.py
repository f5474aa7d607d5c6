import pytest
from django.core.cache import caches


def pytest_configure(config):
    """
    pytest_configure is the canonical way to configure test server for entire testing suite
    """
    pass


@pytest.fixture(autouse=True)
def clear_caches():
    # selections and ignored upload ids live in the cache
    for cache in caches.all():
        cache.clear()
    yield
    for cache in caches.all():
        cache.clear()
