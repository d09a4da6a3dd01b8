import pytest

from rest_framework.test import APIClient

from modules.products.repositories import reset_memory_repository


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _fresh_memory_store():
    """Re-seed the process-wide in-memory product store for every test."""
    reset_memory_repository()
    yield
    reset_memory_repository()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def django_store(settings):
    """Route the API through ``ProductDjangoRepository``."""
    settings.PRODUCT_STORE = "django"
