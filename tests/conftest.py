from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from rest_framework.test import APIClient

from modules.products.models import Product

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


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
def make_product():
    """Factory persisting a Product; keyword arguments override defaults."""

    def _make(**overrides) -> Product:
        defaults = {
            "name": "test",
            "description": "description",
            "price": Decimal("10.00"),
            "stock_quantity": 1,
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make


@pytest.fixture()
def make_user():
    """Factory creating a user, optionally placed in role groups."""

    def _make(username: str = "testuser", roles: tuple[str, ...] = ()):
        user = User.objects.create_user(username=username, password="testpass123")
        for role in roles:
            group, _ = Group.objects.get_or_create(name=role)
            user.groups.add(group)
        return user

    return _make


@pytest.fixture()
def client_as(make_user):
    """Build an APIClient force-authenticated as a user holding ``roles``."""

    def _client(*roles: str) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=make_user(roles=roles))
        return client

    return _client
