"""
Test configuration for shop server.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def staff_user(db):
    from tests.factories import StaffUserFactory
    return StaffUserFactory()


@pytest.fixture
def auth_client(user):
    """API client authenticated as ``user``."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def sample_product(db):
    """Create a sample product for testing."""
    from tests.factories import ProductFactory
    return ProductFactory()


@pytest.fixture
def sample_category(db):
    from tests.factories import CategoryFactory
    return CategoryFactory()
