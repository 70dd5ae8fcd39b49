"""
Global test fixtures for pytest.

Provides reusable fixtures for API testing:
- Authenticated API clients by role (admin, user, another user)
- Model instances (Category, Product, Warranty)
"""
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from apps.accounts.models import RoleChoices, User
from apps.products.models import Category, Product
from apps.warranties.models import Warranty


# ============================================================================
# Storage
# ============================================================================

@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Store uploaded documents in a per-test temporary directory."""
    settings.MEDIA_ROOT = str(tmp_path / 'media')
    return settings.MEDIA_ROOT


# ============================================================================
# Users
# ============================================================================

@pytest.fixture
def admin_user(db):
    """User with the admin role."""
    return User.objects.create_user(
        email='admin@test.com',
        password='testpass123',
        name='Admin',
        role=RoleChoices.ADMIN
    )


@pytest.fixture
def regular_user(db):
    """User with the default user role."""
    return User.objects.create_user(
        email='user@test.com',
        password='testpass123',
        name='Regular User'
    )


@pytest.fixture
def other_user(db):
    """A second regular user (does not own the test warranties)."""
    return User.objects.create_user(
        email='other@test.com',
        password='testpass123',
        name='Other User'
    )


# ============================================================================
# API Clients
# ============================================================================

@pytest.fixture
def api_client():
    """Unauthenticated DRF API client."""
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    """Authenticated API client with the admin role."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def user_client(regular_user):
    """Authenticated API client for the regular user."""
    client = APIClient()
    client.force_authenticate(user=regular_user)
    return client


@pytest.fixture
def other_user_client(other_user):
    """Authenticated API client for the second regular user."""
    client = APIClient()
    client.force_authenticate(user=other_user)
    return client


# ============================================================================
# Catalog
# ============================================================================

@pytest.fixture
def category(db):
    return Category.objects.create(
        name='Electronics',
        description='Phones, laptops and accessories',
        default_warranty_period=24,
        service_requirements=['Keep receipt', 'Register online'],
    )


@pytest.fixture
def appliances_category(db):
    return Category.objects.create(name='Appliances', default_warranty_period=12)


@pytest.fixture
def product(category):
    return Product.objects.create(
        name='Laptop Pro 14',
        manufacturer='Acme',
        model='LP14',
        category=category,
        price='1299.00',
    )


@pytest.fixture
def appliance(appliances_category):
    return Product.objects.create(
        name='Dishwasher',
        manufacturer='HomeCo',
        category=appliances_category,
    )


@pytest.fixture
def uncategorized_product(db):
    return Product.objects.create(name='Mystery Box', manufacturer='Acme')


# ============================================================================
# Warranties
# ============================================================================

@pytest.fixture
def make_warranty(db):
    """
    Factory: make_warranty(user, product, days_until_expiry, **fields).

    Expiration is today + days_until_expiry; purchase date defaults to one
    year before expiration.
    """
    def _make(user, product, days_until_expiry, **fields):
        expiration_date = timezone.localdate() + timedelta(days=days_until_expiry)
        data = {
            'purchase_date': expiration_date - timedelta(days=365),
            'expiration_date': expiration_date,
            'warranty_provider': 'Acme Care',
            'warranty_number': f'WR-{Warranty.objects.count() + 1:04d}',
            'coverage_details': 'Parts and labour',
        }
        data.update(fields)
        return Warranty.objects.create(user=user, product=product, **data)

    return _make


@pytest.fixture
def warranty(make_warranty, regular_user, product):
    """Active warranty (expires in 200 days) owned by regular_user."""
    return make_warranty(regular_user, product, 200)
