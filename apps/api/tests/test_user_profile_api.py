"""
Tests for /api/v1/users/profile/ and the ensure_superuser command.
"""
import pytest
from django.core.management import call_command

from apps.accounts.models import RoleChoices, User

PROFILE_URL = '/api/v1/users/profile/'


@pytest.mark.django_db
class TestProfile:

    def test_get_profile(self, user_client, regular_user):
        response = user_client.get(PROFILE_URL)

        assert response.status_code == 200
        assert response.data['email'] == 'user@test.com'
        assert response.data['name'] == 'Regular User'
        assert response.data['role'] == 'user'
        assert 'password' not in response.data

    def test_update_name(self, user_client, regular_user):
        response = user_client.patch(PROFILE_URL, {'name': '  New Name '}, format='json')

        assert response.status_code == 200
        regular_user.refresh_from_db()
        assert regular_user.name == 'New Name'

    def test_role_and_email_not_self_editable(self, user_client, regular_user):
        response = user_client.patch(
            PROFILE_URL, {'role': 'admin', 'email': 'boss@test.com'}, format='json'
        )

        assert response.status_code == 200
        regular_user.refresh_from_db()
        assert regular_user.role == RoleChoices.USER
        assert regular_user.email == 'user@test.com'

    def test_blank_name_rejected(self, user_client):
        response = user_client.patch(PROFILE_URL, {'name': '   '}, format='json')

        assert response.status_code == 400

    def test_requires_authentication(self, api_client):
        assert api_client.get(PROFILE_URL).status_code == 401


@pytest.mark.django_db
class TestUserModel:

    def test_superuser_gets_admin_role(self):
        user = User.objects.create_superuser(email='root@test.com', password='x')

        assert user.role == RoleChoices.ADMIN
        assert user.is_admin

    def test_regular_user_is_not_admin(self, regular_user):
        assert not regular_user.is_admin

    def test_email_required(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email='', password='x')


@pytest.mark.django_db
class TestEnsureSuperuser:

    def test_creates_admin(self, monkeypatch):
        monkeypatch.setenv('DJANGO_SUPERUSER_EMAIL', 'boot@test.com')
        monkeypatch.setenv('DJANGO_SUPERUSER_PASSWORD', 'bootpass123')

        call_command('ensure_superuser')

        user = User.objects.get(email='boot@test.com')
        assert user.is_admin
        assert user.check_password('bootpass123')

    def test_promotes_existing_user(self, monkeypatch, regular_user):
        monkeypatch.setenv('DJANGO_SUPERUSER_EMAIL', regular_user.email)

        call_command('ensure_superuser')

        regular_user.refresh_from_db()
        assert regular_user.role == RoleChoices.ADMIN
        assert User.objects.count() == 1
