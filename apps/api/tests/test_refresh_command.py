"""
Tests for the refresh_warranty_statuses management command.
"""
from datetime import timedelta
from io import StringIO

import pytest
from django.core.management import call_command
from django.utils import timezone

from apps.warranties.management.commands.refresh_warranty_statuses import stale_warranties
from apps.warranties.models import Warranty
from apps.warranties.status import WarrantyStatus


def make_stale(warranty, days_until_expiry):
    """Move the expiration date without re-deriving the stored status."""
    Warranty.objects.filter(pk=warranty.pk).update(
        expiration_date=timezone.localdate() + timedelta(days=days_until_expiry)
    )


@pytest.mark.django_db
class TestRefreshWarrantyStatuses:

    def test_finds_only_stale(self, make_warranty, regular_user, product):
        fresh = make_warranty(regular_user, product, 100)
        to_expired = make_warranty(regular_user, product, 100)
        to_expiring = make_warranty(regular_user, product, 100)
        back_to_active = make_warranty(regular_user, product, -5)

        make_stale(to_expired, -1)
        make_stale(to_expiring, 30)
        make_stale(back_to_active, 31)

        stale_ids = set(stale_warranties().values_list('id', flat=True))

        assert stale_ids == {to_expired.id, to_expiring.id, back_to_active.id}
        assert fresh.id not in stale_ids

    def test_rewrites_stale_statuses(self, make_warranty, regular_user, product):
        to_expired = make_warranty(regular_user, product, 100)
        to_expiring = make_warranty(regular_user, product, 100)
        make_stale(to_expired, -1)
        make_stale(to_expiring, 0)

        out = StringIO()
        call_command('refresh_warranty_statuses', stdout=out)

        to_expired.refresh_from_db()
        to_expiring.refresh_from_db()
        assert to_expired.status == WarrantyStatus.EXPIRED
        assert to_expiring.status == WarrantyStatus.EXPIRING
        assert '2 warranties refreshed' in out.getvalue()
        assert not stale_warranties().exists()

    def test_dry_run_changes_nothing(self, warranty):
        make_stale(warranty, -1)

        out = StringIO()
        call_command('refresh_warranty_statuses', '--dry-run', stdout=out)

        warranty.refresh_from_db()
        assert warranty.status == WarrantyStatus.ACTIVE
        assert f'{warranty.id}: active -> expired' in out.getvalue()
        assert '1 warranties would be refreshed' in out.getvalue()

    def test_nothing_to_do(self, warranty):
        out = StringIO()
        call_command('refresh_warranty_statuses', stdout=out)

        assert '0 warranties refreshed' in out.getvalue()
