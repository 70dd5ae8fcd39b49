"""
Warranty API tests.

Endpoints under /api/v1/warranties/:
- list/filter/sort, create, retrieve, update, delete
- status is derived server-side and never client-settable
- owner-or-admin access
- stats/overview and expiring
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from apps.ops.models import AuditLog
from apps.warranties.models import Warranty
from apps.warranties.status import WarrantyStatus

WARRANTIES_URL = '/api/v1/warranties/'


def detail_url(warranty_id):
    return f'{WARRANTIES_URL}{warranty_id}/'


def days_from_today(days):
    return (timezone.localdate() + timedelta(days=days)).isoformat()


@pytest.fixture
def warranty_payload(product):
    return {
        'product': str(product.id),
        'purchase_date': days_from_today(-300),
        'expiration_date': days_from_today(10),
        'warranty_provider': 'Acme Care',
        'warranty_number': 'WR-9001',
        'coverage_details': 'Screen and battery',
        'notes': 'Bought at the downtown store',
    }


@pytest.mark.django_db
class TestWarrantyCreate:

    def test_create_derives_status(self, user_client, regular_user, warranty_payload):
        response = user_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 201
        assert response.data['status'] == WarrantyStatus.EXPIRING
        assert response.data['user'] == regular_user.id

        warranty = Warranty.objects.get(pk=response.data['id'])
        assert warranty.user == regular_user
        assert warranty.status == WarrantyStatus.EXPIRING

    def test_client_status_ignored(self, user_client, warranty_payload):
        warranty_payload['expiration_date'] = days_from_today(-1)
        warranty_payload['status'] = 'active'

        response = user_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 201
        assert response.data['status'] == WarrantyStatus.EXPIRED

    def test_expiration_before_purchase_rejected(self, user_client, warranty_payload):
        warranty_payload['purchase_date'] = days_from_today(10)
        warranty_payload['expiration_date'] = days_from_today(5)

        response = user_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 400
        assert 'expiration_date' in response.data

    def test_invalid_date_rejected(self, user_client, warranty_payload):
        warranty_payload['expiration_date'] = 'next tuesday'

        response = user_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 400
        assert 'expiration_date' in response.data

    def test_missing_required_fields(self, user_client, product):
        response = user_client.post(WARRANTIES_URL, {'product': str(product.id)}, format='json')

        assert response.status_code == 400
        for field in ('purchase_date', 'expiration_date', 'warranty_provider',
                      'warranty_number', 'coverage_details'):
            assert field in response.data

    def test_unknown_product_rejected(self, user_client, warranty_payload):
        warranty_payload['product'] = '00000000-0000-0000-0000-000000000000'

        response = user_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 400
        assert 'product' in response.data

    def test_requires_authentication(self, api_client, warranty_payload):
        response = api_client.post(WARRANTIES_URL, warranty_payload, format='json')

        assert response.status_code == 401


@pytest.mark.django_db
class TestWarrantyList:

    def test_lists_only_own(self, user_client, make_warranty, regular_user, other_user, product):
        mine = make_warranty(regular_user, product, 100)
        make_warranty(other_user, product, 100)

        response = user_client.get(WARRANTIES_URL)

        assert response.status_code == 200
        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == str(mine.id)

    def test_filter_by_status(self, user_client, make_warranty, regular_user, product):
        make_warranty(regular_user, product, 100)
        expired = make_warranty(regular_user, product, -5)

        response = user_client.get(WARRANTIES_URL, {'status': 'expired'})

        assert response.status_code == 200
        assert [w['id'] for w in response.data['results']] == [str(expired.id)]

    def test_invalid_status_filter(self, user_client):
        response = user_client.get(WARRANTIES_URL, {'status': 'bogus'})

        assert response.status_code == 400

    def test_default_sort_is_expiration_ascending(self, user_client, make_warranty, regular_user, product):
        late = make_warranty(regular_user, product, 300)
        early = make_warranty(regular_user, product, 3)

        response = user_client.get(WARRANTIES_URL)

        assert [w['id'] for w in response.data['results']] == [str(early.id), str(late.id)]

    def test_sort_newest(self, user_client, make_warranty, regular_user, product):
        first = make_warranty(regular_user, product, 3)
        second = make_warranty(regular_user, product, 300)

        response = user_client.get(WARRANTIES_URL, {'sort': 'newest'})

        assert [w['id'] for w in response.data['results']] == [str(second.id), str(first.id)]


@pytest.mark.django_db
class TestWarrantyDetail:

    def test_owner_can_retrieve(self, user_client, warranty):
        response = user_client.get(detail_url(warranty.id))

        assert response.status_code == 200
        assert response.data['product_name'] == 'Laptop Pro 14'
        assert response.data['category_name'] == 'Electronics'
        assert response.data['current_status'] == WarrantyStatus.ACTIVE
        assert response.data['documents'] == []

    def test_other_user_forbidden(self, other_user_client, warranty):
        response = other_user_client.get(detail_url(warranty.id))

        assert response.status_code == 403
        assert response.data['error_type'] == 'access_denied'

    def test_admin_can_retrieve(self, admin_client, warranty):
        response = admin_client.get(detail_url(warranty.id))

        assert response.status_code == 200

    def test_missing_is_404(self, user_client):
        response = user_client.get(detail_url('00000000-0000-0000-0000-000000000000'))

        assert response.status_code == 404

    def test_stale_status_exposed_with_current_status(self, user_client, warranty):
        Warranty.objects.filter(pk=warranty.pk).update(
            expiration_date=timezone.localdate() - timedelta(days=1)
        )

        response = user_client.get(detail_url(warranty.id))

        assert response.data['status'] == WarrantyStatus.ACTIVE
        assert response.data['current_status'] == WarrantyStatus.EXPIRED


@pytest.mark.django_db
class TestWarrantyUpdate:

    def test_put_is_partial_and_recomputes_status(self, user_client, warranty):
        response = user_client.put(
            detail_url(warranty.id),
            {'expiration_date': days_from_today(20), 'status': 'expired'},
            format='json'
        )

        assert response.status_code == 200
        assert response.data['status'] == WarrantyStatus.EXPIRING
        assert response.data['warranty_provider'] == 'Acme Care'

    def test_patch_validates_against_stored_purchase_date(self, user_client, warranty):
        before_purchase = (warranty.purchase_date - timedelta(days=1)).isoformat()

        response = user_client.patch(
            detail_url(warranty.id),
            {'expiration_date': before_purchase},
            format='json'
        )

        assert response.status_code == 400

    def test_other_user_cannot_update(self, other_user_client, warranty):
        response = other_user_client.patch(
            detail_url(warranty.id), {'notes': 'mine now'}, format='json'
        )

        assert response.status_code == 403
        warranty.refresh_from_db()
        assert warranty.notes == ''

    def test_admin_update_is_audited(self, admin_client, admin_user, warranty):
        response = admin_client.patch(
            detail_url(warranty.id), {'warranty_provider': 'Other Care'}, format='json'
        )

        assert response.status_code == 200
        log = AuditLog.objects.get(resource_type='warranty', action='update')
        assert log.admin_user == admin_user
        assert log.resource_id == str(warranty.id)
        assert log.details['changed_fields'] == ['warranty_provider']

    def test_owner_update_not_audited(self, user_client, warranty):
        user_client.patch(detail_url(warranty.id), {'warranty_provider': 'X'}, format='json')

        assert not AuditLog.objects.exists()


@pytest.mark.django_db
class TestWarrantyDelete:

    def test_owner_can_delete(self, user_client, warranty):
        response = user_client.delete(detail_url(warranty.id))

        assert response.status_code == 204
        assert not Warranty.objects.filter(pk=warranty.pk).exists()

    def test_other_user_cannot_delete(self, other_user_client, warranty):
        response = other_user_client.delete(detail_url(warranty.id))

        assert response.status_code == 403
        assert Warranty.objects.filter(pk=warranty.pk).exists()

    def test_admin_delete_is_audited(self, admin_client, warranty):
        response = admin_client.delete(detail_url(warranty.id))

        assert response.status_code == 204
        assert AuditLog.objects.filter(
            resource_type='warranty', action='delete', resource_id=str(warranty.id)
        ).exists()


@pytest.mark.django_db
class TestStatsOverview:

    def test_overview(self, user_client, make_warranty, regular_user, other_user, product, appliance):
        make_warranty(regular_user, product, 5)
        make_warranty(regular_user, appliance, 40)
        make_warranty(regular_user, product, -2)
        make_warranty(other_user, product, 5)

        response = user_client.get(f'{WARRANTIES_URL}stats/overview/')

        assert response.status_code == 200
        assert response.data == {
            'totalCount': 3,
            'activeCount': 1,
            'expiringCount': 1,
            'expiredCount': 1,
            'categoryCounts': {'Electronics': 2, 'Appliances': 1},
        }

    def test_overview_empty(self, user_client):
        response = user_client.get(f'{WARRANTIES_URL}stats/overview/')

        assert response.status_code == 200
        assert response.data['totalCount'] == 0
        assert response.data['categoryCounts'] == {}

    def test_aggregation_failure_is_500(self, user_client, monkeypatch):
        from apps.warranties import views
        from apps.warranties.services import AggregationError

        def fail(user):
            raise AggregationError('Aggregation query "user_totals" failed')

        monkeypatch.setattr(views, 'get_user_overview', fail)

        response = user_client.get(f'{WARRANTIES_URL}stats/overview/')

        assert response.status_code == 500
        assert response.data['error_type'] == 'aggregation_failed'


@pytest.mark.django_db
class TestExpiringEndpoint:

    def test_own_expiring_sorted(self, user_client, make_warranty, regular_user, other_user, product):
        later = make_warranty(regular_user, product, 20)
        sooner = make_warranty(regular_user, product, 1)
        make_warranty(regular_user, product, 200)
        make_warranty(other_user, product, 2)

        response = user_client.get(f'{WARRANTIES_URL}expiring/')

        assert response.status_code == 200
        assert [w['id'] for w in response.data] == [str(sooner.id), str(later.id)]

    def test_admin_scope_all(self, admin_client, make_warranty, regular_user, other_user, product):
        make_warranty(regular_user, product, 20)
        make_warranty(other_user, product, 2)

        response = admin_client.get(f'{WARRANTIES_URL}expiring/', {'scope': 'all'})

        assert response.status_code == 200
        assert len(response.data) == 2

    def test_scope_all_ignored_for_regular_user(self, user_client, make_warranty, other_user, product):
        make_warranty(other_user, product, 2)

        response = user_client.get(f'{WARRANTIES_URL}expiring/', {'scope': 'all'})

        assert response.status_code == 200
        assert response.data == []
