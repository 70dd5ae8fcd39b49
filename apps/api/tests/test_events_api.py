"""
Event API tests (/api/v1/events/).
"""
from datetime import datetime, timedelta

import pytest
from django.utils import timezone

from apps.events.models import Event

EVENTS_URL = '/api/v1/events/'


def aware(*args):
    return timezone.make_aware(datetime(*args))


@pytest.fixture
def make_event(db):
    def _make(user, start, end=None, **fields):
        return Event.objects.create(
            user=user,
            title=fields.pop('title', 'Service visit'),
            start_date=start,
            end_date=end or start + timedelta(hours=1),
            **fields
        )
    return _make


@pytest.mark.django_db
class TestEventCrud:

    def test_create(self, user_client, regular_user, product):
        response = user_client.post(EVENTS_URL, {
            'title': 'Warranty ends',
            'event_type': 'warranty',
            'start_date': '2025-03-10T09:00:00Z',
            'end_date': '2025-03-10T10:00:00Z',
            'related_product': str(product.id),
        }, format='json')

        assert response.status_code == 201
        assert response.data['related_product_name'] == 'Laptop Pro 14'
        assert Event.objects.get(pk=response.data['id']).user == regular_user

    def test_end_before_start_rejected(self, user_client):
        response = user_client.post(EVENTS_URL, {
            'title': 'Backwards',
            'start_date': '2025-03-10T10:00:00Z',
            'end_date': '2025-03-10T09:00:00Z',
        }, format='json')

        assert response.status_code == 400
        assert 'end_date' in response.data

    def test_list_only_own(self, user_client, make_event, regular_user, other_user):
        mine = make_event(regular_user, aware(2025, 3, 1, 9))
        make_event(other_user, aware(2025, 3, 1, 9))

        response = user_client.get(EVENTS_URL)

        assert [e['id'] for e in response.data['results']] == [str(mine.id)]

    def test_cannot_touch_other_users_event(self, user_client, make_event, other_user):
        theirs = make_event(other_user, aware(2025, 3, 1, 9))

        assert user_client.get(f'{EVENTS_URL}{theirs.id}/').status_code == 404
        assert user_client.delete(f'{EVENTS_URL}{theirs.id}/').status_code == 404

    def test_update(self, user_client, make_event, regular_user):
        event = make_event(regular_user, aware(2025, 3, 1, 9))

        response = user_client.patch(f'{EVENTS_URL}{event.id}/', {'all_day': True}, format='json')

        assert response.status_code == 200
        assert response.data['all_day'] is True


@pytest.mark.django_db
class TestEventsByMonth:

    def test_events_overlapping_month(self, user_client, make_event, regular_user):
        inside = make_event(regular_user, aware(2025, 3, 15, 9))
        spanning = make_event(regular_user, aware(2025, 2, 25, 9), aware(2025, 3, 2, 9))
        make_event(regular_user, aware(2025, 4, 1, 0))
        make_event(regular_user, aware(2025, 2, 10, 9))

        response = user_client.get(f'{EVENTS_URL}month/2025/3/')

        assert response.status_code == 200
        assert [e['id'] for e in response.data] == [str(spanning.id), str(inside.id)]

    def test_december_rolls_into_next_year(self, user_client, make_event, regular_user):
        event = make_event(regular_user, aware(2025, 12, 31, 22))

        response = user_client.get(f'{EVENTS_URL}month/2025/12/')

        assert [e['id'] for e in response.data] == [str(event.id)]

    def test_invalid_month(self, user_client):
        response = user_client.get(f'{EVENTS_URL}month/2025/13/')

        assert response.status_code == 400

    def test_year_zero_rejected(self, user_client):
        response = user_client.get(f'{EVENTS_URL}month/0000/5/')

        assert response.status_code == 400

    def test_last_representable_month(self, user_client, make_event, regular_user):
        make_event(regular_user, aware(2025, 3, 15, 9))

        response = user_client.get(f'{EVENTS_URL}month/9999/12/')

        assert response.status_code == 200
        assert response.data == []

    def test_first_representable_month(self, user_client):
        response = user_client.get(f'{EVENTS_URL}month/0001/1/')

        assert response.status_code == 200
        assert response.data == []
