"""Event views."""
from datetime import MAXYEAR, MINYEAR, datetime

from django.utils import timezone
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Event
from .serializers import EventSerializer


def month_bounds(year, month):
    """
    Aware [start, end) datetimes of a calendar month in the current timezone.

    end is None for December of the last representable year.
    """
    start = timezone.make_aware(datetime(year, month, 1))
    if month == 12:
        if year == MAXYEAR:
            return start, None
        end = timezone.make_aware(datetime(year + 1, 1, 1))
    else:
        end = timezone.make_aware(datetime(year, month + 1, 1))
    return start, end


class EventViewSet(viewsets.ModelViewSet):
    """Calendar events of the authenticated user."""

    serializer_class = EventSerializer
    permission_classes = [IsAuthenticated]
    search_fields = ['title', 'description']
    ordering = ['start_date']

    def get_queryset(self):
        return Event.objects.filter(user=self.request.user).select_related('related_product')

    def perform_create(self, serializer):
        serializer.save(user=self.request.user)

    @action(detail=False, methods=['get'], url_path=r'month/(?P<year>\d{4})/(?P<month>\d{1,2})')
    def by_month(self, request, year=None, month=None):
        """
        Events overlapping a calendar month.

        GET /api/v1/events/month/{year}/{month}/
        """
        year, month = int(year), int(month)
        if not MINYEAR <= year <= MAXYEAR:
            return Response(
                {'error': f'Year must be between {MINYEAR} and {MAXYEAR}'},
                status=status.HTTP_400_BAD_REQUEST
            )
        if not 1 <= month <= 12:
            return Response(
                {'error': 'Month must be between 1 and 12'},
                status=status.HTTP_400_BAD_REQUEST
            )

        start, end = month_bounds(year, month)
        events = self.get_queryset().filter(end_date__gte=start)
        if end is not None:
            events = events.filter(start_date__lt=end)
        events = events.order_by('start_date')
        return Response(self.get_serializer(events, many=True).data)
