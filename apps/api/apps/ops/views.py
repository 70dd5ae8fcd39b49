"""Admin views: users, dashboard stats, warranties, activity and audit logs."""
from django.contrib.auth import get_user_model
from rest_framework import generics, mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.permissions import IsAdmin
from apps.accounts.serializers import RoleUpdateSerializer, UserSerializer
from apps.events.models import Event
from apps.warranties.models import Warranty
from apps.warranties.serializers import AdminWarrantySerializer
from apps.warranties.services import AggregationError
from apps.warranties.status import WarrantyStatus
from .models import AuditLog
from .serializers import (
    ActivityEventSerializer,
    AuditLogFilterSerializer,
    AuditLogSerializer,
    DashboardStatsQuerySerializer,
)
from .services import UserManagementError, delete_user, get_dashboard_stats, update_user_role

User = get_user_model()

RECENT_ACTIVITY_LIMIT = 10


class AdminUserViewSet(
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    """
    User management.

    GET    /api/v1/admin/users/
    PUT    /api/v1/admin/users/{id}/role/
    DELETE /api/v1/admin/users/{id}/
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsAdmin]
    search_fields = ['email', 'name']
    ordering = ['-created_at']

    @action(detail=True, methods=['put', 'patch'], url_path='role')
    def role(self, request, pk=None):
        user = self.get_object()

        serializer = RoleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = update_user_role(user, serializer.validated_data['role'], request.user, request=request)
        return Response(UserSerializer(user).data)

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()

        try:
            delete_user(user, request.user, request=request)
        except UserManagementError as e:
            return Response(
                {'error': str(e), 'error_type': 'self_delete'},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)


class DashboardStatsView(APIView):
    """
    GET /api/v1/admin/dashboard/stats/

    Optional ?year=YYYY for the monthly histogram (default: current year).
    """

    permission_classes = [IsAdmin]

    def get(self, request):
        params = DashboardStatsQuerySerializer(data=request.query_params)
        params.is_valid(raise_exception=True)
        year = params.validated_data.get('year')

        try:
            stats = get_dashboard_stats(year)
        except AggregationError as e:
            return Response(
                {'error': str(e), 'error_type': 'aggregation_failed'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(stats)


class AdminWarrantyListView(generics.ListAPIView):
    """
    GET /api/v1/admin/warranties/

    All warranties with owner and product. Optional ?status= filter.
    """

    serializer_class = AdminWarrantySerializer
    permission_classes = [IsAdmin]
    search_fields = ['warranty_provider', 'warranty_number', 'product__name', 'user__email']
    ordering = ['-created_at']

    def get_queryset(self):
        queryset = Warranty.objects.select_related('user', 'product__category').prefetch_related('documents')
        status_filter = self.request.query_params.get('status')
        if status_filter in WarrantyStatus.values:
            queryset = queryset.filter(status=status_filter)
        return queryset


class ActivityView(APIView):
    """
    GET /api/v1/admin/activity/

    The ten most recently created warranties and events.
    """

    permission_classes = [IsAdmin]

    def get(self, request):
        recent_warranties = (
            Warranty.objects.select_related('user', 'product__category')
            .prefetch_related('documents')
            .order_by('-created_at')[:RECENT_ACTIVITY_LIMIT]
        )
        recent_events = (
            Event.objects.select_related('user', 'related_product')
            .order_by('-created_at')[:RECENT_ACTIVITY_LIMIT]
        )

        return Response({
            'recentWarranties': AdminWarrantySerializer(recent_warranties, many=True).data,
            'recentEvents': ActivityEventSerializer(recent_events, many=True).data,
        })


class AuditLogListView(generics.ListAPIView):
    """
    GET /api/v1/admin/logs/

    Query params: admin_id, resource_type, action, start_date, end_date
    (dates inclusive, YYYY-MM-DD). Paginated.
    """

    serializer_class = AuditLogSerializer
    permission_classes = [IsAdmin]
    ordering = ['-created_at']

    def get_queryset(self):
        filters = AuditLogFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        params = filters.validated_data

        queryset = AuditLog.objects.select_related('admin_user')
        if 'admin_id' in params:
            queryset = queryset.filter(admin_user_id=params['admin_id'])
        if 'resource_type' in params:
            queryset = queryset.filter(resource_type=params['resource_type'])
        if 'action' in params:
            queryset = queryset.filter(action=params['action'])
        if 'start_date' in params:
            queryset = queryset.filter(created_at__date__gte=params['start_date'])
        if 'end_date' in params:
            queryset = queryset.filter(created_at__date__lte=params['end_date'])
        return queryset
