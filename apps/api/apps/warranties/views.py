"""Warranty views: CRUD, documents, stats and expiring-soon list."""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers, status, viewsets
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Warranty, WarrantyDocument
from .serializers import (
    DocumentUploadSerializer,
    WarrantyDocumentSerializer,
    WarrantySerializer,
)
from .services import (
    AggregationError,
    DocumentValidationError,
    WarrantyAccessDenied,
    add_document,
    create_warranty,
    delete_warranty,
    ensure_warranty_access,
    get_expiring_soon,
    get_user_overview,
    remove_document,
    update_warranty,
)
from .status import WarrantyStatus

WARRANTY_SORTS = {
    'expiringSoon': ['expiration_date', 'created_at'],
    'newest': ['-created_at'],
    'oldest': ['created_at'],
}

SERVICE_ERRORS = (
    (WarrantyAccessDenied, status.HTTP_403_FORBIDDEN, 'access_denied'),
    (DocumentValidationError, status.HTTP_400_BAD_REQUEST, 'invalid_document'),
    (AggregationError, status.HTTP_500_INTERNAL_SERVER_ERROR, 'aggregation_failed'),
)


class ServiceErrorMixin:
    """Translate service-layer exceptions into `{error, error_type}` responses."""

    def handle_exception(self, exc):
        for error_class, status_code, error_type in SERVICE_ERRORS:
            if isinstance(exc, error_class):
                return Response(
                    {'error': str(exc), 'error_type': error_type},
                    status=status_code
                )
        return super().handle_exception(exc)


class WarrantyViewSet(ServiceErrorMixin, viewsets.ModelViewSet):
    """
    Warranties of the authenticated user.

    List query params:
    - status: active | expiring | expired
    - sort: expiringSoon (default) | newest | oldest

    Detail routes are open to the owner and to admins; anyone else gets 403.
    PUT behaves like PATCH.
    """

    serializer_class = WarrantySerializer
    permission_classes = [IsAuthenticated]
    search_fields = ['warranty_provider', 'product__name']

    def get_queryset(self):
        queryset = Warranty.objects.select_related('product__category', 'user').prefetch_related('documents')

        if self.action != 'list':
            return queryset

        queryset = queryset.filter(user=self.request.user)

        status_filter = self.request.query_params.get('status')
        if status_filter:
            if status_filter not in WarrantyStatus.values:
                raise serializers.ValidationError({
                    'status': f'Must be one of: {", ".join(WarrantyStatus.values)}'
                })
            queryset = queryset.filter(status=status_filter)

        sort = self.request.query_params.get('sort', 'expiringSoon')
        return queryset.order_by(*WARRANTY_SORTS.get(sort, WARRANTY_SORTS['expiringSoon']))

    def get_object(self):
        warranty = super().get_object()
        ensure_warranty_access(self.request.user, warranty)
        return warranty

    def perform_create(self, serializer):
        serializer.instance = create_warranty(self.request.user, serializer.validated_data)

    def update(self, request, *args, **kwargs):
        kwargs['partial'] = True
        return super().update(request, *args, **kwargs)

    def perform_update(self, serializer):
        serializer.instance = update_warranty(
            serializer.instance,
            self.request.user,
            serializer.validated_data,
            request=self.request
        )

    def perform_destroy(self, instance):
        delete_warranty(instance, self.request.user, request=self.request)

    @action(detail=False, methods=['get'], url_path='stats/overview')
    def stats_overview(self, request):
        """
        Warranty totals and category breakdown for the current user.

        GET /api/v1/warranties/stats/overview/
        """
        return Response(get_user_overview(request.user))

    @action(detail=False, methods=['get'], url_path='expiring')
    def expiring(self, request):
        """
        Warranties with status `expiring`, soonest first.

        GET /api/v1/warranties/expiring/
        Admins may pass ?scope=all for the system-wide list.
        """
        if request.query_params.get('scope') == 'all' and request.user.is_admin:
            warranties = get_expiring_soon()
        else:
            warranties = get_expiring_soon(user=request.user)

        serializer = self.get_serializer(warranties, many=True)
        return Response(serializer.data)

    @action(
        detail=True,
        methods=['post'],
        url_path='documents',
        parser_classes=[MultiPartParser, FormParser]
    )
    def upload_document(self, request, pk=None):
        """
        Attach a document (multipart field `document`).

        POST /api/v1/warranties/{id}/documents/
        """
        warranty = self.get_object()

        upload = DocumentUploadSerializer(data=request.data)
        upload.is_valid(raise_exception=True)

        document = add_document(warranty, upload.validated_data['document'], request.user)
        return Response(
            WarrantyDocumentSerializer(document).data,
            status=status.HTTP_201_CREATED
        )

    @action(detail=True, methods=['delete'], url_path=r'documents/(?P<document_id>[^/.]+)')
    def delete_document(self, request, pk=None, document_id=None):
        """
        Remove a document.

        DELETE /api/v1/warranties/{id}/documents/{document_id}/
        """
        warranty = self.get_object()

        try:
            remove_document(warranty, document_id, request.user)
        except (WarrantyDocument.DoesNotExist, DjangoValidationError):
            return Response(
                {'error': 'Document not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
