"""Service info views."""
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.generics import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from apps.accounts.permissions import IsAdmin
from apps.ops.mixins import AuditedAdminWriteMixin
from apps.ops.models import AuditResourceChoices
from apps.products.models import Product
from .models import ServiceInfo
from .serializers import ServiceInfoSerializer
from .services import get_company_service_info, get_service_info_for_product


class ServiceInfoViewSet(AuditedAdminWriteMixin, viewsets.ModelViewSet):
    """
    Service info records.

    List/create/update/delete are admin-only and audit-logged. Retrieval and
    the product/company lookups are open to any authenticated user.
    """

    queryset = ServiceInfo.objects.select_related('product').all()
    serializer_class = ServiceInfoSerializer
    search_fields = ['name', 'company']
    ordering = ['-created_at']
    audit_resource_type = AuditResourceChoices.SERVICE_INFO

    def get_permissions(self):
        if self.action in ('retrieve', 'by_product', 'by_company'):
            return [IsAuthenticated()]
        return [IsAdmin()]

    @action(detail=False, methods=['get'], url_path=r'product/(?P<product_id>[^/.]+)')
    def by_product(self, request, product_id=None):
        """
        Service info for a product, falling back to its manufacturer's record.

        GET /api/v1/service-info/product/{product_id}/
        """
        product = get_object_or_404(Product, pk=product_id)

        service_info = get_service_info_for_product(product)
        if service_info is None:
            return Response(
                {'error': 'Service information not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(self.get_serializer(service_info).data)

    @action(detail=False, methods=['get'], url_path=r'company/(?P<company>[^/]+)')
    def by_company(self, request, company=None):
        """
        Active company-level service info.

        GET /api/v1/service-info/company/{company}/
        """
        records = list(get_company_service_info(company))
        if not records:
            return Response(
                {'error': 'Service information not found'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(self.get_serializer(records, many=True).data)
