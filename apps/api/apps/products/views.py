"""Product and category views."""
from django.db.models import ProtectedError
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from apps.accounts.permissions import IsAdminOrReadOnly
from apps.ops.mixins import AuditedAdminWriteMixin
from apps.ops.models import AuditResourceChoices
from .models import Category, Product
from .serializers import CategorySerializer, ProductSerializer

PRODUCT_SORTS = {
    'nameAsc': ['name'],
    'nameDesc': ['-name'],
    'newest': ['-created_at'],
}


class CategoryViewSet(AuditedAdminWriteMixin, viewsets.ModelViewSet):
    """Categories: read for any authenticated user, write for admins."""

    queryset = Category.objects.all()
    serializer_class = CategorySerializer
    permission_classes = [IsAdminOrReadOnly]
    search_fields = ['name']
    ordering = ['name']
    audit_resource_type = AuditResourceChoices.CATEGORY


class ProductViewSet(AuditedAdminWriteMixin, viewsets.ModelViewSet):
    """
    Product catalog.

    Query params (list):
    - category: category name
    - sort: nameAsc (default) | nameDesc | newest
    """

    serializer_class = ProductSerializer
    permission_classes = [IsAdminOrReadOnly]
    search_fields = ['name', 'manufacturer', 'model']
    audit_resource_type = AuditResourceChoices.PRODUCT

    def get_queryset(self):
        queryset = Product.objects.select_related('category')

        if self.action == 'list':
            queryset = queryset.filter(is_active=True)
            category = self.request.query_params.get('category')
            if category:
                queryset = queryset.filter(category__name=category)

        sort = self.request.query_params.get('sort', 'nameAsc')
        return queryset.order_by(*PRODUCT_SORTS.get(sort, PRODUCT_SORTS['nameAsc']))

    def destroy(self, request, *args, **kwargs):
        try:
            return super().destroy(request, *args, **kwargs)
        except ProtectedError:
            return Response(
                {'error': 'Product has warranties and cannot be deleted', 'error_type': 'product_in_use'},
                status=status.HTTP_409_CONFLICT
            )

    @action(detail=False, methods=['get'], url_path='categories')
    def categories(self, request):
        """
        Distinct category names used by active products.

        GET /api/v1/products/categories/
        """
        names = (
            Product.objects.filter(is_active=True, category__isnull=False)
            .values_list('category__name', flat=True)
            .distinct()
            .order_by('category__name')
        )
        return Response(list(names))
