"""
Service info lookups.
"""
from typing import Optional

from apps.products.models import Product
from .models import ServiceInfo


def get_company_service_info(company):
    """Active company-level records (no product) for ``company``."""
    return ServiceInfo.objects.filter(
        company=company,
        product__isnull=True,
        is_active=True
    ).order_by('-created_at')


def get_service_info_for_product(product: Product) -> Optional[ServiceInfo]:
    """
    Service info that applies to ``product``.

    The product's own active record wins; otherwise the active company-level
    record for the product's manufacturer. None when neither exists.
    """
    service_info = (
        ServiceInfo.objects.filter(product=product, is_active=True)
        .order_by('-created_at')
        .first()
    )
    if service_info is None:
        service_info = get_company_service_info(product.manufacturer).first()
    return service_info
