"""
Admin services: dashboard statistics and user management.

The dashboard sections are independent queries; they may observe the data
at slightly different instants when writes are concurrent. A failing
section fails the whole dashboard (AggregationError).
"""
import calendar
from typing import Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Count, Q
from django.db.models.functions import ExtractMonth
from django.utils import timezone

from apps.accounts.models import RoleChoices
from apps.products.models import Product
from apps.warranties.models import Warranty
from apps.warranties.services import aggregation_query, count_by_status, delete_warranty_files
from .models import AuditActionChoices, AuditResourceChoices, log_admin_action

User = get_user_model()


class UserManagementError(Exception):
    """Raised when an admin user operation is not allowed."""
    pass


# ============================================================================
# Dashboard
# ============================================================================

@aggregation_query('dashboard_users')
def get_user_stats() -> Dict[str, int]:
    stats = User.objects.aggregate(
        total=Count('id'),
        admin=Count('id', filter=Q(role=RoleChoices.ADMIN)),
    )
    return {
        'total': stats['total'],
        'admin': stats['admin'],
        'regular': stats['total'] - stats['admin'],
    }


@aggregation_query('dashboard_warranties')
def get_warranty_stats() -> Dict[str, int]:
    return count_by_status(Warranty.objects.all())


@aggregation_query('dashboard_products')
def get_product_stats() -> Dict:
    """Product total plus per-category counts (uncategorized products are omitted)."""
    categories = (
        Product.objects.filter(category__isnull=False)
        .order_by()
        .values('category__name')
        .annotate(count=Count('id'))
        .order_by('category__name')
    )
    return {
        'total': Product.objects.count(),
        'categories': [
            {'name': row['category__name'], 'count': row['count']}
            for row in categories
        ],
    }


@aggregation_query('monthly_histogram')
def get_monthly_histogram(year: Optional[int] = None) -> List[Dict]:
    """
    Warranties created per month of ``year`` (default: current local year).

    Always 12 entries, January to December, zero-filled. Months are bucketed
    in the server's configured timezone.
    """
    year = year if year is not None else timezone.localdate().year
    rows = (
        Warranty.objects.filter(created_at__year=year)
        .annotate(month=ExtractMonth('created_at'))
        .order_by()
        .values('month')
        .annotate(count=Count('id'))
    )
    counts = {row['month']: row['count'] for row in rows}
    return [
        {'month': calendar.month_name[month], 'count': counts.get(month, 0)}
        for month in range(1, 13)
    ]


def get_dashboard_stats(year: Optional[int] = None) -> Dict:
    """Payload for GET /admin/dashboard/stats/."""
    return {
        'userStats': get_user_stats(),
        'warrantyStats': get_warranty_stats(),
        'productStats': get_product_stats(),
        'monthlyData': get_monthly_histogram(year),
    }


# ============================================================================
# Users
# ============================================================================

def update_user_role(user, role, actor, request=None):
    """Set ``user``'s role and audit the change."""
    previous_role = user.role
    user.role = role
    user.save(update_fields=['role', 'updated_at'])

    log_admin_action(
        actor,
        AuditActionChoices.UPDATE,
        AuditResourceChoices.USER,
        user.pk,
        details={'changed_fields': ['role'], 'before': {'role': previous_role}, 'after': {'role': role}},
        request=request,
    )
    return user


def delete_user(user, actor, request=None) -> None:
    """
    Delete a user with their warranties (and stored document files).

    Raises:
        UserManagementError: actor tries to delete their own account
    """
    if user.pk == actor.pk:
        raise UserManagementError('Cannot delete your own account')

    user_id = user.pk
    warranties = list(user.warranties.all())
    documents_removed = 0
    for warranty in warranties:
        removed, _missing = delete_warranty_files(warranty)
        documents_removed += removed

    with transaction.atomic():
        user.delete()
        log_admin_action(
            actor,
            AuditActionChoices.DELETE,
            AuditResourceChoices.USER,
            user_id,
            details={'warranties_removed': len(warranties), 'documents_removed': documents_removed},
            request=request,
        )
