"""
Warranty services.

Write side: create/update/delete warranties and manage their documents.
Read side (aggregations): per-user totals, category breakdown and the
expiring-soon list. Every aggregation is a fresh query over the stored
records; nothing is cached or precomputed.
"""
import logging
from functools import wraps
from typing import Dict, List, Optional

from django.conf import settings
from django.db import DatabaseError, transaction
from django.db.models import Count

from apps.core.observability import metrics
from apps.core.observability.events import (
    log_aggregation_failure,
    log_document_event,
    log_document_rejected,
    log_warranty_deleted,
    log_warranty_saved,
)
from apps.ops.models import AuditActionChoices, AuditResourceChoices, log_admin_action
from .models import Warranty, WarrantyDocument
from .status import WarrantyStatus

logger = logging.getLogger(__name__)

ALLOWED_DOCUMENT_TYPES = {
    'image/jpeg',
    'image/png',
    'image/jpg',
    'application/pdf',
    'application/msword',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
}

DEFAULT_UPLOAD_MAX_BYTES = 5 * 1024 * 1024


class WarrantyAccessDenied(Exception):
    """Raised when a user acts on a warranty they neither own nor administer."""
    pass


class DocumentValidationError(Exception):
    """Raised when an uploaded document is rejected (size/type)."""
    pass


class AggregationError(Exception):
    """Raised when an aggregation query fails. No partial results are returned."""
    pass


# ============================================================================
# Access
# ============================================================================

def ensure_warranty_access(user, warranty: Warranty) -> None:
    """Raise WarrantyAccessDenied unless ``user`` owns the warranty or is an admin."""
    if user.is_admin or warranty.user_id == user.id:
        return
    raise WarrantyAccessDenied('Not authorized to access this warranty')


def _audit_if_admin_acting_on_other(actor, warranty, action, details=None, request=None):
    if actor.is_admin and warranty.user_id != actor.id:
        log_admin_action(
            actor,
            action,
            AuditResourceChoices.WARRANTY,
            warranty.pk,
            details=details,
            request=request,
        )


# ============================================================================
# Warranty writes
# ============================================================================

def create_warranty(user, data: Dict) -> Warranty:
    """
    Create a warranty owned by ``user``.

    `status` is never taken from ``data``; Warranty.save() derives it.
    """
    data = {k: v for k, v in data.items() if k != 'status'}
    warranty = Warranty.objects.create(user=user, **data)
    log_warranty_saved(warranty, created=True)
    return warranty


def update_warranty(warranty: Warranty, actor, data: Dict, request=None) -> Warranty:
    """
    Apply a partial update and re-derive the status.

    Raises:
        WarrantyAccessDenied: actor is neither the owner nor an admin
    """
    ensure_warranty_access(actor, warranty)

    previous_status = warranty.status
    changed_fields = []
    for field, value in data.items():
        if field == 'status':
            continue
        setattr(warranty, field, value)
        changed_fields.append(field)

    warranty.save()
    log_warranty_saved(warranty, created=False, previous_status=previous_status)

    _audit_if_admin_acting_on_other(
        actor,
        warranty,
        AuditActionChoices.UPDATE,
        details={'changed_fields': sorted(changed_fields), 'status': warranty.status},
        request=request,
    )
    return warranty


def _delete_document_file(document: WarrantyDocument) -> bool:
    """Delete the stored file. Returns False if it was already missing."""
    name = document.file.name
    if not name:
        return False
    storage = document.file.storage
    if not storage.exists(name):
        logger.warning(
            'Warranty document file missing on delete',
            extra={'document_id': str(document.id), 'warranty_id': str(document.warranty_id)}
        )
        return False
    storage.delete(name)
    return True


def delete_warranty_files(warranty: Warranty):
    """
    Delete the stored files of every document on ``warranty``.

    Document rows are left in place. Returns (documents, files_missing).
    """
    documents = list(warranty.documents.all())
    files_missing = 0
    for document in documents:
        if _delete_document_file(document):
            metrics.warranty_documents_total.labels(action='delete', result='success').inc()
        else:
            files_missing += 1
            metrics.warranty_documents_total.labels(action='delete', result='missing_file').inc()
    return len(documents), files_missing


def delete_warranty(warranty: Warranty, actor, request=None) -> None:
    """
    Delete a warranty: stored document files first, then the record
    (document rows cascade).

    Raises:
        WarrantyAccessDenied: actor is neither the owner nor an admin
    """
    ensure_warranty_access(actor, warranty)

    warranty_id = warranty.pk
    documents_removed, files_missing = delete_warranty_files(warranty)

    with transaction.atomic():
        _audit_if_admin_acting_on_other(
            actor,
            warranty,
            AuditActionChoices.DELETE,
            details={'owner_id': str(warranty.user_id), 'documents_removed': documents_removed},
            request=request,
        )
        warranty.delete()

    log_warranty_deleted(warranty_id, documents_removed=documents_removed, files_missing=files_missing)


# ============================================================================
# Documents
# ============================================================================

def get_upload_max_bytes() -> int:
    return int(getattr(settings, 'UPLOAD_MAX_BYTES', DEFAULT_UPLOAD_MAX_BYTES))


def add_document(warranty: Warranty, uploaded_file, actor) -> WarrantyDocument:
    """
    Attach an uploaded file to a warranty.

    Raises:
        WarrantyAccessDenied: actor is neither the owner nor an admin
        DocumentValidationError: file too large or type not allowed
    """
    ensure_warranty_access(actor, warranty)

    max_bytes = get_upload_max_bytes()
    if uploaded_file.size > max_bytes:
        metrics.warranty_documents_total.labels(action='upload', result='rejected').inc()
        log_document_rejected(warranty.pk, 'too_large', size_bytes=uploaded_file.size)
        raise DocumentValidationError(
            f'File too large: {uploaded_file.size} bytes (max {max_bytes})'
        )

    content_type = getattr(uploaded_file, 'content_type', '') or ''
    if content_type not in ALLOWED_DOCUMENT_TYPES:
        metrics.warranty_documents_total.labels(action='upload', result='rejected').inc()
        log_document_rejected(warranty.pk, 'invalid_type', content_type=content_type)
        raise DocumentValidationError(
            'Invalid file type. Only JPEG, PNG, PDF, and Word documents are allowed.'
        )

    document = WarrantyDocument(
        warranty=warranty,
        name=uploaded_file.name,
        content_type=content_type,
        size_bytes=uploaded_file.size,
    )
    document.file.save(uploaded_file.name, uploaded_file, save=False)
    document.save()

    metrics.warranty_documents_total.labels(action='upload', result='success').inc()
    log_document_event(document, 'uploaded', content_type=content_type, size_bytes=document.size_bytes)
    return document


def remove_document(warranty: Warranty, document_id, actor) -> None:
    """
    Remove one document from a warranty (file and record).

    Raises:
        WarrantyAccessDenied: actor is neither the owner nor an admin
        WarrantyDocument.DoesNotExist: no such document on this warranty
    """
    ensure_warranty_access(actor, warranty)

    document = warranty.documents.get(pk=document_id)
    file_removed = _delete_document_file(document)

    result = 'success' if file_removed else 'missing_file'
    metrics.warranty_documents_total.labels(action='delete', result=result).inc()
    log_document_event(document, 'removed', result='success' if file_removed else 'warning')

    document.delete()


# ============================================================================
# Aggregations
# ============================================================================

def aggregation_query(query_name):
    """
    Decorator for read-side aggregation queries.

    Times the query and turns database failures into AggregationError
    (logged and counted). No retry, no partial result.
    """
    def decorator(func):
        @metrics.track_duration(metrics.aggregation_query_duration_seconds, query=query_name)
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError as e:
                metrics.aggregation_failures_total.labels(query=query_name).inc()
                log_aggregation_failure(query_name, e)
                raise AggregationError(f'Aggregation query "{query_name}" failed') from e
        return wrapper
    return decorator


def count_by_status(queryset) -> Dict[str, int]:
    """
    Count warranties in ``queryset`` per status.

    Returns {'total', 'active', 'expiring', 'expired'}; total is the sum of
    the three status counts.
    """
    counts = {status: 0 for status in WarrantyStatus.values}
    rows = queryset.order_by().values('status').annotate(count=Count('id'))
    for row in rows:
        counts[row['status']] = row['count']
    return {'total': sum(counts.values()), **counts}


@aggregation_query('user_totals')
def get_user_totals(user) -> Dict[str, int]:
    """Per-user warranty totals by persisted status. Zero warranties -> all zeros."""
    return count_by_status(Warranty.objects.filter(user=user))


@aggregation_query('category_breakdown')
def get_category_breakdown(user) -> Dict[str, int]:
    """
    {category name: warranty count} for a user's warranties.

    Warranties whose product has no resolvable category are omitted.
    """
    rows = (
        Warranty.objects.filter(user=user, product__category__isnull=False)
        .order_by()
        .values('product__category__name')
        .annotate(count=Count('id'))
    )
    return {row['product__category__name']: row['count'] for row in rows}


@aggregation_query('expiring_soon')
def get_expiring_soon(user=None, limit: Optional[int] = None) -> List[Warranty]:
    """
    Warranties whose persisted status is `expiring`, soonest first.

    user=None returns the system-wide list. Ties on expiration_date keep
    creation order.
    """
    queryset = Warranty.objects.filter(status=WarrantyStatus.EXPIRING)
    if user is not None:
        queryset = queryset.filter(user=user)
    queryset = queryset.select_related('product__category', 'user').order_by(
        'expiration_date', 'created_at'
    )
    if limit:
        queryset = queryset[:limit]
    return list(queryset)


def get_user_overview(user) -> Dict:
    """Stats payload for GET /warranties/stats/overview/."""
    totals = get_user_totals(user)
    return {
        'totalCount': totals['total'],
        'activeCount': totals[WarrantyStatus.ACTIVE],
        'expiringCount': totals[WarrantyStatus.EXPIRING],
        'expiredCount': totals[WarrantyStatus.EXPIRED],
        'categoryCounts': get_category_breakdown(user),
    }
