"""
Domain events logging helpers.

Provides structured event logging for business operations.
"""
from typing import Dict, Optional
from .logging import get_sanitized_logger, sanitize_dict

logger = get_sanitized_logger(__name__)


def log_domain_event(
    event_name: str,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    entity_ids: Optional[Dict[str, str]] = None,
    result: str = 'success',
    **extra_fields
):
    """
    Log a domain event with structured data.

    Args:
        event_name: Name of the event (e.g., 'warranty_created', 'document_uploaded')
        entity_type: Type of entity (e.g., 'Warranty', 'WarrantyDocument')
        entity_id: ID of primary entity
        entity_ids: Dictionary of related entity IDs
        result: Result of operation (success, failure, etc.)
        **extra_fields: Additional fields to log (will be sanitized)

    Example:
        log_domain_event(
            'warranty_status_changed',
            entity_type='Warranty',
            entity_id=str(warranty.id),
            entity_ids={'product_id': str(warranty.product_id)},
            from_status='active',
            to_status='expiring',
        )
    """
    event_data = {
        'event': event_name,
        'result': result,
    }

    if entity_type:
        event_data['entity_type'] = entity_type

    if entity_id:
        event_data['entity_id'] = entity_id

    if entity_ids:
        event_data.update(entity_ids)

    event_data.update(sanitize_dict(extra_fields))

    # Log at appropriate level based on result
    if result in ['failure', 'error']:
        logger.error(f'Domain event: {event_name}', extra=event_data)
    elif result in ['warning', 'blocked', 'rejected']:
        logger.warning(f'Domain event: {event_name}', extra=event_data)
    else:
        logger.info(f'Domain event: {event_name}', extra=event_data)


def log_warranty_saved(warranty, created, previous_status=None):
    """Log warranty create/update, including any status transition."""
    log_domain_event(
        'warranty_created' if created else 'warranty_updated',
        entity_type='Warranty',
        entity_id=str(warranty.id),
        entity_ids={
            'product_id': str(warranty.product_id),
            'owner_id': str(warranty.user_id),
        },
        status=warranty.status,
    )

    if not created and previous_status and previous_status != warranty.status:
        log_domain_event(
            'warranty_status_changed',
            entity_type='Warranty',
            entity_id=str(warranty.id),
            from_status=previous_status,
            to_status=warranty.status,
        )


def log_warranty_deleted(warranty_id, documents_removed, files_missing=0):
    """Log warranty deletion with its document cleanup counts."""
    log_domain_event(
        'warranty_deleted',
        entity_type='Warranty',
        entity_id=str(warranty_id),
        result='success' if not files_missing else 'warning',
        documents_removed=documents_removed,
        files_missing=files_missing,
    )


def log_document_event(document, action, result='success', **extra):
    """Log warranty document upload/removal."""
    log_domain_event(
        f'warranty_document_{action}',
        entity_type='WarrantyDocument',
        entity_id=str(document.id),
        entity_ids={'warranty_id': str(document.warranty_id)},
        result=result,
        **extra
    )


def log_document_rejected(warranty_id, reason, **extra):
    """Log a rejected document upload (size/type)."""
    log_domain_event(
        'warranty_document_rejected',
        entity_type='Warranty',
        entity_id=str(warranty_id),
        result='rejected',
        reason=reason,
        **extra
    )


def log_aggregation_failure(query_name, error):
    """Log a failed aggregation query."""
    log_domain_event(
        'aggregation_failed',
        result='error',
        query=query_name,
        error_type=error.__class__.__name__,
        error=str(error),
    )
