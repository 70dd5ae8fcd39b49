"""
Ops models: admin audit log.
"""
import uuid
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.observability import log_domain_event, metrics
from apps.core.observability.logging import sanitize_dict


class AuditActionChoices(models.TextChoices):
    """Admin actions recorded in the audit log."""
    CREATE = 'create', _('Create')
    UPDATE = 'update', _('Update')
    DELETE = 'delete', _('Delete')


class AuditResourceChoices(models.TextChoices):
    """Resources an admin can mutate."""
    USER = 'user', _('User')
    PRODUCT = 'product', _('Product')
    CATEGORY = 'category', _('Category')
    WARRANTY = 'warranty', _('Warranty')
    SERVICE_INFO = 'service_info', _('Service Info')


class AuditLog(models.Model):
    """
    Append-only trail of admin mutations.

    Fields:
    - admin_user: who made the change (kept as null if the admin is later deleted)
    - action: create|update|delete
    - resource_type / resource_id: what was changed
    - details: sanitized JSON snapshot (changed fields, before/after)
    - ip_address / user_agent: request metadata
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    admin_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name='audit_logs',
        help_text='Admin who performed the action'
    )
    action = models.CharField(max_length=10, choices=AuditActionChoices.choices)
    resource_type = models.CharField(max_length=30, choices=AuditResourceChoices.choices)
    resource_id = models.CharField(max_length=64)
    details = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    ip_address = models.GenericIPAddressField(blank=True, null=True)
    user_agent = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = 'audit_log'
        verbose_name = _('Audit Log')
        verbose_name_plural = _('Audit Logs')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['admin_user', '-created_at'], name='idx_audit_admin_created'),
            models.Index(fields=['resource_type', 'action'], name='idx_audit_resource_action'),
            models.Index(fields=['-created_at'], name='idx_audit_created'),
        ]

    def __str__(self):
        return f"{self.action} {self.resource_type}:{self.resource_id}"


def log_admin_action(
    admin_user,
    action,
    resource_type,
    resource_id,
    details=None,
    request=None
):
    """
    Create an audit log entry for an admin mutation.

    Args:
        admin_user: User performing the action
        action: AuditActionChoices value
        resource_type: AuditResourceChoices value
        resource_id: primary key of the changed resource
        details: Dict snapshot (sensitive keys are redacted before storing)
        request: Django/DRF request (to capture IP/user-agent)

    Returns:
        AuditLog instance
    """
    ip_address = None
    user_agent = ''
    if request is not None:
        ip_address = request.META.get('REMOTE_ADDR') or None
        user_agent = request.META.get('HTTP_USER_AGENT', '')[:255]

    audit_log = AuditLog.objects.create(
        admin_user=admin_user,
        action=action,
        resource_type=resource_type,
        resource_id=str(resource_id),
        details=sanitize_dict(details or {}),
        ip_address=ip_address,
        user_agent=user_agent,
    )

    metrics.admin_audit_logs_total.labels(
        resource_type=resource_type,
        action=action
    ).inc()

    log_domain_event(
        'admin_action',
        entity_type=resource_type,
        entity_id=str(resource_id),
        entity_ids={'audit_log_id': str(audit_log.id)},
        action=action,
    )

    return audit_log
