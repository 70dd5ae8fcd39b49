"""
Warranty models: warranty records and their supporting documents.
"""
import uuid
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.observability import metrics
from .status import WarrantyStatus, compute_status


class Warranty(models.Model):
    """
    User-owned warranty for a product.

    INVARIANT: `status` is derived from `expiration_date` and overwritten on
    every save(). Clients never set it. A record that is not re-saved keeps
    the status it had at its last write; `current_status` gives the live value.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='warranties'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.PROTECT,
        related_name='warranties'
    )

    purchase_date = models.DateField(_('Purchase Date'))
    expiration_date = models.DateField(_('Expiration Date'))
    warranty_provider = models.CharField(_('Warranty Provider'), max_length=255)
    warranty_number = models.CharField(_('Warranty Number'), max_length=255)
    coverage_details = models.TextField(_('Coverage Details'))
    notes = models.TextField(_('Notes'), blank=True)

    status = models.CharField(
        _('Status'),
        max_length=10,
        choices=WarrantyStatus.choices,
        default=WarrantyStatus.ACTIVE,
        editable=False
    )

    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'warranties'
        verbose_name = _('Warranty')
        verbose_name_plural = _('Warranties')
        ordering = ['expiration_date', 'created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='idx_warranty_user_status'),
            models.Index(fields=['status', 'expiration_date'], name='idx_warranty_status_exp'),
            models.Index(fields=['created_at'], name='idx_warranty_created'),
        ]

    def __str__(self):
        return f"{self.warranty_provider} #{self.warranty_number} ({self.status})"

    @property
    def current_status(self):
        """Status as of today, without persisting it."""
        return compute_status(self.expiration_date)

    def save(self, *args, **kwargs):
        previous_status = None if self._state.adding else self.status
        self.status = compute_status(self.expiration_date)

        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'status' not in update_fields:
            kwargs['update_fields'] = list(update_fields) + ['status']

        super().save(*args, **kwargs)

        metrics.warranty_status_computed_total.labels(status=self.status).inc()
        if previous_status and previous_status != self.status:
            metrics.warranty_status_transitions_total.labels(
                from_status=previous_status,
                to_status=self.status
            ).inc()


def warranty_document_upload_to(instance, filename):
    return f"warranty_documents/{instance.warranty_id}/{uuid.uuid4().hex}_{filename}"


class WarrantyDocument(models.Model):
    """
    File attached to a warranty (receipt, certificate, ...).

    Documents are append/remove only. Ordering is by upload time.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    warranty = models.ForeignKey(
        Warranty,
        on_delete=models.CASCADE,
        related_name='documents'
    )
    name = models.CharField(_('Original Filename'), max_length=255)
    file = models.FileField(_('File'), upload_to=warranty_document_upload_to, max_length=500)
    content_type = models.CharField(_('Content Type'), max_length=100, blank=True)
    size_bytes = models.PositiveIntegerField(_('Size (bytes)'), default=0)
    upload_date = models.DateTimeField(_('Upload Date'), auto_now_add=True)

    class Meta:
        db_table = 'warranty_documents'
        verbose_name = _('Warranty Document')
        verbose_name_plural = _('Warranty Documents')
        ordering = ['upload_date']

    def __str__(self):
        return self.name
