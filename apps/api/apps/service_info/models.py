"""
Service information: warranty/maintenance/support terms per product or company.
"""
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class ServiceTypeChoices(models.TextChoices):
    WARRANTY = 'Warranty', _('Warranty')
    MAINTENANCE = 'Maintenance', _('Maintenance')
    REPAIR = 'Repair', _('Repair')
    SUPPORT = 'Support', _('Support')
    OTHER = 'Other', _('Other')


class ServiceInfo(models.Model):
    """
    Service terms.

    A record with a `product` applies to that product. A record without one is
    company-level and applies to every product whose manufacturer equals
    `company`.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(_('Name'), max_length=255)
    description = models.TextField(_('Description'))
    service_type = models.CharField(
        _('Service Type'),
        max_length=20,
        choices=ServiceTypeChoices.choices
    )
    terms = models.TextField(_('Terms'))
    contact_info = models.JSONField(
        _('Contact Info'),
        default=dict,
        blank=True,
        help_text=_('email, phone, website, address')
    )
    warranty_info = models.JSONField(
        _('Warranty Info'),
        default=dict,
        blank=True,
        help_text=_('duration, coverage, exclusions')
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='service_info'
    )
    company = models.CharField(_('Company'), max_length=255)
    is_active = models.BooleanField(_('Active'), default=True)

    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'service_info'
        verbose_name = _('Service Info')
        verbose_name_plural = _('Service Info')
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['product'], name='idx_service_info_product'),
            models.Index(fields=['company', 'is_active'], name='idx_service_info_company'),
        ]

    def __str__(self):
        return f"{self.name} ({self.service_type})"
