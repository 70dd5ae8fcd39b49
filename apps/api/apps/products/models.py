"""
Product models - category catalog and registered products.
"""
import uuid
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _


class Category(models.Model):
    """
    Product category with default warranty/service guidance.

    default_warranty_period is expressed in months.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(_('Name'), max_length=100, unique=True)
    description = models.TextField(_('Description'), blank=True)
    default_warranty_period = models.PositiveIntegerField(
        _('Default Warranty Period (months)'),
        default=12,
        validators=[MinValueValidator(1)]
    )
    service_requirements = models.JSONField(
        _('Service Requirements'),
        default=list,
        blank=True,
        help_text=_('List of recommended service steps')
    )
    service_notes = models.TextField(_('Service Notes'), blank=True)
    is_active = models.BooleanField(_('Active'), default=True)

    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'product_categories'
        ordering = ['name']
        verbose_name = _('Category')
        verbose_name_plural = _('Categories')

    def __str__(self):
        return self.name


class Product(models.Model):
    """
    Product registered in the catalog.

    category uses SET_NULL: a product whose category is removed stays in the
    catalog but no longer resolves to a category in breakdowns.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Basic info
    name = models.CharField(_('Name'), max_length=255)
    description = models.TextField(_('Description'), blank=True)
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products'
    )
    manufacturer = models.CharField(_('Manufacturer'), max_length=255)
    model = models.CharField(_('Model'), max_length=255, blank=True)
    serial_number = models.CharField(_('Serial Number'), max_length=255, blank=True)

    # Purchase
    purchase_date = models.DateField(_('Purchase Date'), null=True, blank=True)
    price = models.DecimalField(
        _('Price'),
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0)]
    )
    specifications = models.JSONField(_('Specifications'), default=dict, blank=True)

    # Status
    is_active = models.BooleanField(_('Active'), default=True)

    # Metadata
    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'products'
        ordering = ['name']
        indexes = [
            models.Index(fields=['name'], name='products_name_idx'),
            models.Index(fields=['manufacturer'], name='products_manufac_idx'),
            models.Index(fields=['category'], name='products_categor_idx'),
        ]
        verbose_name = _('Product')
        verbose_name_plural = _('Products')

    def __str__(self):
        if self.model:
            return f"{self.name} ({self.manufacturer} {self.model})"
        return f"{self.name} ({self.manufacturer})"
