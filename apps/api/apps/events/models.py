"""
Calendar events (service reminders, warranty milestones, ...).
"""
import uuid
from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class EventTypeChoices(models.TextChoices):
    WARRANTY = 'warranty', _('Warranty')
    MAINTENANCE = 'maintenance', _('Maintenance')
    REMINDER = 'reminder', _('Reminder')
    OTHER = 'other', _('Other')


class Event(models.Model):
    """
    User-owned calendar event.

    INVARIANT: end_date >= start_date
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='events'
    )
    title = models.CharField(_('Title'), max_length=255)
    description = models.TextField(_('Description'), blank=True)
    event_type = models.CharField(
        _('Event Type'),
        max_length=20,
        choices=EventTypeChoices.choices,
        default=EventTypeChoices.OTHER
    )
    start_date = models.DateTimeField(_('Start'))
    end_date = models.DateTimeField(_('End'))
    all_day = models.BooleanField(_('All Day'), default=False)
    related_product = models.ForeignKey(
        'products.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='events'
    )

    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'events'
        verbose_name = _('Event')
        verbose_name_plural = _('Events')
        ordering = ['start_date']
        indexes = [
            models.Index(fields=['user', 'start_date'], name='idx_event_user_start'),
        ]

    def __str__(self):
        return self.title
