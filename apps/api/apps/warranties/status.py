"""
Warranty lifecycle status engine.

A warranty is classified from its expiration date relative to "today":

    expiration < today                      -> expired
    today <= expiration <= today + window   -> expiring
    expiration > today + window             -> active

The branches are evaluated in that order. Dates are compared at calendar-day
granularity in the server's configured timezone.
"""
from datetime import date, datetime, timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.dateparse import parse_date
from django.utils.translation import gettext_lazy as _

EXPIRING_WINDOW_DAYS = 30


class WarrantyStatus(models.TextChoices):
    """Lifecycle status of a warranty."""
    ACTIVE = 'active', _('Active')
    EXPIRING = 'expiring', _('Expiring')
    EXPIRED = 'expired', _('Expired')


def get_expiring_window_days() -> int:
    """Expiring window in days (WARRANTY_EXPIRING_WINDOW_DAYS setting, default 30)."""
    return int(getattr(settings, 'WARRANTY_EXPIRING_WINDOW_DAYS', EXPIRING_WINDOW_DAYS))


def _as_date(value) -> date:
    if value is None:
        raise ValueError('expiration_date is required')
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f'Invalid date: {value!r}')
        return parsed
    raise ValueError(f'Invalid date: {value!r}')


def compute_status(expiration_date, today=None) -> WarrantyStatus:
    """
    Derive the status for ``expiration_date``.

    Args:
        expiration_date: date, datetime or ISO date string
        today: evaluation date (defaults to the current local date)

    Raises:
        ValueError: if expiration_date is missing or not a valid date
    """
    expiration = _as_date(expiration_date)
    today = _as_date(today) if today is not None else timezone.localdate()

    if expiration < today:
        return WarrantyStatus.EXPIRED
    if expiration <= today + timedelta(days=get_expiring_window_days()):
        return WarrantyStatus.EXPIRING
    return WarrantyStatus.ACTIVE
