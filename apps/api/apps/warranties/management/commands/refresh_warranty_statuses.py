"""
Management command to rewrite stale warranty statuses.

Usage:
    python manage.py refresh_warranty_statuses [--dry-run]

Warranty.status is only derived when a record is saved, so an untouched
warranty keeps the status it had at its last write. This command finds
records whose stored status no longer matches today's classification and
re-saves them.
"""
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db.models import Q
from django.utils import timezone

from apps.core.observability import log_domain_event, metrics
from apps.warranties.models import Warranty
from apps.warranties.status import WarrantyStatus, get_expiring_window_days


def stale_warranties(today=None):
    """Warranties whose stored status differs from the classification for ``today``."""
    today = today or timezone.localdate()
    window_end = today + timedelta(days=get_expiring_window_days())

    should_be_expired = Q(expiration_date__lt=today)
    should_be_expiring = Q(expiration_date__gte=today, expiration_date__lte=window_end)
    should_be_active = Q(expiration_date__gt=window_end)

    return Warranty.objects.filter(
        (should_be_expired & ~Q(status=WarrantyStatus.EXPIRED))
        | (should_be_expiring & ~Q(status=WarrantyStatus.EXPIRING))
        | (should_be_active & ~Q(status=WarrantyStatus.ACTIVE))
    )


class Command(BaseCommand):
    help = 'Re-save warranties whose stored status is stale'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Report stale warranties without saving them',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']
        stale = stale_warranties()

        refreshed = 0
        for warranty in stale.iterator():
            previous_status = warranty.status
            if dry_run:
                self.stdout.write(
                    f'{warranty.id}: {previous_status} -> {warranty.current_status}'
                )
                refreshed += 1
                continue

            warranty.save(update_fields=['status', 'updated_at'])
            metrics.warranty_status_refreshed_total.inc()
            log_domain_event(
                'warranty_status_refreshed',
                entity_type='Warranty',
                entity_id=str(warranty.id),
                from_status=previous_status,
                to_status=warranty.status,
            )
            refreshed += 1

        verb = 'would be refreshed' if dry_run else 'refreshed'
        self.stdout.write(self.style.SUCCESS(f'{refreshed} warranties {verb}'))
