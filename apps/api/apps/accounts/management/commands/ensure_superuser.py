"""
Management command to ensure an admin account exists (for container startup).
"""
import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.accounts.models import RoleChoices


class Command(BaseCommand):
    help = 'Create the bootstrap admin user if it does not exist'

    def handle(self, *args, **options):
        User = get_user_model()

        email = os.environ.get('DJANGO_SUPERUSER_EMAIL', 'admin@example.com')
        password = os.environ.get('DJANGO_SUPERUSER_PASSWORD', 'admin123dev')

        user = User.objects.filter(email=email).first()
        if user is None:
            User.objects.create_superuser(email=email, password=password, name='Administrator')
            self.stdout.write(self.style.SUCCESS(f'Admin "{email}" created'))
        elif user.role != RoleChoices.ADMIN:
            user.role = RoleChoices.ADMIN
            user.save(update_fields=['role', 'updated_at'])
            self.stdout.write(self.style.WARNING(f'User "{email}" promoted to admin'))
        else:
            self.stdout.write(self.style.WARNING(f'Admin "{email}" already exists'))
