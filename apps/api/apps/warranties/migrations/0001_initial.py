# Initial schema for warranties (warranty, warranty_document)

import uuid
import apps.warranties.models
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Warranty',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('purchase_date', models.DateField(verbose_name='Purchase Date')),
                ('expiration_date', models.DateField(verbose_name='Expiration Date')),
                ('warranty_provider', models.CharField(max_length=255, verbose_name='Warranty Provider')),
                ('warranty_number', models.CharField(max_length=255, verbose_name='Warranty Number')),
                ('coverage_details', models.TextField(verbose_name='Coverage Details')),
                ('notes', models.TextField(blank=True, verbose_name='Notes')),
                ('status', models.CharField(choices=[('active', 'Active'), ('expiring', 'Expiring'), ('expired', 'Expired')], default='active', editable=False, max_length=10, verbose_name='Status')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='warranties', to='products.product')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='warranties', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Warranty',
                'verbose_name_plural': 'Warranties',
                'db_table': 'warranties',
                'ordering': ['expiration_date', 'created_at'],
                'indexes': [
                    models.Index(fields=['user', 'status'], name='idx_warranty_user_status'),
                    models.Index(fields=['status', 'expiration_date'], name='idx_warranty_status_exp'),
                    models.Index(fields=['created_at'], name='idx_warranty_created'),
                ],
            },
        ),
        migrations.CreateModel(
            name='WarrantyDocument',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='Original Filename')),
                ('file', models.FileField(max_length=500, upload_to=apps.warranties.models.warranty_document_upload_to, verbose_name='File')),
                ('content_type', models.CharField(blank=True, max_length=100, verbose_name='Content Type')),
                ('size_bytes', models.PositiveIntegerField(default=0, verbose_name='Size (bytes)')),
                ('upload_date', models.DateTimeField(auto_now_add=True, verbose_name='Upload Date')),
                ('warranty', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='documents', to='warranties.warranty')),
            ],
            options={
                'verbose_name': 'Warranty Document',
                'verbose_name_plural': 'Warranty Documents',
                'db_table': 'warranty_documents',
                'ordering': ['upload_date'],
            },
        ),
    ]
