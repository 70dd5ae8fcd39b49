# Initial schema for service_info

import uuid
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ServiceInfo',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('description', models.TextField(verbose_name='Description')),
                ('service_type', models.CharField(choices=[('Warranty', 'Warranty'), ('Maintenance', 'Maintenance'), ('Repair', 'Repair'), ('Support', 'Support'), ('Other', 'Other')], max_length=20, verbose_name='Service Type')),
                ('terms', models.TextField(verbose_name='Terms')),
                ('contact_info', models.JSONField(blank=True, default=dict, help_text='email, phone, website, address', verbose_name='Contact Info')),
                ('warranty_info', models.JSONField(blank=True, default=dict, help_text='duration, coverage, exclusions', verbose_name='Warranty Info')),
                ('company', models.CharField(max_length=255, verbose_name='Company')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
                ('product', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='service_info', to='products.product')),
            ],
            options={
                'verbose_name': 'Service Info',
                'verbose_name_plural': 'Service Info',
                'db_table': 'service_info',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['product'], name='idx_service_info_product'),
                    models.Index(fields=['company', 'is_active'], name='idx_service_info_company'),
                ],
            },
        ),
    ]
