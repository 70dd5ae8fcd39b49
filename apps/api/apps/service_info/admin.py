"""Service info admin."""
from django.contrib import admin
from .models import ServiceInfo


@admin.register(ServiceInfo)
class ServiceInfoAdmin(admin.ModelAdmin):
    list_display = ['name', 'service_type', 'company', 'product', 'is_active', 'created_at']
    list_filter = ['service_type', 'is_active']
    search_fields = ['name', 'company', 'product__name']
    ordering = ['-created_at']
