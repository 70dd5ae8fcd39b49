"""Warranty admin."""
from django.contrib import admin
from .models import Warranty, WarrantyDocument


class WarrantyDocumentInline(admin.TabularInline):
    model = WarrantyDocument
    extra = 0
    readonly_fields = ['name', 'file', 'content_type', 'size_bytes', 'upload_date']


@admin.register(Warranty)
class WarrantyAdmin(admin.ModelAdmin):
    list_display = [
        'warranty_number', 'warranty_provider', 'product', 'user',
        'expiration_date', 'status', 'created_at'
    ]
    list_filter = ['status', 'expiration_date', 'created_at']
    search_fields = ['warranty_number', 'warranty_provider', 'product__name', 'user__email']
    readonly_fields = ['status', 'created_at', 'updated_at']
    date_hierarchy = 'expiration_date'
    ordering = ['expiration_date']
    inlines = [WarrantyDocumentInline]
