"""Ops admin."""
from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'admin_user', 'action', 'resource_type', 'resource_id']
    list_filter = ['action', 'resource_type', 'created_at']
    search_fields = ['resource_id', 'admin_user__email']
    readonly_fields = [
        'admin_user', 'action', 'resource_type', 'resource_id',
        'details', 'ip_address', 'user_agent', 'created_at'
    ]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False
