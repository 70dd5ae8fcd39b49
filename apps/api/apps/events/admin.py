"""Event admin."""
from django.contrib import admin
from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['title', 'event_type', 'user', 'start_date', 'end_date', 'all_day']
    list_filter = ['event_type', 'all_day']
    search_fields = ['title', 'user__email']
    date_hierarchy = 'start_date'
    ordering = ['-start_date']
