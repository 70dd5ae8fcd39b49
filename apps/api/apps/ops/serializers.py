"""Ops serializers."""
from rest_framework import serializers

from apps.events.models import Event
from .models import AuditActionChoices, AuditLog, AuditResourceChoices


class AuditLogSerializer(serializers.ModelSerializer):
    """Read-only audit log entry."""

    admin_email = serializers.EmailField(source='admin_user.email', read_only=True, default=None)
    admin_name = serializers.CharField(source='admin_user.name', read_only=True, default=None)

    class Meta:
        model = AuditLog
        fields = [
            'id', 'admin_user', 'admin_email', 'admin_name',
            'action', 'resource_type', 'resource_id', 'details',
            'ip_address', 'user_agent', 'created_at'
        ]
        read_only_fields = fields


class AuditLogFilterSerializer(serializers.Serializer):
    """Query params accepted by GET /admin/logs/."""

    admin_id = serializers.UUIDField(required=False)
    resource_type = serializers.ChoiceField(choices=AuditResourceChoices.choices, required=False)
    action = serializers.ChoiceField(choices=AuditActionChoices.choices, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)

    def validate(self, attrs):
        start_date = attrs.get('start_date')
        end_date = attrs.get('end_date')
        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({
                'end_date': 'End date cannot be before start date.'
            })
        return attrs


class DashboardStatsQuerySerializer(serializers.Serializer):
    """Query params accepted by GET /admin/dashboard/stats/."""

    year = serializers.IntegerField(min_value=1, max_value=9999, required=False)


class ActivityEventSerializer(serializers.ModelSerializer):
    """Event with its owner, for the admin activity feed."""

    user_email = serializers.EmailField(source='user.email', read_only=True)
    user_name = serializers.CharField(source='user.name', read_only=True)
    related_product_name = serializers.CharField(
        source='related_product.name', read_only=True, default=None
    )

    class Meta:
        model = Event
        fields = [
            'id', 'title', 'event_type', 'start_date', 'end_date', 'all_day',
            'related_product', 'related_product_name',
            'user', 'user_email', 'user_name', 'created_at'
        ]
        read_only_fields = fields
