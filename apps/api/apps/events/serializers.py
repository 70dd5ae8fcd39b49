"""Event serializers."""
from rest_framework import serializers

from apps.products.models import Product
from .models import Event


class EventSerializer(serializers.ModelSerializer):
    """Serializer for Event."""

    related_product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        allow_null=True,
        required=False
    )
    related_product_name = serializers.CharField(
        source='related_product.name', read_only=True, default=None
    )

    class Meta:
        model = Event
        fields = [
            'id', 'title', 'description', 'event_type',
            'start_date', 'end_date', 'all_day',
            'related_product', 'related_product_name',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate(self, attrs):
        start_date = attrs.get('start_date', self.instance.start_date if self.instance else None)
        end_date = attrs.get('end_date', self.instance.end_date if self.instance else None)

        if start_date and end_date and end_date < start_date:
            raise serializers.ValidationError({
                'end_date': 'End date cannot be before start date.'
            })
        return attrs
