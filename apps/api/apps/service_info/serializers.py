"""Service info serializers."""
from rest_framework import serializers

from apps.products.models import Product
from .models import ServiceInfo

CONTACT_INFO_KEYS = {'email', 'phone', 'website', 'address'}
WARRANTY_INFO_KEYS = {'duration', 'coverage', 'exclusions'}


class ServiceInfoSerializer(serializers.ModelSerializer):
    """Serializer for ServiceInfo."""

    product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        allow_null=True,
        required=False
    )
    product_name = serializers.CharField(source='product.name', read_only=True, default=None)

    class Meta:
        model = ServiceInfo
        fields = [
            'id', 'name', 'description', 'service_type', 'terms',
            'contact_info', 'warranty_info',
            'product', 'product_name', 'company', 'is_active',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def _validate_object(self, value, allowed_keys):
        if not isinstance(value, dict):
            raise serializers.ValidationError('Must be an object.')
        unknown = set(value) - allowed_keys
        if unknown:
            raise serializers.ValidationError(
                f'Unknown keys: {", ".join(sorted(unknown))}'
            )
        return value

    def validate_contact_info(self, value):
        return self._validate_object(value, CONTACT_INFO_KEYS)

    def validate_warranty_info(self, value):
        return self._validate_object(value, WARRANTY_INFO_KEYS)
