"""Product serializers."""
from rest_framework import serializers
from .models import Category, Product


class CategorySerializer(serializers.ModelSerializer):
    """Serializer for Category."""

    class Meta:
        model = Category
        fields = [
            'id', 'name', 'description', 'default_warranty_period',
            'service_requirements', 'service_notes', 'is_active',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_service_requirements(self, value):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise serializers.ValidationError('Must be a list of strings.')
        return value


class ProductSerializer(serializers.ModelSerializer):
    """
    Serializer for Product.

    `category` accepts a category id on write; `category_name` is the
    resolved name (null when the category no longer exists).
    """

    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        allow_null=True,
        required=False
    )
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'category', 'category_name',
            'manufacturer', 'model', 'serial_number',
            'purchase_date', 'price', 'specifications', 'is_active',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_specifications(self, value):
        if not isinstance(value, dict):
            raise serializers.ValidationError('Must be an object.')
        return value
