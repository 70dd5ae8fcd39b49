"""Warranty serializers."""
from rest_framework import serializers

from apps.products.models import Product
from .models import Warranty, WarrantyDocument


class WarrantyDocumentSerializer(serializers.ModelSerializer):
    """Document metadata; `path` is the storage URL of the file."""

    path = serializers.SerializerMethodField()

    class Meta:
        model = WarrantyDocument
        fields = ['id', 'name', 'path', 'content_type', 'size_bytes', 'upload_date']
        read_only_fields = fields

    def get_path(self, obj):
        if not obj.file:
            return None
        return obj.file.url


class DocumentUploadSerializer(serializers.Serializer):
    """Multipart upload body: a single `document` file."""

    document = serializers.FileField()


class WarrantySerializer(serializers.ModelSerializer):
    """
    Serializer for Warranty.

    `status` is read-only (derived on save). `current_status` is the live
    value and can differ from `status` until the record is saved again.
    """

    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    product_name = serializers.CharField(source='product.name', read_only=True)
    product_manufacturer = serializers.CharField(source='product.manufacturer', read_only=True)
    category_name = serializers.CharField(source='product.category.name', read_only=True, default=None)
    current_status = serializers.CharField(read_only=True)
    documents = WarrantyDocumentSerializer(many=True, read_only=True)

    class Meta:
        model = Warranty
        fields = [
            'id', 'user', 'product', 'product_name', 'product_manufacturer', 'category_name',
            'purchase_date', 'expiration_date',
            'warranty_provider', 'warranty_number', 'coverage_details', 'notes',
            'status', 'current_status', 'documents',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'user', 'status', 'current_status', 'documents', 'created_at', 'updated_at']

    def validate(self, attrs):
        """Validate warranty dates."""
        purchase_date = attrs.get('purchase_date')
        expiration_date = attrs.get('expiration_date')

        # Handle partial updates
        if self.instance:
            if purchase_date is None:
                purchase_date = self.instance.purchase_date
            if expiration_date is None:
                expiration_date = self.instance.expiration_date

        # INVARIANT: expiration_date must not precede purchase_date
        if purchase_date and expiration_date and expiration_date < purchase_date:
            raise serializers.ValidationError({
                'expiration_date': 'Expiration date cannot be before purchase date.'
            })

        return attrs


class AdminWarrantySerializer(WarrantySerializer):
    """Warranty with its owner, for the admin listing."""

    user_email = serializers.EmailField(source='user.email', read_only=True)
    user_name = serializers.CharField(source='user.name', read_only=True)

    class Meta(WarrantySerializer.Meta):
        fields = WarrantySerializer.Meta.fields + ['user_email', 'user_name']
