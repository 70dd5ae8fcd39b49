"""Accounts serializers."""
from rest_framework import serializers
from .models import User, RoleChoices


class UserSerializer(serializers.ModelSerializer):
    """Public representation of a user (no credentials)."""

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'is_active', 'created_at', 'updated_at']
        read_only_fields = fields


class ProfileSerializer(serializers.ModelSerializer):
    """Own profile: only the display name is editable."""

    class Meta:
        model = User
        fields = ['id', 'email', 'name', 'role', 'created_at']
        read_only_fields = ['id', 'email', 'role', 'created_at']

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError('Name cannot be empty')
        return value.strip()


class RoleUpdateSerializer(serializers.Serializer):
    """Payload for admin role changes."""
    role = serializers.ChoiceField(choices=RoleChoices.choices)
