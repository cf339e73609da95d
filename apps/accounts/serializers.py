from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'account_type',
            'created_at',
            'last_login',
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.Serializer):
    """Fields a user may change on their own profile."""

    username = serializers.CharField(min_length=3, max_length=50)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    username = serializers.CharField(min_length=3, max_length=50)
    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        required=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class DeleteAccountSerializer(serializers.Serializer):
    """Password confirmation for deleting one's own account."""

    password = serializers.CharField(help_text="Current password for confirmation")
    confirm = serializers.BooleanField(help_text="Must be true to confirm deletion")

    def validate_confirm(self, value):
        if not value:
            raise serializers.ValidationError('Confirmation required')
        return value


class UserFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for the administrator user list.

    Query Parameters:
        username (str): Case-insensitive substring of the username
        email (str): Case-insensitive substring of the email
    """

    username = serializers.CharField(required=False, allow_blank=True, max_length=50)
    email = serializers.CharField(required=False, allow_blank=True, max_length=255)


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    class Meta:
        model = User
        fields = ['id', 'username']
        read_only_fields = fields
