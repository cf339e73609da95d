from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from .models import Blog


class BlogFilterSerializer(serializers.Serializer):
    """
    Query Parameters:
        author (str): Substring of the author name
        description (str): Substring of the description
    """

    author = serializers.CharField(required=False, allow_blank=True, max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, max_length=255)


class BlogInputSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False)
    description = serializers.CharField(min_length=8, max_length=255)
    text = serializers.CharField(min_length=8)
    author = serializers.CharField(min_length=2, max_length=100)


class BlogSerializer(serializers.ModelSerializer):

    user = UserMinimalSerializer(read_only=True)

    class Meta:
        model = Blog
        fields = [
            'id',
            'description',
            'text',
            'author',
            'user',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields
