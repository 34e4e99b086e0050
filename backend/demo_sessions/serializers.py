from rest_framework import serializers

from .models import DemoSession


class CreateSessionSerializer(serializers.Serializer):
    metadata = serializers.DictField(required=False, default=dict)


class DemoSessionSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at")
    expiresAt = serializers.DateTimeField(source="expires_at")
    userId = serializers.CharField(source="user_id")

    class Meta:
        model = DemoSession
        fields = ["id", "createdAt", "expiresAt", "userId", "metadata"]
        read_only_fields = fields
