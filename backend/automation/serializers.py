from rest_framework import serializers

from .models import DELIVERY_METHOD_CHOICES


class AutomationRequestSerializer(serializers.Serializer):
    service = serializers.CharField()
    deliveryMethod = serializers.ChoiceField(choices=[c[0] for c in DELIVERY_METHOD_CHOICES])
    recipient = serializers.CharField()
    payload = serializers.DictField()
    simulate = serializers.BooleanField(required=False, default=False)
    accessToken = serializers.CharField(required=False, allow_blank=True)
