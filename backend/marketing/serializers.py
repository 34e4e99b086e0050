from rest_framework import serializers

from .models import FEEDBACK_TYPES, FREQUENCY_CHOICES, Feedback, NewsletterSubscriber


class UtmSerializer(serializers.Serializer):
    utm_source = serializers.CharField(required=False)
    utm_medium = serializers.CharField(required=False)
    utm_campaign = serializers.CharField(required=False)
    utm_term = serializers.CharField(required=False)
    utm_content = serializers.CharField(required=False)


class TrackEventSerializer(serializers.Serializer):
    event = serializers.CharField(max_length=64)
    source_page = serializers.CharField(max_length=255)
    source_section = serializers.CharField(required=False, max_length=120)
    referrer = serializers.CharField(required=False, allow_blank=True, max_length=500)
    utm = UtmSerializer(required=False)
    metadata = serializers.DictField(required=False)
    timestamp = serializers.DateTimeField(required=False)
    user_agent = serializers.CharField(required=False, max_length=500)


class FeedbackInputSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=[c[0] for c in FEEDBACK_TYPES])
    message = serializers.CharField()
    email = serializers.EmailField(required=False, allow_null=True)
    source_page = serializers.CharField(required=False, max_length=255)
    user_agent = serializers.CharField(required=False, max_length=500)


class NewsletterInputSerializer(serializers.Serializer):
    email = serializers.EmailField()
    frequency = serializers.ChoiceField(choices=[c[0] for c in FREQUENCY_CHOICES], default="monthly")
    source_page = serializers.CharField(required=False, max_length=255)
    referrer = serializers.CharField(required=False, allow_blank=True, max_length=500)
    timestamp = serializers.CharField(required=False)
    userAgent = serializers.CharField(required=False)


class FeedbackSerializer(serializers.ModelSerializer):
    class Meta:
        model = Feedback
        fields = ["id", "type", "message", "email", "source_page", "user_agent", "status", "created_at"]


class NewsletterSubscriberSerializer(serializers.ModelSerializer):
    class Meta:
        model = NewsletterSubscriber
        fields = ["id", "email", "frequency", "source_page", "referrer", "status", "subscribed_at"]
