from rest_framework import serializers


class ChatRequestSerializer(serializers.Serializer):
    message = serializers.CharField(min_length=1, max_length=1000, trim_whitespace=False)
    context = serializers.ChoiceField(choices=["workflow", "automation", "general"], required=False)
    conversationId = serializers.CharField(required=False)


class GenerateWorkflowSerializer(serializers.Serializer):
    description = serializers.CharField(min_length=10, max_length=500)
