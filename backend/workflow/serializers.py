from django.conf import settings
from rest_framework import serializers

from .models import NODE_TYPES, Workflow, WorkflowExecution


class NumberField(serializers.Field):
    """A JSON number, stored as sent (ints stay ints)."""
    default_error_messages = {"invalid": "A valid number is required."}

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return value


class PositionSerializer(serializers.Serializer):
    x = NumberField()
    y = NumberField()


class WorkflowNodeSerializer(serializers.Serializer):
    id = serializers.CharField(trim_whitespace=False)
    type = serializers.ChoiceField(choices=NODE_TYPES)
    label = serializers.CharField(allow_blank=True, trim_whitespace=False)
    config = serializers.DictField()
    position = PositionSerializer()


class WorkflowEdgeSerializer(serializers.Serializer):
    id = serializers.CharField(trim_whitespace=False)
    source = serializers.CharField(trim_whitespace=False)
    target = serializers.CharField(trim_whitespace=False)
    label = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class WorkflowSerializer(serializers.ModelSerializer):
    """
    Wire shape of a workflow (camelCase). Writes are validated here; the
    graph lives in JSON columns so create/update are spelled out.
    """
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    nodes = WorkflowNodeSerializer(many=True, allow_empty=False)
    edges = WorkflowEdgeSerializer(many=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    userId = serializers.CharField(source="user_id", read_only=True)

    class Meta:
        model = Workflow
        fields = ["id", "name", "description", "nodes", "edges", "createdAt", "updatedAt", "userId"]
        read_only_fields = ["id"]
        extra_kwargs = {"name": {"min_length": 1, "max_length": 100}}

    def validate_nodes(self, nodes):
        limit = settings.MAX_WORKFLOW_STEPS
        if len(nodes) > limit:
            raise serializers.ValidationError(f"A workflow can have at most {limit} steps.")
        ids = [n["id"] for n in nodes]
        if len(ids) != len(set(ids)):
            raise serializers.ValidationError("Node ids must be unique.")
        return nodes

    def validate(self, attrs):
        node_ids = {n["id"] for n in attrs.get("nodes", [])}
        for edge in attrs.get("edges", []):
            for end in ("source", "target"):
                if edge[end] not in node_ids:
                    raise serializers.ValidationError(
                        {"edges": f"Edge {edge['id']} {end} '{edge[end]}' is not a node in this workflow."}
                    )
        return attrs

    def create(self, validated_data):
        return Workflow.objects.create(**validated_data)

    def update(self, instance, validated_data):
        for field in ("name", "description", "nodes", "edges"):
            setattr(instance, field, validated_data.get(field))
        instance.save(update_fields=["name", "description", "nodes", "edges", "updated_at"])
        return instance


class WorkflowExecutionSerializer(serializers.ModelSerializer):
    workflowId = serializers.CharField(source="workflow_id")
    startedAt = serializers.DateTimeField(source="started_at")
    completedAt = serializers.DateTimeField(source="completed_at")

    class Meta:
        model = WorkflowExecution
        fields = ["id", "workflowId", "status", "startedAt", "completedAt", "steps", "error"]
        read_only_fields = fields
