from django.contrib import admin

from .models import Workflow, WorkflowExecution


@admin.register(Workflow)
class WorkflowAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "user_id", "updated_at")
    search_fields = ("id", "name", "user_id")


@admin.register(WorkflowExecution)
class WorkflowExecutionAdmin(admin.ModelAdmin):
    list_display = ("id", "workflow_id", "status", "started_at", "completed_at")
    list_filter = ("status",)
