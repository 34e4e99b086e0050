from django.contrib import admin

from .models import AutomationResult


@admin.register(AutomationResult)
class AutomationResultAdmin(admin.ModelAdmin):
    list_display = ("id", "delivery_method", "status", "timestamp")
    list_filter = ("delivery_method", "status")
    search_fields = ("id", "details")
