from django.contrib import admin

from .models import DemoSession


@admin.register(DemoSession)
class DemoSessionAdmin(admin.ModelAdmin):
    list_display = ("id", "user_id", "created_at", "expires_at")
    search_fields = ("id", "user_id")
