from django.contrib import admin

from .models import Feedback, NewsletterSubscriber, WebsiteEvent


@admin.register(WebsiteEvent)
class WebsiteEventAdmin(admin.ModelAdmin):
    list_display = ("event_type", "source_page", "utm_source", "created_at")
    list_filter = ("event_type",)


@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ("type", "status", "email", "source_page", "created_at")
    list_filter = ("type", "status")


@admin.register(NewsletterSubscriber)
class NewsletterSubscriberAdmin(admin.ModelAdmin):
    list_display = ("email", "frequency", "status", "subscribed_at")
    list_filter = ("status", "frequency")
    search_fields = ("email",)
