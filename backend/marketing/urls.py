from django.urls import path

from .views import FeedbackView, analytics_summary, newsletter, newsletter_subscribers, track

urlpatterns = [
    path("track", track, name="track"),
    path("feedback", FeedbackView.as_view(), name="feedback"),
    path("newsletter", newsletter, name="newsletter"),
    path("newsletter/subscribers", newsletter_subscribers, name="newsletter-subscribers"),
    path("analytics/summary", analytics_summary, name="analytics-summary"),
]
