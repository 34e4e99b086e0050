from django.urls import path

from .views import activity, charts, metrics

urlpatterns = [
    path("metrics", metrics, name="dashboard-metrics"),
    path("charts", charts, name="dashboard-charts"),
    path("activity", activity, name="dashboard-activity"),
]
