from django.urls import path

from .views import ExecuteAutomationView, ServiceCatalogView

urlpatterns = [
    path("execute", ExecuteAutomationView.as_view(), name="automation-execute"),
    path("services", ServiceCatalogView.as_view(), name="automation-services"),
]
