from django.apps import AppConfig
class DemoSessionsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "demo_sessions"
