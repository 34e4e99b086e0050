import os

from celery import Celery
from django.conf import settings

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "portal_backend.settings.dev")

app = Celery("portal_backend")

# CELERY_* settings configure the app; the beat schedule lives in settings.base
app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks(lambda: settings.INSTALLED_APPS)
