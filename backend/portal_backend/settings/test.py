from .base import *

PORTAL_ENV = "test"
DEBUG = False
SECRET_KEY = "test-secret"
SIMPLE_JWT["SIGNING_KEY"] = SECRET_KEY

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": ":memory:"}}
CACHES = {"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "portal-test"}}
EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"
STORAGES["staticfiles"] = {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"}

RATE_LIMIT_MAX = 100000
WORKFLOW_STEP_DELAY_MS = (0, 0)

SENDGRID_API_KEY = "SG.test"
OPENAI_API_KEY = "sk-test"
GOOGLE_CLIENT_ID = "client-id.apps.googleusercontent.com"
GOOGLE_CLIENT_SECRET = "client-secret"

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = "memory://"
CELERY_RESULT_BACKEND = "cache+memory://"
