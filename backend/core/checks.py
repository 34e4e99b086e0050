from django.conf import settings
from django.core.checks import Warning, register

CREDENTIALS = (
    ("OPENAI_API_KEY", "core.W001", "AI chat will answer with the error fallback."),
    ("SENDGRID_API_KEY", "core.W002", "Real email delivery will fail."),
    ("GOOGLE_CLIENT_ID", "core.W003", "Calendar OAuth is unavailable."),
    ("GOOGLE_CLIENT_SECRET", "core.W004", "Calendar OAuth is unavailable."),
)


@register()
def collaborator_credentials(app_configs, **kwargs):
    return [
        Warning(f"{name} is not set.", hint=hint, id=check_id)
        for name, check_id, hint in CREDENTIALS
        if not getattr(settings, name, "")
    ]
