from django.conf import settings
from openai import OpenAI


def get_client() -> OpenAI:
    return OpenAI(api_key=settings.OPENAI_API_KEY, timeout=30, max_retries=2)
