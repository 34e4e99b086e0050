from django.utils.crypto import get_random_string

# Same alphabet and default length as nanoid
URL_SAFE = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"


def nanoid(size: int = 21) -> str:
    return get_random_string(size, allowed_chars=URL_SAFE)
