from typing import Mapping

from starlette.responses import Response

from app.core.config import settings

COOKIE_TIME_DAYS = 3
COOKIE_MAX_AGE_MS = COOKIE_TIME_DAYS * 24 * 60 * 60 * 1000


def set_cookie(response: Response, value: Mapping[str, str]) -> None:
    """Set one cookie from a single-key mapping, e.g. ``{"token": jwt}``.

    The cookie is always HttpOnly and only Secure in production. Max-Age is
    written in seconds, as the attribute requires.
    """
    if len(value) != 1:
        raise ValueError(f"Expected exactly one cookie, got {len(value)}.")
    cookie_name, cookie_value = next(iter(value.items()))

    response.set_cookie(
        key=cookie_name,
        value=cookie_value,
        max_age=COOKIE_MAX_AGE_MS // 1000,
        httponly=True,
        secure=settings.is_production,
    )


def delete_cookie(response: Response, cookie_name: str) -> None:
    response.delete_cookie(
        key=cookie_name,
        httponly=True,
        secure=settings.is_production,
    )
