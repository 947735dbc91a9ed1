"""
Locale middleware: reads the locale header once per request and scopes it
for the rest of that request's call chain.
"""
import logging
from fastapi import Request

from app.core.config import settings
from app.core.locale_context import normalize_locale, reset_locale, set_locale

logger = logging.getLogger(__name__)


async def translation_locale_middleware(request: Request, call_next):
    """Set the request locale from the configured header, defaulting when absent."""
    token = None
    try:
        raw_locale = request.headers.get(settings.locale_header)
        token = set_locale(normalize_locale(raw_locale, default=settings.default_locale))
    except (LookupError, ValueError, TypeError) as e:
        # Continue request processing even if locale setting fails
        logger.warning(f"Failed to set locale in context: {e}")

    try:
        return await call_next(request)
    finally:
        if token is not None:
            reset_locale(token)
