"""
Request-scoped locale state.

The locale lives in a ContextVar, so every request (asyncio task or worker
thread running in a copied context) reads only the value set along its own
call chain. Reading never fails: when nothing was set, or the lookup breaks,
the default locale is returned.
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

_current_locale: ContextVar[Optional[str]] = ContextVar("lexicon_locale", default=None)


def normalize_locale(locale: Optional[str], default: str = DEFAULT_LOCALE) -> str:
    """
    Reduce an inbound locale tag to a 2-letter lowercase code.

    "en-US", "EN_us" and " en " all become "en". Values that do not start with
    two ASCII letters resolve to the default.
    """
    if not locale:
        return default
    candidate = locale.strip().lower().replace("_", "-")[:2]
    if len(candidate) == 2 and candidate.isascii() and candidate.isalpha():
        return candidate
    return default


def set_locale(locale: Optional[str]) -> Token:
    """Set the locale for the rest of the current request. Returns a reset token."""
    return _current_locale.set(normalize_locale(locale))


def reset_locale(token: Token) -> None:
    _current_locale.reset(token)


def get_locale(default: str = DEFAULT_LOCALE) -> str:
    """Return the active locale, or the default when none is set."""
    try:
        locale = _current_locale.get()
    except Exception as e:  # noqa: BLE001 - locale resolution is never fatal
        logger.warning(f"Failed to read locale from context: {e}")
        return default
    return locale or default


@contextmanager
def locale_scope(locale: Optional[str]) -> Iterator[str]:
    """Run a block with the given locale, restoring the previous value afterwards."""
    token = set_locale(locale)
    try:
        yield get_locale()
    finally:
        reset_locale(token)
