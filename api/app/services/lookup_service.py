"""
Translation lookup for the locale of the current request.
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import NotFoundError
from app.core.locale_context import get_locale
from app.models import Translation
from app.services.translation_service import find_translation, find_translations
from app.utils.validation import require_present

logger = logging.getLogger(__name__)


def translate(
    session: Session,
    group: str,
    key: str,
    locale: Optional[str] = None
) -> str:
    """
    Resolve one string for the given (or current request's) locale.

    A missing row or empty value resolves to the key itself, so untranslated
    strings stay visible in the UI instead of failing the request.

    Raises:
        ValidationError: If group or key is empty
    """
    group = require_present("group", group)
    key = require_present("key", key)
    locale = locale or get_locale()

    try:
        translation = find_translation(session, group, key, locale)
    except SQLAlchemyError as e:
        logger.error(f"Error in translate for {group}.{key} [{locale}]: {e}")
        session.rollback()
        return key

    if translation and translation.value:
        return translation.value
    return key


def translate_group_key(
    session: Session,
    group: str,
    value_pattern: str,
    locale: Optional[str] = None
) -> Optional[Translation]:
    """
    Reverse lookup: first row in `group` whose value contains `value_pattern`
    (case-insensitive) for the locale. No fallback.
    """
    group = require_present("group", group)
    value_pattern = require_present("value", value_pattern)
    locale = locale or get_locale()

    return session.exec(
        select(Translation)
        .where(
            Translation.group == group,
            Translation.language == locale,
            Translation.value.icontains(value_pattern, autoescape=True)  # type: ignore[union-attr]
        )
        .order_by(Translation.id)
    ).first()


def translate_application_bundle(session: Session, locale: str) -> List[Translation]:
    """
    Every row for a locale.

    Raises:
        ValidationError: If locale is empty
        NotFoundError: If the locale has no rows at all
    """
    locale = require_present("locale", locale)
    translations = find_translations(session, language=locale)
    if not translations:
        raise NotFoundError(
            f"No translations found for locale: {locale}",
            field="locale",
            value=locale
        )
    return translations


def build_bundle(translations: List[Translation]) -> Dict[str, Dict[str, str]]:
    """Reshape flat rows into {group: {key: value}}."""
    bundle: Dict[str, Dict[str, str]] = {}
    for translation in translations:
        bundle.setdefault(translation.group, {})[translation.key] = translation.value or ""
    return bundle
