"""
Language service for the supported-locale store.

Uniqueness of Language.code is enforced by the unique index on the languages
table; a duplicate surfaces as an IntegrityError on commit and is reported
as ConflictError.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, func, or_

from app.core.exceptions import ConflictError, NotFoundError
from app.models import Language
from app.utils.validation import (
    LANGUAGE_NAME_LENGTH,
    require_language_code,
    require_length,
    require_pagination,
)

logger = logging.getLogger(__name__)


def _commit_language(session: Session, language: Language) -> Language:
    code = language.code
    session.add(language)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning(f"Duplicate language code '{code}'")
        raise ConflictError(
            f"Language code '{code}' already exists",
            field="code",
            value=code
        ) from exc
    session.refresh(language)
    return language


def create_language(session: Session, name: str, code: str) -> Language:
    """
    Create a new language.

    Raises:
        ValidationError: If name or code violate their constraints
        ConflictError: If another language already uses the code
    """
    language = Language(
        name=require_length("name", name, LANGUAGE_NAME_LENGTH),
        code=require_language_code("code", code)
    )
    language = _commit_language(session, language)
    logger.info(f"Created language {language.code} ({language.name}) with id {language.id}")
    return language


def get_language(session: Session, language_id: int) -> Language:
    language = session.get(Language, language_id)
    if not language:
        raise NotFoundError(
            f"Language with ID {language_id} not found",
            field="id",
            value=language_id
        )
    return language


def update_language(session: Session, language_id: int, name: str, code: str) -> Language:
    """
    Update name and code of an existing language.

    Raises:
        ValidationError: If name or code violate their constraints
        NotFoundError: If the language does not exist
        ConflictError: If a different language already uses the code
    """
    name = require_length("name", name, LANGUAGE_NAME_LENGTH)
    code = require_language_code("code", code)

    language = get_language(session, language_id)
    language.name = name
    language.code = code
    language.updated_at = datetime.now(timezone.utc)
    language = _commit_language(session, language)
    logger.info(f"Updated language {language_id} to {code} ({name})")
    return language


def delete_language(session: Session, language_id: int) -> Language:
    """
    Delete a language by id and return the deleted record.

    Translation rows tagged with the code are left untouched; see
    listing_service.list_orphaned_language_codes.
    """
    language = get_language(session, language_id)
    session.delete(language)
    session.commit()
    logger.info(f"Deleted language {language.code} (id {language_id})")
    return language


def _search_clause(search: Optional[str]):
    term = search.strip() if search else ""
    if not term:
        return None
    return or_(
        Language.name.icontains(term, autoescape=True),  # type: ignore[attr-defined]
        Language.code.icontains(term, autoescape=True),  # type: ignore[attr-defined]
    )


def list_languages(
    session: Session,
    skip: int,
    take: int,
    search: Optional[str] = None
) -> Tuple[List[Language], int]:
    """
    Page through languages ordered by name, optionally filtered by a
    case-insensitive substring of name or code.

    Returns:
        Tuple of (languages on this page, total matching count)
    """
    require_pagination(take, skip)

    query = select(Language)
    count_query = select(func.count()).select_from(Language)
    clause = _search_clause(search)
    if clause is not None:
        query = query.where(clause)
        count_query = count_query.where(clause)

    query = query.order_by(Language.name, Language.code).offset(skip).limit(take)
    languages = list(session.exec(query).all())
    total = session.exec(count_query).one()
    return languages, total


def get_supported_languages(session: Session) -> List[Language]:
    """All languages in listing order."""
    return list(session.exec(select(Language).order_by(Language.name, Language.code)).all())


def get_language_codes(session: Session) -> List[str]:
    """Distinct language codes in listing order."""
    codes: List[str] = []
    for language in get_supported_languages(session):
        if language.code not in codes:
            codes.append(language.code)
    return codes
