"""
Translation store: create, read, upsert and delete rows addressed by
(group, key, language).

The (group, key, language) triple is unique through the
uq_translation_group_key_language constraint. Writes rely on that constraint
at commit time instead of a read-then-insert check, so concurrent creators
of the same triple get exactly one winner and a ConflictError for the rest.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, func

from app.core.exceptions import ConflictError, NotFoundError
from app.models import Translation
from app.utils.validation import (
    GROUP_LENGTH,
    KEY_LENGTH,
    require_language_code,
    require_length,
)

logger = logging.getLogger(__name__)


def validate_triple(group: str, key: str, language: str) -> Tuple[str, str, str]:
    """Validate and trim a (group, key, language) triple."""
    return (
        require_length("group", group, GROUP_LENGTH),
        require_length("key", key, KEY_LENGTH),
        require_language_code("language", language),
    )


def _conflict(group: str, key: str, language: str) -> ConflictError:
    return ConflictError(
        f"Translation already exists for group: '{group}', key: '{key}', language: '{language}'",
        field="group,key,language",
        value=f"{group}.{key}.{language}"
    )


def _filter(query, group: Optional[str], key: Optional[str], language: Optional[str]):
    if group is not None:
        query = query.where(Translation.group == group)
    if key is not None:
        query = query.where(Translation.key == key)
    if language is not None:
        query = query.where(Translation.language == language)
    return query


def create_translation(
    session: Session,
    group: str,
    key: str,
    language: str,
    value: Optional[str]
) -> Translation:
    """
    Create a translation row. The triple must not exist yet.

    Raises:
        ValidationError: If group, key or language violate their constraints
        ConflictError: If a row for the triple already exists
    """
    group, key, language = validate_triple(group, key, language)
    translation = Translation(group=group, key=key, language=language, value=value)
    session.add(translation)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        logger.warning(f"Duplicate translation {group}.{key} [{language}]")
        raise _conflict(group, key, language) from exc
    session.refresh(translation)
    logger.info(f"Created translation {group}.{key} [{language}]")
    return translation


def find_translation(
    session: Session,
    group: str,
    key: str,
    language: str
) -> Optional[Translation]:
    return session.exec(
        select(Translation).where(
            Translation.group == group,
            Translation.key == key,
            Translation.language == language
        )
    ).first()


def upsert_translation(
    session: Session,
    group: str,
    key: str,
    language: str,
    value: Optional[str]
) -> Translation:
    """
    Create the row for a triple, or replace the value of the existing one.

    If another writer inserts the same triple between our read and our
    commit, the unique constraint rejects our insert and the write is
    retried once as an update of the winner's row.
    """
    group, key, language = validate_triple(group, key, language)

    for attempt in range(2):
        translation = find_translation(session, group, key, language)
        if translation:
            translation.value = value
            translation.updated_at = datetime.now(timezone.utc)
        else:
            translation = Translation(group=group, key=key, language=language, value=value)
        session.add(translation)
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            if attempt == 0:
                logger.info(f"Concurrent insert of {group}.{key} [{language}], retrying as update")
                continue
            raise _conflict(group, key, language) from exc
        session.refresh(translation)
        return translation

    raise _conflict(group, key, language)


def find_translations(
    session: Session,
    group: Optional[str] = None,
    key: Optional[str] = None,
    language: Optional[str] = None
) -> List[Translation]:
    """Rows matching every supplied field, ordered by group, key, language."""
    query = _filter(select(Translation), group, key, language)
    query = query.order_by(Translation.group, Translation.key, Translation.language)
    return list(session.exec(query).all())


def count_translations(
    session: Session,
    group: Optional[str] = None,
    key: Optional[str] = None,
    language: Optional[str] = None
) -> int:
    query = _filter(select(func.count()).select_from(Translation), group, key, language)
    return session.exec(query).one()


def delete_translation(session: Session, group: str, key: str, language: str) -> Translation:
    """
    Delete the row for one triple and return it.

    Raises:
        NotFoundError: If no row exists for the triple
    """
    translation = find_translation(session, group, key, language)
    if not translation:
        raise NotFoundError(
            f"Translation not found for group: '{group}', key: '{key}', language: '{language}'",
            field="group,key,language",
            value=f"{group}.{key}.{language}"
        )
    session.delete(translation)
    session.commit()
    logger.info(f"Deleted translation {group}.{key} [{language}]")
    return translation


def _delete_rows(session: Session, rows: List[Translation]) -> int:
    for row in rows:
        session.delete(row)
    session.commit()
    return len(rows)


def delete_translations(session: Session, group: str, key: str) -> int:
    """Delete every language row of a (group, key) pair. Returns the number deleted."""
    deleted = _delete_rows(session, find_translations(session, group=group, key=key))
    if deleted:
        logger.info(f"Deleted {deleted} translations for {group}.{key}")
    return deleted


def delete_language_translations(session: Session, language: str) -> int:
    """Delete every row for one language code. Returns the number deleted."""
    deleted = _delete_rows(session, find_translations(session, language=language))
    logger.info(f"Deleted {deleted} translations for language {language}")
    return deleted
