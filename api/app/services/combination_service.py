"""
Combination service: all language values of one (group, key) viewed and
edited as a single unit.

update_combination is best effort. Each language is written and committed on
its own, in the order supplied. A failure for one language is rolled back for
that language only, reported in the returned CombinationUpdateResult, and
does not undo languages already written in the same call. Callers that need
every language applied should check `failed` and retry.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from sqlmodel import Session

from app.core.exceptions import LexiconException, NotFoundError
from app.services.language_service import get_language_codes
from app.services.translation_service import (
    delete_translations,
    find_translation,
    find_translations,
    upsert_translation,
)
from app.utils.validation import (
    GROUP_LENGTH,
    KEY_LENGTH,
    require_language_code,
    require_length,
    require_present,
)

logger = logging.getLogger(__name__)


@dataclass
class CombinationUpdateResult:
    """Per-language outcome of update_combination."""
    updated: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


def get_combination(session: Session, group: str, key: str) -> List[Dict[str, str]]:
    """
    One {code: value} entry per known language, in language listing order.
    Languages without a row get an empty string.
    """
    group = require_present("group", group)
    key = require_present("key", key)

    codes = get_language_codes(session)
    values = {
        translation.language: translation.value or ""
        for translation in find_translations(session, group=group, key=key)
    }
    return [{code: values.get(code, "")} for code in codes]


def update_combination(
    session: Session,
    group: str,
    key: str,
    values_by_language: Dict[str, Optional[str]]
) -> CombinationUpdateResult:
    """
    Apply a partial update: empty values delete the language's row, others
    create or replace it.

    Raises:
        ValidationError: If group or key is missing or out of bounds
    """
    group = require_length("group", group, GROUP_LENGTH)
    key = require_length("key", key, KEY_LENGTH)
    result = CombinationUpdateResult()

    for language, value in values_by_language.items():
        try:
            code = require_language_code("language", language)
            if not value:
                existing = find_translation(session, group, key, code)
                if existing:
                    session.delete(existing)
                    session.commit()
                    result.deleted.append(language)
                else:
                    result.unchanged.append(language)
            else:
                upsert_translation(session, group, key, code, value)
                result.updated.append(language)
        except LexiconException as e:
            session.rollback()
            logger.warning(f"Combination update failed for {group}.{key} [{language}]: {e.message}")
            result.failed[language] = e.message

    logger.info(
        f"Updated combination {group}.{key}: updated={result.updated}, "
        f"deleted={result.deleted}, failed={sorted(result.failed)}"
    )
    return result


def delete_combination(session: Session, group: str, key: str) -> int:
    """
    Delete every language row of a (group, key) pair.

    Raises:
        ValidationError: If group or key is empty
        NotFoundError: If nothing existed for the pair
    """
    group = require_present("group", group)
    key = require_present("key", key)

    deleted = delete_translations(session, group, key)
    if deleted == 0:
        raise NotFoundError(
            f"No translations found for group: {group}, key: {key}",
            field="group,key",
            value=f"{group}.{key}"
        )
    return deleted
