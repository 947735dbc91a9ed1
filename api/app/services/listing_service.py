"""
Listing service: aggregates flat translation rows into distinct (group, key)
records for the summary view, plus store-wide statistics.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sqlmodel import Session, select, func, or_, and_

from app.models import Language, Translation
from app.utils.validation import require_pagination

logger = logging.getLogger(__name__)


@dataclass
class TranslationGroupRecord:
    """One distinct (group, key) pair with the codes of languages that have a row."""
    group: str
    key: str
    languages: List[str] = field(default_factory=list)


@dataclass
class TranslationStats:
    total_translations: int
    total_groups: int
    total_keys: int
    language_distribution: Dict[str, int]


def _search_clause(search: Optional[str]):
    term = search.strip() if search else ""
    if not term:
        return None
    return or_(
        Translation.group.icontains(term, autoescape=True),  # type: ignore[attr-defined]
        Translation.key.icontains(term, autoescape=True),  # type: ignore[attr-defined]
    )


def list_translations(
    session: Session,
    take: int,
    skip: int,
    search: Optional[str] = None
) -> Tuple[List[TranslationGroupRecord], int]:
    """
    Page through distinct (group, key) pairs ordered by group then key.

    Args:
        session: Database session
        take: Page size, must be positive
        skip: Offset, must be non-negative
        search: Optional case-insensitive substring of group or key

    Returns:
        Tuple of (records on this page, total distinct pairs matching the search)

    Raises:
        ValidationError: If take or skip are out of range
    """
    require_pagination(take, skip)
    clause = _search_clause(search)

    pairs_query = select(Translation.group, Translation.key).distinct()
    if clause is not None:
        pairs_query = pairs_query.where(clause)

    pairs_subquery = pairs_query.subquery()
    total = session.exec(select(func.count()).select_from(pairs_subquery)).one()

    page = session.exec(
        pairs_query.order_by(Translation.group, Translation.key).offset(skip).limit(take)
    ).all()
    if not page:
        return [], total

    records = {
        (group, key): TranslationGroupRecord(group=group, key=key)
        for group, key in page
    }
    rows = session.exec(
        select(Translation.group, Translation.key, Translation.language)
        .where(or_(*[
            and_(Translation.group == group, Translation.key == key)
            for group, key in records
        ]))
        .order_by(Translation.language)
    ).all()
    for group, key, language in rows:
        records[(group, key)].languages.append(language)

    return list(records.values()), total


def get_translation_stats(session: Session) -> TranslationStats:
    """Row totals, distinct groups and keys, and rows per language."""
    total_translations = session.exec(select(func.count()).select_from(Translation)).one()
    total_groups = session.exec(
        select(func.count()).select_from(select(Translation.group).distinct().subquery())
    ).one()
    total_keys = session.exec(
        select(func.count()).select_from(
            select(Translation.group, Translation.key).distinct().subquery()
        )
    ).one()
    distribution = session.exec(
        select(Translation.language, func.count())
        .group_by(Translation.language)
        .order_by(Translation.language)
    ).all()

    return TranslationStats(
        total_translations=total_translations,
        total_groups=total_groups,
        total_keys=total_keys,
        language_distribution={language: count for language, count in distribution}
    )


def list_orphaned_language_codes(session: Session) -> List[str]:
    """
    Language codes used by translation rows that have no Language record.

    Deleting a language does not touch its translations; this report is how
    those rows are found.
    """
    known = select(Language.code)
    orphans = session.exec(
        select(Translation.language)
        .where(Translation.language.not_in(known))  # type: ignore[attr-defined]
        .distinct()
        .order_by(Translation.language)
    ).all()
    if orphans:
        logger.warning(f"Found translations for unknown languages: {list(orphans)}")
    return list(orphans)
