"""
Translations endpoint.
"""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import List, Optional
from app.core.database import get_session
from app.core.exceptions import NotFoundError
from app.core.locale_context import get_locale, normalize_locale
from app.schemas.translation import (
    TranslationResponse,
    CreateTranslationRequest,
    TranslationGroupResponse,
    TranslationListResponse,
    TranslateResponse,
    BundleResponse,
    TranslationStatsResponse,
    MachineTranslationRequest
)
from app.services import language_service, listing_service, lookup_service, translation_service
from app.services.machine_translation_service import translate_and_store

router = APIRouter(prefix="/translations", tags=["translations"])


@router.get("", response_model=TranslationListResponse)
async def list_translations(
    take: int = 20,
    skip: int = 0,
    search: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """Get distinct (group, key) pairs with the languages that have a value."""
    records, count = listing_service.list_translations(session, take=take, skip=skip, search=search)
    return TranslationListResponse(
        data=[TranslationGroupResponse.model_validate(record) for record in records],
        count=count
    )


@router.post("", response_model=TranslationResponse, status_code=status.HTTP_201_CREATED)
async def create_translation(
    request: CreateTranslationRequest,
    session: Session = Depends(get_session)
):
    translation = translation_service.create_translation(
        session,
        group=request.group,
        key=request.key,
        language=request.language,
        value=request.value
    )
    return TranslationResponse.model_validate(translation)


@router.delete("", response_model=TranslationResponse)
async def delete_translation(
    group: str,
    key: str,
    language: str,
    session: Session = Depends(get_session)
):
    translation = translation_service.delete_translation(session, group, key, language)
    return TranslationResponse.model_validate(translation)


@router.get("/translate", response_model=TranslateResponse)
async def translate(
    group: str = "",
    key: str = "",
    locale: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """Resolve one string for the request locale. Missing strings resolve to the key."""
    locale = normalize_locale(locale) if locale else get_locale()
    value = lookup_service.translate(session, group, key, locale)
    return TranslateResponse(group=group, key=key, locale=locale, value=value)


@router.get("/lookup", response_model=TranslationResponse)
async def lookup_by_value(
    group: str = "",
    value: str = "",
    locale: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """Find a row in a group by (part of) its value."""
    locale = normalize_locale(locale) if locale else None
    translation = lookup_service.translate_group_key(session, group, value, locale)
    if not translation:
        raise NotFoundError(
            f"No translation in group '{group}' matches '{value}'",
            field="value",
            value=value
        )
    return TranslationResponse.model_validate(translation)


@router.get("/bundle", response_model=BundleResponse)
async def get_request_bundle(
    session: Session = Depends(get_session)
):
    """Get every string of the request locale."""
    return await get_bundle(get_locale(), session)


@router.get("/bundle/{locale}", response_model=BundleResponse)
async def get_bundle(
    locale: str,
    session: Session = Depends(get_session)
):
    """Get every string of a locale, nested as group -> key -> value."""
    translations = lookup_service.translate_application_bundle(session, locale)
    return BundleResponse(locale=locale, translations=lookup_service.build_bundle(translations))


@router.get("/stats", response_model=TranslationStatsResponse)
async def get_stats(
    session: Session = Depends(get_session)
):
    stats = listing_service.get_translation_stats(session)
    return TranslationStatsResponse(
        total_translations=stats.total_translations,
        total_groups=stats.total_groups,
        total_keys=stats.total_keys,
        language_distribution=stats.language_distribution
    )


@router.get("/orphans", response_model=List[str])
async def get_orphaned_languages(
    session: Session = Depends(get_session)
):
    """Language codes used by translations but missing from the languages table."""
    return listing_service.list_orphaned_language_codes(session)


@router.get("/available-languages", response_model=List[str])
async def get_available_languages(
    session: Session = Depends(get_session)
):
    return language_service.get_language_codes(session)


@router.post("/machine-translate", response_model=TranslationResponse, status_code=status.HTTP_201_CREATED)
async def machine_translate(
    request: MachineTranslationRequest,
    session: Session = Depends(get_session)
):
    """Translate a value with the machine translation provider and store the result."""
    translation = translate_and_store(
        session,
        group=request.group,
        key=request.key,
        value=request.value,
        target_language=request.target_language,
        source_language=request.source_language
    )
    return TranslationResponse.model_validate(translation)
