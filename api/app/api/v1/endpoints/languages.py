from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from typing import Optional
from app.core.database import get_session
from app.schemas.language import (
    LanguageResponse,
    LanguagesResponse,
    SupportedLanguagesResponse,
    CreateLanguageRequest,
    UpdateLanguageRequest
)
from app.services import language_service

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get("", response_model=LanguagesResponse)
async def list_languages(
    skip: int = 0,
    take: int = 20,
    search: Optional[str] = None,
    session: Session = Depends(get_session)
):
    """Get a page of languages sorted by name, optionally filtered by name or code."""
    languages, count = language_service.list_languages(session, skip=skip, take=take, search=search)
    return LanguagesResponse(
        languages=[LanguageResponse.model_validate(lang) for lang in languages],
        count=count
    )


@router.get("/supported", response_model=SupportedLanguagesResponse)
async def get_supported_languages(
    session: Session = Depends(get_session)
):
    """Get all available languages."""
    languages = language_service.get_supported_languages(session)
    return SupportedLanguagesResponse(
        languages=[LanguageResponse.model_validate(lang) for lang in languages]
    )


@router.get("/{language_id}", response_model=LanguageResponse)
async def get_language(
    language_id: int,
    session: Session = Depends(get_session)
):
    return LanguageResponse.model_validate(language_service.get_language(session, language_id))


@router.post("", response_model=LanguageResponse, status_code=status.HTTP_201_CREATED)
async def create_language(
    request: CreateLanguageRequest,
    session: Session = Depends(get_session)
):
    """Create a language. The code must be unique."""
    language = language_service.create_language(session, name=request.name, code=request.code)
    return LanguageResponse.model_validate(language)


@router.put("/{language_id}", response_model=LanguageResponse)
async def update_language(
    language_id: int,
    request: UpdateLanguageRequest,
    session: Session = Depends(get_session)
):
    language = language_service.update_language(
        session,
        language_id,
        name=request.name,
        code=request.code
    )
    return LanguageResponse.model_validate(language)


@router.delete("/{language_id}", response_model=LanguageResponse)
async def delete_language(
    language_id: int,
    session: Session = Depends(get_session)
):
    """Delete a language. Its translations are kept."""
    return LanguageResponse.model_validate(language_service.delete_language(session, language_id))
