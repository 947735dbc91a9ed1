from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime


class LanguageResponse(BaseModel):
    """Language response schema."""
    id: int
    code: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LanguagesResponse(BaseModel):
    """Page of languages with the total matching count."""
    languages: List[LanguageResponse]
    count: int


class SupportedLanguagesResponse(BaseModel):
    """All languages, unpaginated."""
    languages: List[LanguageResponse]


class CreateLanguageRequest(BaseModel):
    """Request schema for creating a language."""
    name: str
    code: str


class UpdateLanguageRequest(BaseModel):
    """Request schema for updating a language."""
    name: str
    code: str
