"""
Translation schemas.
"""
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime


class TranslationResponse(BaseModel):
    """Translation row response schema."""
    id: int
    group: str
    key: str
    language: str
    value: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class CreateTranslationRequest(BaseModel):
    """Request schema for creating a translation."""
    group: str
    key: str
    language: str
    value: Optional[str] = None


class TranslationGroupResponse(BaseModel):
    """A distinct (group, key) pair with the languages that have a value."""
    group: str
    key: str
    languages: List[str]

    class Config:
        from_attributes = True


class TranslationListResponse(BaseModel):
    """Page of (group, key) records with the total distinct pair count."""
    data: List[TranslationGroupResponse]
    count: int


class TranslateResponse(BaseModel):
    """Resolved string for one (group, key) in a locale."""
    group: str
    key: str
    locale: str
    value: str


class BundleResponse(BaseModel):
    """All strings of a locale, nested as group -> key -> value."""
    locale: str
    translations: Dict[str, Dict[str, str]]


class TranslationStatsResponse(BaseModel):
    total_translations: int
    total_groups: int
    total_keys: int
    language_distribution: Dict[str, int]


class MachineTranslationRequest(BaseModel):
    """Request schema for machine-translating a value into another language."""
    group: str
    key: str
    value: str = Field(..., description="Source text to translate")
    target_language: str = Field(..., description="Target language code, e.g. 'fr' or 'en-GB'")
    source_language: Optional[str] = Field(default=None, description="Source language code; auto-detected if omitted")

    class Config:
        json_schema_extra = {
            "example": {
                "group": "checkout",
                "key": "pay_now",
                "value": "Pay now",
                "target_language": "fr",
                "source_language": "en"
            }
        }


class CombinationUpdateResponse(BaseModel):
    """Per-language outcome of a combination update."""
    updated: List[str]
    deleted: List[str]
    unchanged: List[str]
    failed: Dict[str, str]
