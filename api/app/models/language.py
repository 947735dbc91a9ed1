"""
Language model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone


class Language(SQLModel, table=True):
    """Language table - stores supported locales."""
    __tablename__ = "languages"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=30)  # English, French, Spanish, etc.
    code: str = Field(max_length=2, unique=True, index=True)  # e.g., 'en', 'fr', 'es'
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
