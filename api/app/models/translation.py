"""
Translation model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import UniqueConstraint


class Translation(SQLModel, table=True):
    """Translation table - one string value per (group, key, language)."""
    __tablename__ = "translations"
    # Language is a plain code, not a foreign key: deleting a Language leaves its rows in place
    __table_args__ = (
        UniqueConstraint("group", "key", "language", name="uq_translation_group_key_language"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    group: str = Field(max_length=50, index=True)  # Namespace, e.g. a UI section
    key: str = Field(max_length=50)
    language: str = Field(max_length=2, index=True)
    value: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None
