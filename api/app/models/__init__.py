"""
Models package - imports all models so they register with SQLModel metadata.
"""
from app.models.language import Language
from app.models.translation import Translation

__all__ = [
    'Language',
    'Translation',
]
