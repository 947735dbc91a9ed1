"""
Field validation shared by the language and translation stores.
"""
import re
from typing import Optional

from app.core.exceptions import ValidationError

LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}$")

LANGUAGE_NAME_LENGTH = (2, 30)
GROUP_LENGTH = (3, 50)
KEY_LENGTH = (3, 50)


def require_length(field: str, value: Optional[str], bounds: tuple[int, int]) -> str:
    """
    Trim a string field and check its length.

    Args:
        field: Field name reported in the error
        value: Raw value
        bounds: Inclusive (min, max) length

    Returns:
        The trimmed value

    Raises:
        ValidationError: If the value is missing or out of bounds
    """
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", field=field, value=value)

    trimmed = value.strip()
    minimum, maximum = bounds
    if len(trimmed) < minimum:
        raise ValidationError(
            f"{field} must be at least {minimum} characters",
            field=field,
            value=value
        )
    if len(trimmed) > maximum:
        raise ValidationError(
            f"{field} cannot exceed {maximum} characters",
            field=field,
            value=value
        )
    return trimmed


def require_language_code(field: str, value: Optional[str]) -> str:
    """Trim a language code and check it is exactly 2 lowercase letters."""
    trimmed = value.strip() if value else ""
    if not LANGUAGE_CODE_PATTERN.match(trimmed):
        raise ValidationError(
            f"{field} must be exactly 2 lowercase letters (e.g., en, fr, es)",
            field=field,
            value=value
        )
    return trimmed


def require_pagination(take: int, skip: int) -> None:
    if take is None or take <= 0:
        raise ValidationError("take must be a positive integer", field="take", value=take)
    if skip is None or skip < 0:
        raise ValidationError("skip must be a non-negative integer", field="skip", value=skip)


def require_present(field: str, value: Optional[str]) -> str:
    """Check a lookup argument is non-empty; no length bounds apply."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required", field=field, value=value)
    return value.strip()
