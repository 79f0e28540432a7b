from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def is_blank(value: Optional[str]) -> bool:
    """True for None, "" and whitespace-only strings."""
    return value is None or not value.strip()


def require_non_blank(value: Optional[str], message: str) -> str:
    if is_blank(value):
        raise ValidationError(message)
    return value
