from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object (no DB access code). Identity is `id`.
    """

    id: str
    name: str
    surname: str
    email: str
    role: str
    group_name: Optional[str] = None
    created_at: Optional[date] = None


@dataclass(frozen=True)
class BirthdayEmailData:
    """What the birthday greeting needs to know about a user."""

    email: str
    name: str
    surname: str
    created_at: date
