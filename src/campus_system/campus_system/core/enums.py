from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Well-known campus roles.

    User.role stays a plain string; unknown roles are stored and compared as-is.
    """

    TEACHER = "teacher"
    STUDENT = "student"
