from __future__ import annotations

from typing import Protocol

from ..users.model import User


class EmailService(Protocol):
    """Sends a single email to a user.

    Delivery failures are the implementation's concern; callers only see the raised error.
    """

    def send_email(self, recipient: User, subject: str, body: str) -> None:
        raise NotImplementedError
