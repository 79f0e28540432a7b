from __future__ import annotations

from typing import Optional

from ..common.validators import is_blank, require_non_blank
from ..core.constants import BIRTHDAY_SEPARATOR, BIRTHDAY_SUBJECT
from ..core.enums import Role
from ..core.exceptions import NotFoundError, ValidationError
from ..notifications.email_service import EmailService
from ..users.model import BirthdayEmailData
from ..users.repository import UsersRepository

SUBJECT_MANDATORY = "The email subject is mandatory"
BODY_MISSING = "No se ha indicado el cuerpo del mensaje. Infórmelo o marque la casilla 'Confirmar'"
BODY_BLANK_CONFIRMED = "El cuerpo debería ser nulo. Cámbielo y mantenga marcada la casilla 'Confirmar'"
BODY_BLANK_UNCONFIRMED = "El cuerpo debería ser nulo. Cámbielo y marque la casilla 'Confirmar'"


def format_birthday_greeting(data: BirthdayEmailData) -> str:
    return (
        f"{BIRTHDAY_SEPARATOR}\n"
        f"to: {data.email}\n"
        f"subject: {BIRTHDAY_SUBJECT}\n"
        "body:\n"
        f"Happy campus birthday {data.name} {data.surname}!\n"
        f"You have been with us since {data.created_at}\n"
        f"{BIRTHDAY_SEPARATOR}\n"
    )


class CampusApp:
    """Use cases: campus users, groups and email notifications.

    Errors from the repository or the email service propagate unmodified; a failing
    send aborts the remaining recipients and nothing already sent is rolled back.
    """

    def __init__(self, users: UsersRepository, emails: EmailService):
        self._users = users
        self._emails = emails

    def send_mail_to_group(self, group_name: str, subject: str, body: str) -> None:
        for user in self._users.get_users_by_group(group_name):
            self._emails.send_email(user, subject, body)

    def send_mail_to_group_role(self, group_name: str, role_name: str, subject: str, body: str) -> None:
        for user in self._users.get_users_by_group(group_name):
            if user.role == role_name:
                self._emails.send_email(user, subject, body)

    def send_birthday_emails(self) -> None:
        # Greetings are printed, not mailed.
        for data in self._users.get_users_in_birthday():
            print(format_birthday_greeting(data))

    def create_user(self, id: str, name: str, surname: str, email: str, role: str, group_name: str) -> None:
        self._users.create_user(id, name, surname, email, role, group_name)

    def create_group(self, id: str, name: str) -> None:
        self._users.create_group(id, name)

    def send_email_to_teacher_id(self, id: str, subject: Optional[str], body: str) -> None:
        subject = require_non_blank(subject, SUBJECT_MANDATORY)

        user = self._users.get_user_by_id(id)
        if user is None:
            raise NotFoundError(f"User {id} does not exist")
        if user.role != Role.TEACHER.value:
            raise ValidationError(f"User {id} is not a teacher")

        self._emails.send_email(user, subject, body)

    def send_email_to_teacher_id_with_confirmation(
        self,
        id: str,
        subject: Optional[str],
        body: Optional[str],
        confirm: bool,
    ) -> None:
        """Reconcile an optionally empty body with the 'Confirmar' checkbox, then send.

        confirm=True:  None becomes "", "" passes through, whitespace-only is rejected.
        confirm=False: None and any blank body are rejected.
        """
        if confirm:
            if body is None:
                body = ""
            elif body != "" and is_blank(body):
                raise ValidationError(BODY_BLANK_CONFIRMED)
        elif body is None:
            raise ValidationError(BODY_MISSING)
        elif is_blank(body):
            raise ValidationError(BODY_BLANK_UNCONFIRMED)

        self.send_email_to_teacher_id(id, subject, body)
