from __future__ import annotations

from dataclasses import dataclass

from .campus.service import CampusApp
from .database.connection import DBConfig, DatabaseConnection
from .notifications.email_service import EmailService
from .notifications.smtp_email_service import SmtpConfig, SmtpEmailService
from .users.mysql_users_repository import MySQLUsersRepository
from .users.repository import UsersRepository


@dataclass(frozen=True)
class Container:
    users_repo: UsersRepository
    email_service: EmailService

    campus_app: CampusApp


def build_container(*, db_config: dict, smtp_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    users_repo = MySQLUsersRepository(conn)
    email_service = SmtpEmailService(SmtpConfig.from_dict(smtp_config))

    return Container(
        users_repo=users_repo,
        email_service=email_service,
        campus_app=CampusApp(users_repo, email_service),
    )


def build_campus_app(*, db_config: dict, smtp_config: dict) -> CampusApp:
    """Production CampusApp: MySQL-backed users, SMTP email."""
    return build_container(db_config=db_config, smtp_config=smtp_config).campus_app
