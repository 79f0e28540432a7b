from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional

from ..core.constants import DEFAULT_SMTP_PORT, DEFAULT_SMTP_TIMEOUT_SECONDS
from ..core.exceptions import EmailDeliveryError
from ..users.model import User
from .email_service import EmailService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    sender: str
    port: int = DEFAULT_SMTP_PORT
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = False
    timeout: float = DEFAULT_SMTP_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, smtp_config: dict) -> "SmtpConfig":
        return cls(
            host=str(smtp_config["host"]),
            sender=str(smtp_config["sender"]),
            port=int(smtp_config.get("port", DEFAULT_SMTP_PORT)),
            username=smtp_config.get("username") or None,
            password=smtp_config.get("password") or None,
            use_tls=bool(smtp_config.get("use_tls", False)),
            timeout=float(smtp_config.get("timeout", DEFAULT_SMTP_TIMEOUT_SECONDS)),
        )


class SmtpEmailService(EmailService):
    """EmailService backed by an SMTP server.

    One connection per message. No retry: a refused or failed delivery is raised
    as EmailDeliveryError with the smtplib/socket error chained.
    """

    def __init__(self, config: SmtpConfig):
        self._config = config

    def build_message(self, recipient: User, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self._config.sender
        msg["To"] = recipient.email
        msg["Subject"] = subject
        msg.set_content(body)
        return msg

    def send_email(self, recipient: User, subject: str, body: str) -> None:
        msg = self.build_message(recipient, subject, body)
        cfg = self._config
        try:
            with smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout) as smtp:
                if cfg.use_tls:
                    smtp.starttls()
                if cfg.username:
                    smtp.login(cfg.username, cfg.password or "")
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"Could not send email to {recipient.email}: {e}") from e

        logger.info("Email sent to %s (user %s): %s", recipient.email, recipient.id, subject)
