from __future__ import annotations

import smtplib

import pytest

from src.campus_system.campus_system.core.exceptions import EmailDeliveryError
from src.campus_system.campus_system.notifications import smtp_email_service
from src.campus_system.campus_system.notifications.smtp_email_service import SmtpConfig, SmtpEmailService
from src.campus_system.campus_system.users.model import User

MARIAH = User("3", "Mariah", "Hairam", "mariah.hairam@example.com", "teacher", "swqa")


class FakeSMTP:
    instances = []
    fail_with = None

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.calls = []
        self.sent = []
        FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.calls.append("quit")
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, username, password):
        self.calls.append(("login", username, password))

    def send_message(self, msg):
        if FakeSMTP.fail_with:
            raise FakeSMTP.fail_with
        self.sent.append(msg)


@pytest.fixture(autouse=True)
def fake_smtp(monkeypatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_with = None
    monkeypatch.setattr(smtp_email_service.smtplib, "SMTP", FakeSMTP)
    return FakeSMTP


def test_send_email_builds_message():
    service = SmtpEmailService(SmtpConfig(host="mail.local", port=2525, sender="campus@example.com"))

    service.send_email(MARIAH, "Hey! Teacher!", "Let them students alone!!")

    smtp = FakeSMTP.instances[0]
    assert (smtp.host, smtp.port) == ("mail.local", 2525)
    msg = smtp.sent[0]
    assert msg["From"] == "campus@example.com"
    assert msg["To"] == "mariah.hairam@example.com"
    assert msg["Subject"] == "Hey! Teacher!"
    assert msg.get_content().strip() == "Let them students alone!!"
    assert smtp.calls == ["quit"]


def test_send_email_uses_tls_and_login_when_configured():
    config = SmtpConfig.from_dict(
        {"host": "mail.local", "sender": "c@example.com", "username": "bot", "password": "pw", "use_tls": True}
    )

    SmtpEmailService(config).send_email(MARIAH, "S", "")

    assert FakeSMTP.instances[0].calls == ["starttls", ("login", "bot", "pw"), "quit"]


def test_send_email_wraps_smtp_errors():
    FakeSMTP.fail_with = smtplib.SMTPRecipientsRefused({"mariah.hairam@example.com": (550, b"no such user")})
    service = SmtpEmailService(SmtpConfig(host="mail.local", sender="c@example.com"))

    with pytest.raises(EmailDeliveryError) as exc:
        service.send_email(MARIAH, "S", "B")

    assert isinstance(exc.value.__cause__, smtplib.SMTPRecipientsRefused)
    assert "mariah.hairam@example.com" in str(exc.value)
