from __future__ import annotations

import pytest

from src.campus_system.campus_system.campus.service import CampusApp
from src.campus_system.campus_system.container import Container
from src.campus_system.campus_system.main import create_app
from tests.fakes import DEFAULT_INITIAL_STATE, InMemoryEmailService, InMemoryUsersRepository, SentEmail


class ExplodingRepo(InMemoryUsersRepository):
    def get_users_by_group(self, group_name):
        raise RuntimeError("db down")


@pytest.fixture
def client(monkeypatch, state):
    monkeypatch.setenv("APP_ENV", "testing")
    users_repo = InMemoryUsersRepository(state.users_repository)
    email_service = InMemoryEmailService(state.sent_emails)
    container = Container(
        users_repo=users_repo,
        email_service=email_service,
        campus_app=CampusApp(users_repo, email_service),
    )
    return create_app(container).test_client()


def test_create_group_returns_201(client, state):
    resp = client.post("/groups", json={"id": "9", "name": "robotics"})

    assert resp.status_code == 201
    assert resp.get_json() == {"success": True}
    assert state.users_repository.groups[-1].name == "robotics"


def test_create_user_missing_field_returns_400(client, state):
    resp = client.post("/users", json={"id": "9", "name": "A", "surname": "B", "email": "a@b.c", "role": "student"})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Missing field: group_name"}
    assert state.users_repository.users == DEFAULT_INITIAL_STATE.users_repository.users


def test_create_user(client, state):
    resp = client.post(
        "/users",
        json={"id": "9", "name": "A", "surname": "B", "email": "a@b.c", "role": "student", "group_name": "swqa"},
    )

    assert resp.status_code == 201
    assert state.users_repository.users[-1].id == "9"


def test_group_email_with_role_filter(client, state):
    resp = client.post("/groups/swqa/emails", json={"subject": "S", "body": "B", "role": "teacher"})

    assert resp.status_code == 200
    assert state.sent_emails == [SentEmail("mariah.hairam@example.com", "S", "B")]


def test_group_email_to_everyone(client, state):
    resp = client.post("/groups/swqa/emails", json={"subject": "S", "body": "B"})

    assert resp.status_code == 200
    assert len(state.sent_emails) == 3


def test_teacher_email_unknown_user_returns_404(client, state):
    resp = client.post("/teachers/-1/emails", json={"subject": "S", "body": "B"})

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User -1 does not exist"
    assert state.sent_emails == []


def test_teacher_email_confirmation_message_is_returned_verbatim(client, state):
    resp = client.post("/teachers/3/emails", json={"subject": "S", "body": None, "confirm": False})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == (
        "No se ha indicado el cuerpo del mensaje. Infórmelo o marque la casilla 'Confirmar'"
    )


def test_teacher_email_confirmed_without_body(client, state):
    resp = client.post("/teachers/3/emails", json={"subject": "S", "confirm": True})

    assert resp.status_code == 200
    assert state.sent_emails == [SentEmail("mariah.hairam@example.com", "S", "")]


def test_birthday_emails_are_printed(client, state, capsys):
    resp = client.post("/birthdays/emails")

    assert resp.status_code == 200
    assert "to: jane.doe@example.com" in capsys.readouterr().out
    assert state.sent_emails == []


def test_unexpected_error_returns_500(monkeypatch, state):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = ExplodingRepo(state.users_repository)
    emails = InMemoryEmailService(state.sent_emails)
    app = create_app(Container(users_repo=repo, email_service=emails, campus_app=CampusApp(repo, emails)))

    resp = app.test_client().post("/groups/swqa/emails", json={"subject": "S", "body": "B"})

    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Internal error while processing the request"}


def test_group_email_with_empty_role_matches_nobody(client, state):
    resp = client.post("/groups/swqa/emails", json={"subject": "S", "body": "B", "role": ""})

    assert resp.status_code == 200
    assert state.sent_emails == []


@pytest.mark.parametrize("confirm", ["false", "true", 0, 1, None])
def test_teacher_email_confirm_must_be_boolean(client, state, confirm):
    resp = client.post("/teachers/3/emails", json={"subject": "S", "confirm": confirm})

    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Invalid field: confirm"}
    assert state.sent_emails == []
