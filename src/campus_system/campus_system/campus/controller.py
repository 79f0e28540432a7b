from __future__ import annotations

import traceback

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

USER_FIELDS = ("id", "name", "surname", "email", "role", "group_name")
GROUP_FIELDS = ("id", "name")


def _fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def _require_fields(payload: dict, fields) -> list:
    missing = [f for f in fields if payload.get(f) is None]
    if missing:
        raise ValidationError(f"Missing field: {missing[0]}")
    return [str(payload[f]) for f in fields]


def register(app: Flask, container: Container) -> None:
    campus = container.campus_app

    def handle(action, *, status: int = 200):
        """Run a facade call and map domain errors to JSON responses."""
        try:
            action()
        except ValidationError as e:
            return _fail(str(e), 400)
        except NotFoundError as e:
            return _fail(str(e), 404)
        except Exception as e:
            traceback.print_exc()
            if bool(app.config.get("DEBUG", False)):
                return _fail(f"Internal error: {e}", 500)
            return _fail("Internal error while processing the request", 500)
        return jsonify({"success": True}), status

    @app.route("/groups", methods=["POST"], endpoint="create_group")
    def create_group():
        payload = request.get_json(silent=True) or {}

        def action():
            group_id, name = _require_fields(payload, GROUP_FIELDS)
            campus.create_group(group_id, name)

        return handle(action, status=201)

    @app.route("/users", methods=["POST"], endpoint="create_user")
    def create_user():
        payload = request.get_json(silent=True) or {}

        def action():
            campus.create_user(*_require_fields(payload, USER_FIELDS))

        return handle(action, status=201)

    @app.route("/groups/<group_name>/emails", methods=["POST"], endpoint="send_group_email")
    def send_group_email(group_name: str):
        payload = request.get_json(silent=True) or {}
        subject = payload.get("subject") or ""
        body = payload.get("body") or ""
        role = payload.get("role")

        def action():
            if role is not None:
                campus.send_mail_to_group_role(group_name, role, subject, body)
            else:
                campus.send_mail_to_group(group_name, subject, body)

        return handle(action)

    @app.route("/teachers/<user_id>/emails", methods=["POST"], endpoint="send_teacher_email")
    def send_teacher_email(user_id: str):
        payload = request.get_json(silent=True) or {}
        subject = payload.get("subject")
        body = payload.get("body")

        def action():
            if "confirm" in payload:
                confirm = payload["confirm"]
                if not isinstance(confirm, bool):
                    raise ValidationError("Invalid field: confirm")
                campus.send_email_to_teacher_id_with_confirmation(user_id, subject, body, confirm)
            else:
                campus.send_email_to_teacher_id(user_id, subject, body if body is not None else "")

        return handle(action)

    @app.route("/birthdays/emails", methods=["POST"], endpoint="send_birthday_emails")
    def send_birthday_emails():
        return handle(campus.send_birthday_emails)
