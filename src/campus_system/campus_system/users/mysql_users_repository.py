from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import birthday_month_days, today_local
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import BirthdayEmailData, User
from .repository import UsersRepository

_USER_COLUMNS = """
    u.id, u.name, u.surname, u.email, u.role, u.created_at,
    g.name AS group_name
"""


def _row_to_user(row: dict) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"],
        surname=row["surname"],
        email=row["email"],
        role=row["role"],
        group_name=row.get("group_name"),
        created_at=normalize_mysql_date(row.get("created_at")),
    )


class MySQLUsersRepository(UsersRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, today: Callable[[], date] = today_local):
        self._conn_factory = conn_factory
        self._today = today

    def get_users_by_group(self, group_name: str) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_USER_COLUMNS}
                FROM campus_users u
                JOIN campus_groups g ON g.id = u.group_id
                WHERE g.name=%s
                ORDER BY u.id
                """,
                (group_name,),
            )
            return [_row_to_user(r) for r in fetchall(cur)]

    def get_users_in_birthday(self) -> Sequence[BirthdayEmailData]:
        pairs = birthday_month_days(self._today())
        clause = " OR ".join("(MONTH(created_at)=%s AND DAY(created_at)=%s)" for _ in pairs)
        params = tuple(v for pair in pairs for v in pair)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT email, name, surname, created_at
                FROM campus_users
                WHERE created_at IS NOT NULL AND ({clause})
                ORDER BY id
                """,
                params,
            )
            return [
                BirthdayEmailData(
                    email=r["email"],
                    name=r["name"],
                    surname=r["surname"],
                    created_at=normalize_mysql_date(r["created_at"]),
                )
                for r in fetchall(cur)
            ]

    def create_user(
        self,
        id: str,
        name: str,
        surname: str,
        email: str,
        role: str,
        group_name: str,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM campus_groups WHERE name=%s", (group_name,))
            group = fetchone(cur)
            if not group:
                raise NotFoundError(f"Group {group_name} does not exist")

            cur.execute(
                """
                INSERT INTO campus_users(id, name, surname, email, role, group_id, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (id, name, surname, email, role, group["id"], self._today()),
            )

    def create_group(self, id: str, name: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO campus_groups(id, name) VALUES(%s,%s)", (id, name))

    def get_user_by_id(self, id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_USER_COLUMNS}
                FROM campus_users u
                LEFT JOIN campus_groups g ON g.id = u.group_id
                WHERE u.id=%s
                """,
                (id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return _row_to_user(row)
