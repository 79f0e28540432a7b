from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import BirthdayEmailData, User


class UsersRepository(Protocol):
    """Repository interface for users and groups.

    Note (DIP): CampusApp depends on this interface, never on a concrete DB.
    """

    def get_users_by_group(self, group_name: str) -> Sequence[User]:
        raise NotImplementedError

    def get_users_in_birthday(self) -> Sequence[BirthdayEmailData]:
        raise NotImplementedError

    def create_user(
        self,
        id: str,
        name: str,
        surname: str,
        email: str,
        role: str,
        group_name: str,
    ) -> None:
        raise NotImplementedError

    def create_group(self, id: str, name: str) -> None:
        raise NotImplementedError

    def get_user_by_id(self, id: str) -> Optional[User]:
        raise NotImplementedError
