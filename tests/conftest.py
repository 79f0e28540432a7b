from __future__ import annotations

import pytest

from src.campus_system.campus_system.campus.service import CampusApp
from tests.fakes import DEFAULT_INITIAL_STATE, CampusAppState, InMemoryEmailService, InMemoryUsersRepository


@pytest.fixture
def state() -> CampusAppState:
    return DEFAULT_INITIAL_STATE.copy()


@pytest.fixture
def campus(state: CampusAppState) -> CampusApp:
    return CampusApp(
        InMemoryUsersRepository(state.users_repository),
        InMemoryEmailService(state.sent_emails),
    )
