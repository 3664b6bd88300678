"""HTTP client fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.catalog.api.http.app import app
from src.catalog.api.http.deps import get_db_session

__all__ = ["client"]


@pytest.fixture
def client(session: Session) -> Iterator[TestClient]:
    """Test client whose requests share the test's database session."""

    def _override_session() -> Iterator[Session]:
        yield session

    app.dependency_overrides[get_db_session] = _override_session
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
