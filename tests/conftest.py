import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from aralchi.core.config import Settings
from aralchi.db.session import create_db_engine, get_session
from aralchi.main import create_app


@pytest.fixture(scope="function")
def settings():
    """Settings pointing at a private in-memory database."""
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret-with-at-least-32-bytes!!",
        LOG_LEVEL="WARNING",
        CREATE_TABLES_ON_STARTUP=True,
    )


@pytest.fixture(scope="function")
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(client):
    """Session on the same engine the running app uses."""
    with Session(client.app.state.engine) as session:
        yield session


@pytest.fixture(scope="function")
def broken_store(client):
    """Serve requests from a database with no tables, so every query fails."""
    engine = create_db_engine("sqlite://")

    def session_without_schema():
        with Session(engine) as session:
            yield session

    client.app.dependency_overrides[get_session] = session_without_schema
    yield
    client.app.dependency_overrides.clear()
    engine.dispose()


def register(client, email="user@example.com", password="secret123", category_ids=None):
    body = {"email": email, "password": password}
    if category_ids is not None:
        body["categoryIds"] = category_ids
    return client.post("/api/auth/register", json=body)


def login(client, email="user@example.com", password="secret123"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def create_category(client, name):
    response = client.post("/api/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()["id"]


@pytest.fixture(scope="function")
def token(client):
    assert register(client).status_code == 201
    return login(client).json()["token"]
