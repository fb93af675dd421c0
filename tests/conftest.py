import pytest
from fastapi.testclient import TestClient

from blog_backend.config import Settings
from blog_backend.main import create_app
from blog_backend.security import Authenticator
from blog_backend.store import DocumentStore


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DB_FILE=str(tmp_path / "db.json"),
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        APP_ENV="development",
    )


@pytest.fixture
def store(tmp_path):
    return DocumentStore(tmp_path / "db.json")


@pytest.fixture
def authenticator():
    return Authenticator("test-secret", rounds=4)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(client):
    def _make(email="a@x.com", password="pw123456", username="alice"):
        resp = client.post("/auth/register", json={"email": email, "password": password, "username": username})
        assert resp.status_code == 201, resp.text
        body = resp.json()
        return body["user"], {"Authorization": f"Bearer {body['token']}"}

    return _make
