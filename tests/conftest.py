# tests/conftest.py

import pytest

from mindvault import create_app
from mindvault.extensions import db as _db
from mindvault.services import IdentityService


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def make_user(session):
    """Register a user through the identity service and return its session payload"""
    def _make_user(username="alice", password="secret1"):
        return IdentityService(session).register(username, password)
    return _make_user


@pytest.fixture
def alice(make_user):
    return make_user("alice", "secret1")["user"]["id"]


@pytest.fixture
def bob(make_user):
    return make_user("bob", "hunter22")["user"]["id"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def signup(client):
    def _signup(username="alice", password="secret1"):
        response = client.post("/api/v1/signup", json={"username": username, "password": password})
        assert response.status_code == 201, response.get_json()
        return bearer(response.get_json()["token"])
    return _signup
