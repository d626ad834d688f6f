import pytest
from starlette.testclient import TestClient

from connectfour.main import app
from connectfour.session import GameSession, get_session


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
