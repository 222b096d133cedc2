import pytest

from db import init_db, get_session
from main import create_app
from tests import factories


@pytest.fixture
def db_url(tmp_path):
    """A fresh SQLite file per test, so ids always start at 1."""
    return f"sqlite:///{tmp_path / 'labwhere_test.db'}"


@pytest.fixture
def database(db_url):
    init_db(db_url)
    return db_url


@pytest.fixture
def session(database):
    """Open a session and bind the factories to it."""
    s = get_session()
    factories.bind_session(s)
    yield s
    s.close()


@pytest.fixture
def app(database):
    app = create_app(database)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()
