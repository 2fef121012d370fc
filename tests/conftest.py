import pytest

from db import get_session
from main import create_app
from tests.factories import VoltageRegulatorFactory


@pytest.fixture
def app(tmp_path):
    """Application bound to a throwaway SQLite file."""
    app = create_app(f"sqlite:///{tmp_path / 'jlcreg-test.sqlite'}")
    app.config.update(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    """Session shared with the factories; rows are committed on create."""
    session = get_session()
    VoltageRegulatorFactory._meta.sqlalchemy_session = session
    yield session
    VoltageRegulatorFactory._meta.sqlalchemy_session = None
    session.close()
