import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="techhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'default.db')}"
os.environ["LOG_DIR"] = os.path.join(_TMP_DIR, "logs")

import pytest
from fastapi.testclient import TestClient

from techhub.api import deps
from techhub.database.database import init_db, make_engine, make_session_factory
from techhub.main import app


@pytest.fixture
def engine(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'techhub.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def broken_session_factory():
    # Points at a directory that does not exist, every connect fails
    engine = make_engine("sqlite:////nonexistent-techhub-dir/techhub.db")
    yield make_session_factory(engine)
    engine.dispose()


def _override(factory):
    def get_db():
        with factory() as session:
            yield session
    app.dependency_overrides[deps.get_db] = get_db
    app.dependency_overrides[deps.get_session_factory] = lambda: factory


@pytest.fixture
def client(session_factory):
    _override(session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(broken_session_factory):
    _override(broken_session_factory)
    yield TestClient(app)
    app.dependency_overrides.clear()
