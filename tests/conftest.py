# tests/conftest.py
import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from nexa.core.database import Base, Store, build_engine, get_store
from nexa.main import app


class BrokenStore(Store):
    def __init__(self):
        self.calls = []

    def execute(self, sql, params=()):
        self.calls.append((sql, list(params)))
        raise OperationalError(sql, list(params), Exception("connection refused by db-host:5432"))

    def ping(self):
        raise OperationalError("SELECT 1", {}, Exception("connection refused by db-host:5432"))


@pytest.fixture
def store(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'tickets.db'}")
    Base.metadata.create_all(bind=engine)
    yield Store(engine)
    engine.dispose()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def broken_client(broken_store):
    app.dependency_overrides[get_store] = lambda: broken_store
    yield TestClient(app)
    app.dependency_overrides.clear()
