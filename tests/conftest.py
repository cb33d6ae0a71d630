from __future__ import annotations

import pytest

from prana_tracker.database.bootstrap import apply_schema, ensure_demo_data
from prana_tracker.database.connection import DBConfig, DatabaseConnection
from prana_tracker.main import create_app


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'prana-test.db'}"


@pytest.fixture
def conn(db_url):
    conn = DatabaseConnection(DBConfig(url=db_url))
    apply_schema(conn)
    yield conn
    conn.dispose()


@pytest.fixture
def seeded_conn(conn):
    ensure_demo_data(conn)
    return conn


def _make_app(monkeypatch, db_url, **overrides):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = {"DATABASE_URL": db_url, "AUTO_INIT_DB": True, "AUTO_SEED_DB": False}
    settings.update(overrides)
    return create_app(settings)


@pytest.fixture
def app(monkeypatch, db_url):
    app = _make_app(monkeypatch, db_url)
    yield app
    app.extensions["prana_container"].conn.dispose()


@pytest.fixture
def seeded_app(monkeypatch, db_url):
    app = _make_app(monkeypatch, db_url, AUTO_SEED_DB=True)
    yield app
    app.extensions["prana_container"].conn.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_client(seeded_app):
    return seeded_app.test_client()
