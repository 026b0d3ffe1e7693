"""Pytest configuration: one throwaway SQLite database per test.

db.py builds its module-level engine from DATABASE_URL at import time, so the
variable is pointed at an in-memory database before any app module is
imported. Tests that touch the database use the per-test file-backed engine
below; the HTTP client overrides the ``get_db`` dependency to use it.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy.orm import sessionmaker  # noqa: E402

from db import Base, make_engine  # noqa: E402
from models import Transaction  # noqa: E402


@pytest.fixture
def engine(tmp_path: Path):
    # File-backed so every session of a test sees the same data
    eng = make_engine(f"sqlite:///{tmp_path / 'ledger-test.db'}")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db_session):
    from app.services.transaction_store import TransactionStore

    return TransactionStore(db_session)


@pytest.fixture
def client(session_factory):
    from fastapi.testclient import TestClient

    from app.deps import get_db
    from main import app

    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_tx():
    """Build an unsaved Transaction for the pure aggregation functions."""

    counter = {"n": 0}

    def _make(
        amount: float,
        type: str = "expense",
        mode: str = "cash",
        category: str = "Food",
        created_at: str | datetime = "2024-01-01",
        remarks: str | None = None,
    ) -> Transaction:
        counter["n"] += 1
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return Transaction(
            id=f"tx-{counter['n']}",
            amount=amount,
            type=type,
            mode=mode,
            category=category,
            created_at=created_at,
            remarks=remarks,
        )

    return _make
