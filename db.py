# db.py
# Role: Database bootstrap for the wallet ledger.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.

"""
Database setup for the wallet ledger.

- Reads DATABASE_URL through settings.get_settings()
  (default: SQLite database at <project_root>/database/ledger.db).
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from settings import DB_DIR, default_database_url, get_settings


def make_engine(database_url: str):
    """
    Build an engine for the given URL.

    For SQLite, we need check_same_thread=False for FastAPI (threaded request handling).
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(database_url, connect_args=connect_args)


# SQLAlchemy connection URL
DATABASE_URL = get_settings().database_url

# Folder for the default SQLite DB (created on startup if missing)
if DATABASE_URL == default_database_url():
    os.makedirs(DB_DIR, exist_ok=True)

engine = make_engine(DATABASE_URL)

# Standard session factory used via dependency injection (see app/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()
