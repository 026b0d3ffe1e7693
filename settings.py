# settings.py
# Role: Environment-driven configuration for the wallet ledger.
#       Values come from the process environment (optionally seeded from a .env file).

"""
Runtime settings.

Environment variables:
- DATABASE_URL            SQLAlchemy URL (default: SQLite file under <project_root>/database/)
- LEDGER_LOG_LEVEL        logging level name or number (default: INFO)
- LEDGER_CURRENCY_SYMBOL  symbol shown in front of amounts (default: ₹)
- LEDGER_DEFAULT_SCOPE    dashboard tab opened by "/" (default: online)
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# Base directory of the project (where this module lives)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Folder for the default SQLite DB
DB_DIR = os.path.join(BASE_DIR, "database")


def default_database_url() -> str:
    return f"sqlite:///{os.path.join(DB_DIR, 'ledger.db')}"


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str
    currency_symbol: str
    default_scope: str


def get_settings() -> Settings:
    """
    Read settings from the environment.

    Called at import time by db.py and per request by the routes, so tests can
    override values with monkeypatch.setenv.
    """
    database_url = (os.getenv("DATABASE_URL") or "").strip() or default_database_url()

    return Settings(
        database_url=database_url,
        log_level=os.getenv("LEDGER_LOG_LEVEL", "INFO"),
        currency_symbol=currency_symbol(),
        default_scope=os.getenv("LEDGER_DEFAULT_SCOPE", "online").strip().lower(),
    )


def currency_symbol() -> str:
    """Symbol printed in front of amounts."""
    return os.getenv("LEDGER_CURRENCY_SYMBOL", "₹")
