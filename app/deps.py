# app/deps.py
# Role: Shared application-level dependencies.
#       Provides the Jinja2 templates loader (with the dashboard's formatting filters),
#       the standard SQLAlchemy database session dependency, and the transaction store.

"""
Shared dependencies for the ledger app.
"""

import os
from typing import Generator

from fastapi import Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from db import SessionLocal
from app import presentation
from app.services.transaction_store import TransactionStore

APP_DIR = os.path.dirname(os.path.abspath(__file__))

# -------------------------------------------------------------------
# Templates
# -------------------------------------------------------------------

# Jinja2 templates loader (used by all HTML-rendering routes)
templates = Jinja2Templates(directory=os.path.join(APP_DIR, "templates"))

templates.env.filters["money"] = presentation.format_money
templates.env.filters["day_label"] = presentation.day_label
templates.env.filters["display_date"] = presentation.display_date
templates.env.globals["category_colors"] = presentation.category_colors
templates.env.globals["leaderboard_width"] = presentation.leaderboard_width
templates.env.globals["ONLINE_COLOR"] = presentation.ONLINE_COLOR
templates.env.globals["CASH_COLOR"] = presentation.CASH_COLOR
templates.env.globals["BUDGET_COLORS"] = presentation.BUDGET_COLORS
templates.env.globals["SCOPE_THEME"] = presentation.SCOPE_THEME

# -------------------------------------------------------------------
# Database dependency
# -------------------------------------------------------------------

def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session and ensures it is closed.

    Typical usage in routes:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> TransactionStore:
    return TransactionStore(db)
