# models.py
# Role: SQLAlchemy ORM models for the wallet ledger.
#       Defines the Transaction model, one row per recorded income or expense.

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, Text, DateTime
from db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite stores datetimes without tzinfo)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Transaction(Base):
    """
    ORM model representing a single income or expense entry.

    mode / type / category are stored as plain text: the allowed values live in
    categories.py and are only enforced by the input form.
    """

    __tablename__ = "transactions"

    # Primary key (uuid4 string, assigned on creation)
    id = Column(String(36), primary_key=True, default=_new_id)

    # Always non-negative; the sign comes from `type`
    amount = Column(Float, nullable=False)

    category = Column(String, nullable=False)

    # "cash" or "online"
    mode = Column(String, nullable=False)

    # "income" or "expense"
    type = Column(String, nullable=False)

    # Optional free-text note
    remarks = Column(Text, nullable=True)

    # UTC; used as display date and as sort / bucketing key
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.id} {self.type} {self.amount} "
            f"{self.category!r} {self.mode} {self.created_at}>"
        )
