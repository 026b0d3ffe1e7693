# app/services/transaction_store.py
"""
Transaction store: the only code that writes to or reads from the
transactions table.

Callers follow a "mutate, then re-read" contract: after create() or
delete_by_id() they call list_all() again to get the fresh list.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import TransactionNotFound, ValidationOmission
from app.services.transaction_input import parse_amount, parse_created_at
from logging_setup import get_logger
from models import Transaction

log = get_logger("ledger.store")


class TransactionStore:
    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        amount: float,
        category: str,
        mode: str,
        type: str,
        created_at: Optional[datetime] = None,
        remarks: Optional[str] = None,
    ) -> Transaction:
        """
        Insert one transaction and return it.

        Raises ValidationOmission (and stores nothing) when amount is
        missing, zero, negative or not a finite number, when category is
        blank, or when created_at cannot be read. An aware created_at is
        converted to UTC before it is stored.
        """
        missing = []
        value = parse_amount(amount)
        if value is None:
            missing.append("amount")
        label = str(category or "").strip()
        if not label:
            missing.append("category")
        timestamp = parse_created_at(created_at)
        if timestamp is None:
            missing.append("date")
        if missing:
            raise ValidationOmission(missing)

        tx = Transaction(
            amount=value,
            category=label,
            mode=mode,
            type=type,
            remarks=remarks or None,
            created_at=timestamp,
        )

        try:
            self.db.add(tx)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("[create] ERROR during DB insert: %r", e)
            raise

        self.db.refresh(tx)
        log.info(
            "[create] %s | %s | %s %s | %s",
            tx.created_at.date(), tx.category, tx.type, tx.amount, tx.mode,
        )
        return tx

    def list_all(self) -> List[Transaction]:
        """All transactions, newest first."""
        return (
            self.db.query(Transaction)
            .order_by(Transaction.created_at.desc())
            .all()
        )

    def get(self, transaction_id: str) -> Optional[Transaction]:
        return self.db.get(Transaction, transaction_id)

    def delete_by_id(self, transaction_id: str) -> None:
        """
        Permanently delete one transaction.

        Raises TransactionNotFound when the id does not exist; the table is
        left untouched in that case.
        """
        tx = self.get(transaction_id)
        if tx is None:
            log.info("[delete] No transaction with id=%r", transaction_id)
            raise TransactionNotFound(transaction_id)

        try:
            self.db.delete(tx)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log.error("[delete] ERROR during DB delete of id=%r: %r", transaction_id, e)
            raise

        log.info("[delete] Removed transaction id=%r", transaction_id)
