# app/errors.py
# Role: Domain exceptions raised by the transaction store and form intake.

from typing import Iterable


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationOmission(LedgerError):
    """
    A creation request lacked a required field (amount or category) or carried
    one that cannot be used. Nothing is stored.
    """

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"missing or invalid field(s): {', '.join(self.missing)}")


class TransactionNotFound(LedgerError):
    def __init__(self, transaction_id: str):
        self.transaction_id = transaction_id
        super().__init__(f"transaction {transaction_id!r} does not exist")
