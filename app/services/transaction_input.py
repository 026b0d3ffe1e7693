# app/services/transaction_input.py
#
# Transaction Input Helpers
# Turns a submitted add-transaction form (or JSON payload) into a clean
# TransactionInput, and parses the form's date field.

import math
import re
from dataclasses import dataclass
from datetime import datetime, date, timezone
from typing import Any, Dict, List, Optional

from app.errors import ValidationOmission
from categories import Mode, TxType
from models import utcnow

# Plain decimal notation, optional exponent ("12", "12.50", ".5", "1e3")
AMOUNT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class TransactionInput:
    amount: float
    category: str
    mode: str
    type: str
    created_at: datetime
    remarks: Optional[str] = None

    def as_kwargs(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "category": self.category,
            "mode": self.mode,
            "type": self.type,
            "created_at": self.created_at,
            "remarks": self.remarks,
        }


# ---- Field parsing ----

def parse_amount(raw: Any) -> Optional[float]:
    """
    Returns the amount as float, or None when it is missing, zero,
    negative or not a finite number.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        s = str(raw).strip()
        if not AMOUNT_RE.fullmatch(s):
            return None
        value = float(s)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def parse_created_at(raw: Any) -> Optional[datetime]:
    """
    'YYYY-MM-DD' -> midnight UTC of that day (naive, UTC).
    Empty / missing -> now (UTC). Unparseable -> None.
    """
    if isinstance(raw, datetime):
        if raw.tzinfo is not None:
            raw = raw.astimezone(timezone.utc).replace(tzinfo=None)
        return raw
    if isinstance(raw, date):
        return datetime(raw.year, raw.month, raw.day)

    s = str(raw or "").strip()
    if not s:
        return utcnow()
    try:
        day = datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        return None
    return datetime(day.year, day.month, day.day)


def today_iso() -> str:
    """Default value of the date picker (UTC calendar date)."""
    return datetime.now(timezone.utc).date().isoformat()


# ---- Transaction conversion ----

def build_transaction_input(data: Dict[str, Any]) -> TransactionInput:
    """
    Convert one submitted form / payload dict into a TransactionInput.

    Raises ValidationOmission when amount or category is unusable, or the
    date cannot be read. mode and type are kept as given (defaults: online /
    expense) since the form submits them from hidden fields.
    """
    missing: List[str] = []

    amount = parse_amount(data.get("amount"))
    if amount is None:
        missing.append("amount")

    category = str(data.get("category") or "").strip()
    if not category:
        missing.append("category")

    created_at = parse_created_at(data.get("date"))
    if created_at is None:
        missing.append("date")

    if missing:
        raise ValidationOmission(missing)

    mode = str(data.get("mode") or Mode.ONLINE.value).strip()
    tx_type = str(data.get("type") or TxType.EXPENSE.value).strip()
    remarks = str(data.get("remarks") or "").strip() or None

    return TransactionInput(
        amount=amount,
        category=category,
        mode=mode,
        type=tx_type,
        created_at=created_at,
        remarks=remarks,
    )
