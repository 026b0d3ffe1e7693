# app/schemas.py
# Role: Pydantic models for the JSON API (/api/...).

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.services.aggregation import DashboardView


class TransactionCreateRequest(BaseModel):
    # Everything optional so a missing amount/category becomes a
    # ValidationOmission (422 with "missing") instead of a schema error.
    amount: Optional[float] = None
    category: Optional[str] = None
    mode: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    remarks: Optional[str] = None


class TransactionOut(BaseModel):
    id: str
    amount: float
    category: str
    mode: str
    type: str
    remarks: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_orm_tx(cls, tx) -> "TransactionOut":
        return cls(
            id=tx.id,
            amount=tx.amount,
            category=tx.category,
            mode=tx.mode,
            type=tx.type,
            remarks=tx.remarks,
            created_at=tx.created_at,
        )


class TransactionListOut(BaseModel):
    transaction_count: int
    transactions: List[TransactionOut]


class CategoryTotalOut(BaseModel):
    name: str
    total: float


class DailyTotalOut(BaseModel):
    date: str
    total: float


class BudgetOut(BaseModel):
    used: float
    remaining: float
    total_income: float
    used_percent: int


class ModeSplitOut(BaseModel):
    online: float
    cash: float


class SummaryOut(BaseModel):
    scope: str
    tx_type: str
    balance: float
    transaction_count: int
    category_totals: List[CategoryTotalOut] = []
    budget: Optional[BudgetOut] = None
    mode_split: Optional[ModeSplitOut] = None
    daily_series: List[DailyTotalOut] = []
    leaderboard: List[CategoryTotalOut] = []
    unclassified: List[TransactionOut] = []


def transaction_list_out(transactions) -> TransactionListOut:
    return TransactionListOut(
        transaction_count=len(transactions),
        transactions=[TransactionOut.from_orm_tx(t) for t in transactions],
    )


def summary_out(view: DashboardView) -> SummaryOut:
    budget = None
    if view.budget is not None:
        budget = BudgetOut(
            used=view.budget.used,
            remaining=view.budget.remaining,
            total_income=view.budget.total_income,
            used_percent=view.used_percent,
        )

    mode_split = None
    if view.mode_split is not None:
        mode_split = ModeSplitOut(online=view.mode_split.online, cash=view.mode_split.cash)

    return SummaryOut(
        scope=view.context.scope.value,
        tx_type=view.context.tx_type.value,
        balance=view.balance,
        transaction_count=len(view.transactions),
        category_totals=[CategoryTotalOut(name=c.name, total=c.total) for c in view.category_totals],
        budget=budget,
        mode_split=mode_split,
        daily_series=[DailyTotalOut(date=d.date_key, total=d.total) for d in view.daily_series],
        leaderboard=[CategoryTotalOut(name=c.name, total=c.total) for c in view.leaderboard],
        unclassified=[TransactionOut.from_orm_tx(t) for t in view.unclassified],
    )
