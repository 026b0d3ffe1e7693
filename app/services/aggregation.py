# app/services/aggregation.py
#
# Dashboard aggregation
# Pure functions that turn the full transaction list (newest first, as returned
# by TransactionStore.list_all) into the numbers and series shown on the dashboard.
# Nothing here touches the database or mutates its input.

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from categories import Mode, Scope, SpecialCategory, TxType


# ---- View-model types ----

@dataclass(frozen=True)
class ViewContext:
    """Which tab is open and which type the add form is set to."""

    scope: Scope = Scope.ONLINE
    tx_type: TxType = TxType.EXPENSE


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    total: float


@dataclass(frozen=True)
class DailyTotal:
    date_key: str  # YYYY-MM-DD (UTC)
    total: float


@dataclass(frozen=True)
class BudgetSplit:
    used: float
    remaining: float
    total_income: float


@dataclass(frozen=True)
class ModeSplit:
    online: float
    cash: float


@dataclass
class DashboardView:
    context: ViewContext
    balance: float
    transactions: list = field(default_factory=list)
    # wallet tabs
    category_totals: List[CategoryTotal] = field(default_factory=list)
    budget: Optional[BudgetSplit] = None
    used_percent: int = 0
    # overview tab
    mode_split: Optional[ModeSplit] = None
    daily_series: List[DailyTotal] = field(default_factory=list)
    leaderboard: List[CategoryTotal] = field(default_factory=list)
    unclassified: list = field(default_factory=list)

    @property
    def is_overview(self) -> bool:
        return self.context.scope == Scope.OVERVIEW


# ---- Helpers ----

def _value(v) -> str:
    # Enum members and plain strings compare the same way
    return v.value if hasattr(v, "value") else v


def _of_type(transactions: Iterable, type_filter) -> list:
    if type_filter is None:
        return list(transactions)
    wanted = _value(type_filter)
    return [t for t in transactions if t.type == wanted]


def utc_date_key(ts: datetime) -> str:
    """
    Calendar date of `ts` in UTC as 'YYYY-MM-DD'.
    Naive datetimes are taken to be UTC already.
    """
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%d")


# ---- Operations ----

def wallet_filter(transactions: Sequence, mode) -> list:
    """
    Transactions whose mode equals `mode`, in input order.
    `Scope.OVERVIEW` (or None) means no filtering.
    """
    if mode is None or _value(mode) == Scope.OVERVIEW.value:
        return list(transactions)
    wanted = _value(mode)
    return [t for t in transactions if t.mode == wanted]


def compute_balance(transactions: Iterable) -> float:
    """
    Income minus expenses. Entries with any other type are ignored.
    """
    income = []
    expense = []
    for t in transactions:
        if t.type == TxType.INCOME.value:
            income.append(t.amount)
        elif t.type == TxType.EXPENSE.value:
            expense.append(t.amount)
    return math.fsum(income) - math.fsum(expense)


def group_by_category(transactions: Iterable, type_filter=TxType.EXPENSE) -> Dict[str, float]:
    """
    Sum amounts per category, keyed in first-seen order (not sorted).
    Pass type_filter=None to include every type.
    """
    parts: Dict[str, list] = {}
    for t in _of_type(transactions, type_filter):
        parts.setdefault(t.category, []).append(t.amount)
    return {name: math.fsum(amounts) for name, amounts in parts.items()}


def category_totals(transactions: Iterable, type_filter=TxType.EXPENSE) -> List[CategoryTotal]:
    return [
        CategoryTotal(name, total)
        for name, total in group_by_category(transactions, type_filter).items()
    ]


def category_leaderboard(transactions: Iterable) -> List[CategoryTotal]:
    """
    Expense totals per category, lowest first.
    sorted() is stable, so equal totals keep their first-seen order.
    """
    return sorted(category_totals(transactions, TxType.EXPENSE), key=lambda c: c.total)


def compute_budget_split(transactions: Iterable) -> BudgetSplit:
    """
    Used vs remaining for one wallet. Remaining is clamped at zero when the
    wallet is over budget.
    """
    transactions = list(transactions)
    total_income = math.fsum(t.amount for t in _of_type(transactions, TxType.INCOME))
    total_expense = math.fsum(t.amount for t in _of_type(transactions, TxType.EXPENSE))
    remaining = total_income - total_expense

    return BudgetSplit(
        used=total_expense,
        remaining=remaining if remaining > 0 else 0.0,
        total_income=total_income,
    )


def budget_used_percent(split: BudgetSplit) -> int:
    """
    used / income * 100, rounded half up. 0 when there is no income.
    """
    if not split.total_income:
        return 0
    return int(math.floor(split.used / split.total_income * 100 + 0.5))


def compute_daily_series(transactions: Iterable, type_filter=TxType.EXPENSE) -> List[DailyTotal]:
    """
    Sum amounts per UTC calendar day, oldest day first.
    ISO date keys sort lexicographically in chronological order.
    """
    buckets: Dict[str, list] = {}
    for t in _of_type(transactions, type_filter):
        buckets.setdefault(utc_date_key(t.created_at), []).append(t.amount)

    return [DailyTotal(key, math.fsum(buckets[key])) for key in sorted(buckets)]


def compute_mode_split(transactions: Iterable) -> ModeSplit:
    """
    Expense totals per wallet. Expenses whose mode is neither "online" nor
    "cash" count towards neither total.
    """
    online = []
    cash = []
    for t in _of_type(transactions, TxType.EXPENSE):
        if t.mode == Mode.ONLINE.value:
            online.append(t.amount)
        elif t.mode == Mode.CASH.value:
            cash.append(t.amount)
    return ModeSplit(online=math.fsum(online), cash=math.fsum(cash))


def find_unclassified(transactions: Iterable) -> list:
    """Entries filed under the "Unknown expense" label, in input order."""
    return [t for t in transactions if t.category == SpecialCategory.UNKNOWN.value]


def build_view_model(transactions: Sequence, context: ViewContext) -> DashboardView:
    """
    Derive everything the dashboard renders for the given tab.

    Overview: balance over all wallets, mode split, daily series,
    leaderboard and the unknown-expense log.
    Wallet tab: balance, category breakdown and budget for that wallet only.
    """
    scoped = wallet_filter(transactions, context.scope)
    view = DashboardView(
        context=context,
        balance=compute_balance(scoped),
        transactions=scoped,
    )

    if context.scope == Scope.OVERVIEW:
        view.mode_split = compute_mode_split(transactions)
        view.daily_series = compute_daily_series(transactions)
        view.leaderboard = category_leaderboard(transactions)
        view.unclassified = find_unclassified(transactions)
    else:
        view.category_totals = category_totals(scoped)
        view.budget = compute_budget_split(scoped)
        view.used_percent = budget_used_percent(view.budget)

    return view
