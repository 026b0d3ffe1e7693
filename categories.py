# categories.py
# Role: Closed value sets used at input time and by the dashboard.

from enum import Enum
from typing import Any, Optional


class Mode(str, Enum):
    """Payment mode, i.e. the wallet a transaction belongs to."""

    CASH = "cash"
    ONLINE = "online"


class TxType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Scope(str, Enum):
    """
    Dashboard tab. OVERVIEW is the unfiltered, all-wallets view;
    the other members match a Mode value.
    """

    OVERVIEW = "overview"
    ONLINE = "online"
    CASH = "cash"

    @classmethod
    def parse(cls, value: Any, default: Optional["Scope"] = None) -> "Scope":
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return default if default is not None else cls.ONLINE


class SpecialCategory(str, Enum):
    # Expenses filed under this label show up in the "Unknown expense log"
    UNKNOWN = "Unknown expense"


# Labels offered by the add-transaction form (order is the dropdown order)
CATEGORIES = (
    "Food Essential",
    SpecialCategory.UNKNOWN.value,
    "Food Ultimate",
    "Gym",
    "Food order",
    "Cafeteria",
    "Travel",
    "General",
    "Allowance",
    "Bills",
    "Shopping",
    "Medicine",
    "Stationary",
)

# Order of the tab buttons on the dashboard
SCOPE_TABS = (Scope.OVERVIEW, Scope.ONLINE, Scope.CASH)
