# app/presentation.py
# Role: Formatting and chart colours used by the dashboard templates.
#       Registered as Jinja2 filters/globals in app/deps.py.

from datetime import datetime
from typing import List

from settings import currency_symbol

# Per-category slice colours for the wallet "Spending" chart (cycled)
CATEGORY_COLORS = [
    "#3b82f6", "#c7e6db", "#10b981", "#6a00ff", "#fff700", "#ff005d",
    "rgba(176, 75, 216, 1)", "rgb(183, 151, 62)", "rgba(215, 118, 93, 1)",
    "#6366f1", "#06b6d4", "#eb64faff", "#abf522ff",
]

# Mode distribution chart
ONLINE_COLOR = "#3b82f6"
CASH_COLOR = "#10b981"

# Budget gauge: used / remaining
BUDGET_COLORS = ["#ef4444", "#10b981"]

# Add button / accent colour per tab
SCOPE_THEME = {
    "online": "bg-indigo",
    "cash": "bg-emerald",
    "overview": "bg-violet",
}


def format_money(value) -> str:
    """
    '₹1,234.5' style: thousands separators, no trailing zeros.
    """
    symbol = currency_symbol()
    amount = float(value or 0)
    sign = "-" if amount < 0 else ""
    text = f"{abs(amount):,.2f}".rstrip("0").rstrip(".")
    return f"{sign}{symbol}{text}"


def day_label(date_key: str) -> str:
    """'2024-01-05' -> 'Jan 5' (x-axis of the daily chart)."""
    d = datetime.strptime(date_key, "%Y-%m-%d")
    return f"{d:%b} {d.day}"


def display_date(ts: datetime) -> str:
    return ts.strftime("%d/%m/%Y") if ts else ""


def category_colors(count: int) -> List[str]:
    return [CATEGORY_COLORS[i % len(CATEGORY_COLORS)] for i in range(count)]


def leaderboard_width(value: float, leaderboard) -> float:
    """Bar width (percent of the largest category) for the leaderboard cards."""
    top = max((c.total for c in leaderboard), default=0)
    if not top:
        return 0.0
    return round(value / top * 100, 1)
