# app/services/csv_export.py

from typing import List

import pandas as pd

from models import Transaction

CSV_COLUMNS = ["id", "date", "type", "mode", "category", "amount", "remarks"]


def transactions_to_df(transactions: List[Transaction]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per transaction, in the given order.
    """
    rows = [
        {
            "id": t.id,
            "date": t.created_at.strftime("%Y-%m-%d"),
            "type": t.type,
            "mode": t.mode,
            "category": t.category,
            "amount": float(t.amount),
            "remarks": t.remarks or "",
        }
        for t in transactions
    ]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    df["amount"] = df["amount"].astype(float)
    return df


def export_transactions_csv(transactions: List[Transaction]) -> str:
    """
    Serialize transactions to CSV text (header row always present).
    """
    return transactions_to_df(transactions).to_csv(index=False)
