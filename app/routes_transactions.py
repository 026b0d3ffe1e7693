# routes_transactions.py
"""
Routes for the HTML add / delete forms and the CSV export.

Every mutation redirects back to the dashboard, which re-reads the full
transaction list.
"""

from html import escape
from urllib.parse import urlencode

from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from sqlalchemy.exc import SQLAlchemyError

from app.deps import get_store
from app.errors import TransactionNotFound, ValidationOmission
from app.services.csv_export import export_transactions_csv
from app.services.transaction_input import build_transaction_input
from app.services.transaction_store import TransactionStore
from categories import Scope, TxType
from logging_setup import get_logger

router = APIRouter()
log = get_logger("ledger.routes.transactions")


def dashboard_url(scope: str | None, tx_type: str | None = None) -> str:
    params = {"scope": Scope.parse(scope).value}
    if tx_type in (TxType.INCOME.value, TxType.EXPENSE.value):
        params["tx_type"] = tx_type
    return "/dashboard?" + urlencode(params)


def error_page(title: str, message: str, back_url: str, status_code: int) -> HTMLResponse:
    return HTMLResponse(
        f"""
        <html>
        <body style="font-family:sans-serif; padding:20px;">
            <h1>{title}</h1>
            <p>{escape(message)}</p>
            <a href="{back_url}">Back to dashboard</a>
        </body>
        </html>
        """,
        status_code=status_code,
    )


@router.post("/transactions")
async def add_transaction(
    request: Request,
    store: TransactionStore = Depends(get_store),
):
    """
    Form target of the add-transaction card.

    A submission without amount or category is dropped silently: no row is
    created and the user is sent back to the same tab.
    """
    form = await request.form()
    data = {key: form.get(key) for key in ("amount", "category", "mode", "type", "date", "remarks")}
    back_url = dashboard_url(data.get("mode"), data.get("type"))

    try:
        tx_input = build_transaction_input(data)
    except ValidationOmission as e:
        log.info("[add] Dropped submission: %s", e)
        return RedirectResponse(url=back_url, status_code=303)

    try:
        store.create(**tx_input.as_kwargs())
    except SQLAlchemyError as e:
        return error_page("Error while saving transaction", repr(e), back_url, 500)

    return RedirectResponse(url=back_url, status_code=303)


@router.post("/transactions/{transaction_id}/delete")
def delete_transaction(
    transaction_id: str,
    scope: str | None = Form(None),
    store: TransactionStore = Depends(get_store),
):
    """
    Form target of the trash button on each transaction row.
    """
    back_url = dashboard_url(scope)

    try:
        store.delete_by_id(transaction_id)
    except TransactionNotFound as e:
        return error_page("Transaction not found", str(e), back_url, 404)
    except SQLAlchemyError as e:
        return error_page("Error while deleting transaction", repr(e), back_url, 500)

    return RedirectResponse(url=back_url, status_code=303)


@router.get("/transactions/export.csv")
def export_csv(store: TransactionStore = Depends(get_store)):
    """
    Download every transaction (newest first) as CSV.
    """
    content = export_transactions_csv(store.list_all())
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="transactions.csv"'},
    )
