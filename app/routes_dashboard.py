# app/routes_dashboard.py

from fastapi import APIRouter, Request, Depends, Query
from fastapi.responses import HTMLResponse

from .deps import templates, get_store
from app.services.aggregation import ViewContext, build_view_model
from app.services.transaction_input import today_iso
from app.services.transaction_store import TransactionStore
from categories import CATEGORIES, SCOPE_TABS, Scope, TxType
from settings import get_settings

router = APIRouter()


def view_context(scope: str | None, tx_type: str | None) -> ViewContext:
    """
    Build the view context from query parameters.
    Unknown values fall back to the online tab / expense form.
    """
    try:
        parsed_type = TxType(str(tx_type or "").strip().lower())
    except ValueError:
        parsed_type = TxType.EXPENSE

    return ViewContext(scope=Scope.parse(scope), tx_type=parsed_type)


@router.get("/dashboard", response_class=HTMLResponse)
def dashboard_page(
    request: Request,
    scope: str | None = Query(None),
    tx_type: str | None = Query(None),
    store: TransactionStore = Depends(get_store),
):
    context = view_context(scope, tx_type)

    # One fetch per render; everything below is derived from this list
    transactions = store.list_all()
    view = build_view_model(transactions, context)

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "view": view,
            "scope": context.scope.value,
            "tx_type": context.tx_type.value,
            "has_transactions": len(transactions) > 0,
            "currency_symbol": get_settings().currency_symbol,
            "scope_tabs": SCOPE_TABS,
            "categories": CATEGORIES,
            "today": today_iso(),
        },
    )
