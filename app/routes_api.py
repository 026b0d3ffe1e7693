# routes_api.py
"""
JSON API over the same store and aggregation code as the HTML dashboard.

Mutating endpoints return the post-mutation transaction list, so clients do
not need a second round trip.
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.deps import get_store
from app.errors import TransactionNotFound, ValidationOmission
from app.routes_dashboard import view_context
from app.schemas import (
    SummaryOut,
    TransactionCreateRequest,
    TransactionListOut,
    summary_out,
    transaction_list_out,
)
from app.services.aggregation import build_view_model
from app.services.transaction_input import build_transaction_input
from app.services.transaction_store import TransactionStore

router = APIRouter(prefix="/api")


@router.get("/transactions", response_model=TransactionListOut)
def list_transactions(store: TransactionStore = Depends(get_store)):
    return transaction_list_out(store.list_all())


@router.post("/transactions", response_model=TransactionListOut, status_code=201)
def create_transaction(
    payload: TransactionCreateRequest,
    store: TransactionStore = Depends(get_store),
):
    try:
        tx_input = build_transaction_input(payload.model_dump())
    except ValidationOmission as e:
        return JSONResponse(
            status_code=422,
            content={"detail": str(e), "missing": list(e.missing)},
        )

    try:
        store.create(**tx_input.as_kwargs())
    except SQLAlchemyError as e:
        raise HTTPException(status_code=500, detail=f"Error while saving transaction: {e!r}")

    return transaction_list_out(store.list_all())


@router.delete("/transactions/{transaction_id}", response_model=TransactionListOut)
def delete_transaction(
    transaction_id: str,
    store: TransactionStore = Depends(get_store),
):
    try:
        store.delete_by_id(transaction_id)
    except TransactionNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SQLAlchemyError as e:
        raise HTTPException(status_code=500, detail=f"Error while deleting transaction: {e!r}")

    return transaction_list_out(store.list_all())


@router.get("/summary", response_model=SummaryOut)
def summary(
    scope: str | None = Query(None),
    tx_type: str | None = Query(None),
    store: TransactionStore = Depends(get_store),
):
    view = build_view_model(store.list_all(), view_context(scope, tx_type))
    return summary_out(view)
