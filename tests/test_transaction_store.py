from datetime import datetime, timedelta, timezone

import pytest

from app.errors import TransactionNotFound, ValidationOmission
from app.services.aggregation import compute_daily_series
from models import utcnow


def _add(store, amount, created_at, **kw):
    fields = {"category": "Food", "mode": "cash", "type": "expense"}
    fields.update(kw)
    return store.create(amount=amount, created_at=created_at, **fields)


def test_create_assigns_id_and_persists(store):
    tx = _add(store, 12.5, datetime(2024, 1, 3), remarks="lunch")

    assert tx.id
    [row] = store.list_all()
    assert row.id == tx.id
    assert (row.amount, row.category, row.mode, row.type, row.remarks) == (
        12.5, "Food", "cash", "expense", "lunch",
    )
    assert row.created_at == datetime(2024, 1, 3)


def test_create_defaults_created_at_to_now(store):
    tx = store.create(amount=1, category="Gym", mode="online", type="expense")
    assert tx.created_at is not None
    assert abs((utcnow() - tx.created_at).total_seconds()) < 60


def test_empty_remarks_stored_as_null(store):
    tx = _add(store, 3, datetime(2024, 1, 1), remarks="")
    assert tx.remarks is None


def test_list_all_newest_first(store):
    _add(store, 1, datetime(2024, 1, 1))
    _add(store, 3, datetime(2024, 3, 1))
    _add(store, 2, datetime(2024, 2, 1))

    assert [t.amount for t in store.list_all()] == [3, 2, 1]


def test_ids_are_unique(store):
    ids = {_add(store, i + 1, datetime(2024, 1, 1)).id for i in range(5)}
    assert len(ids) == 5


@pytest.mark.parametrize(
    "amount, category, missing",
    [
        (None, "Food", ("amount",)),
        (0, "Food", ("amount",)),
        (-5, "Food", ("amount",)),
        (float("nan"), "Food", ("amount",)),
        (float("inf"), "Food", ("amount",)),
        ("abc", "Food", ("amount",)),
        (10, "", ("category",)),
        (10, "   ", ("category",)),
        (None, None, ("amount", "category")),
    ],
)
def test_create_without_required_fields_stores_nothing(store, amount, category, missing):
    with pytest.raises(ValidationOmission) as exc_info:
        store.create(amount=amount, category=category, mode="cash", type="expense")

    assert exc_info.value.missing == missing
    assert store.list_all() == []


def test_delete_removes_exactly_that_transaction(store):
    keep_a = _add(store, 1, datetime(2024, 1, 1))
    gone = _add(store, 2, datetime(2024, 1, 2))
    keep_b = _add(store, 3, datetime(2024, 1, 3))

    store.delete_by_id(gone.id)

    assert {t.id for t in store.list_all()} == {keep_a.id, keep_b.id}
    assert store.get(gone.id) is None


def test_delete_unknown_id_raises_and_leaves_store_alone(store):
    kept = _add(store, 1, datetime(2024, 1, 1))

    with pytest.raises(TransactionNotFound) as exc_info:
        store.delete_by_id("no-such-id")

    assert exc_info.value.transaction_id == "no-such-id"
    assert [t.id for t in store.list_all()] == [kept.id]


def test_create_stores_aware_timestamps_as_utc(store):
    est = timezone(timedelta(hours=-5))
    tx = _add(store, 9, datetime(2024, 1, 1, 23, 0, tzinfo=est))

    assert tx.created_at == datetime(2024, 1, 2, 4, 0)
    assert [d.date_key for d in compute_daily_series(store.list_all())] == ["2024-01-02"]


def test_create_strips_category_whitespace(store):
    tx = _add(store, 4, datetime(2024, 1, 1), category="  Gym ")
    assert tx.category == "Gym"
