from datetime import datetime, timedelta, timezone

import pytest

from app.errors import ValidationOmission
from app.services.transaction_input import (
    build_transaction_input,
    parse_amount,
    parse_created_at,
    today_iso,
)
from models import utcnow


def _form(**overrides):
    data = {
        "amount": "250",
        "category": "Travel",
        "mode": "online",
        "type": "expense",
        "date": "2024-06-01",
        "remarks": "",
    }
    data.update(overrides)
    return data


def test_build_from_complete_form():
    tx = build_transaction_input(_form(remarks="  metro card "))

    assert tx.amount == 250.0
    assert tx.category == "Travel"
    assert tx.mode == "online"
    assert tx.type == "expense"
    assert tx.created_at == datetime(2024, 6, 1)
    assert tx.remarks == "metro card"


def test_blank_remarks_become_none():
    assert build_transaction_input(_form(remarks="   ")).remarks is None


def test_missing_date_defaults_to_now():
    tx = build_transaction_input(_form(date=""))
    assert abs((utcnow() - tx.created_at).total_seconds()) < 60


@pytest.mark.parametrize(
    "overrides, missing",
    [
        ({"amount": None}, ("amount",)),
        ({"amount": ""}, ("amount",)),
        ({"amount": "0"}, ("amount",)),
        ({"amount": "abc"}, ("amount",)),
        ({"amount": "-5"}, ("amount",)),
        ({"amount": "nan"}, ("amount",)),
        ({"amount": "inf"}, ("amount",)),
        ({"amount": "1_000"}, ("amount",)),
        ({"amount": "12abc"}, ("amount",)),
        ({"amount": "1e400"}, ("amount",)),
        ({"category": ""}, ("category",)),
        ({"category": "   "}, ("category",)),
        ({"amount": "", "category": None}, ("amount", "category")),
        ({"date": "01/06/2024"}, ("date",)),
    ],
)
def test_unusable_submissions_are_rejected(overrides, missing):
    with pytest.raises(ValidationOmission) as exc_info:
        build_transaction_input(_form(**overrides))

    assert exc_info.value.missing == missing


def test_mode_and_type_default_when_absent():
    data = _form()
    del data["mode"], data["type"]

    tx = build_transaction_input(data)

    assert (tx.mode, tx.type) == ("online", "expense")


def test_parse_amount_accepts_numbers_and_strings():
    assert parse_amount(12) == 12.0
    assert parse_amount(" 9.75 ") == 9.75
    assert parse_amount(True) is None
    assert parse_amount(".5") == 0.5
    assert parse_amount("1e3") == 1000.0
    assert parse_amount("+7") == 7.0
    assert parse_amount(float("inf")) is None


def test_parse_created_at_normalizes_aware_datetimes_to_naive_utc():
    ist = timezone(timedelta(hours=5, minutes=30))
    parsed = parse_created_at(datetime(2024, 1, 1, 3, 0, tzinfo=ist))
    assert parsed == datetime(2023, 12, 31, 21, 30)


def test_today_iso_is_an_iso_date():
    assert datetime.strptime(today_iso(), "%Y-%m-%d")
