"""Tests for transaction amounts and tip calculation."""
from decimal import Decimal

from qrislink.domain import TipIndicator, Transaction
from qrislink.domain.transaction import parse_amount
from qrislink.parsing.checksum import sign_payload
from qrislink.parsing.structured import decode_structured, encode_structured


def _transaction(**fields) -> Transaction:
    """Helper: encode ``fields`` into a signed payload and decode it back."""
    body = encode_structured({"payload_format_indicator": "01", **fields})
    return Transaction(decode_structured(sign_payload(body)))


def test_parse_amount():
    assert parse_amount("15000") == Decimal("15000")
    assert parse_amount(" 10.50 ") == Decimal("10.50")
    assert parse_amount("") == Decimal(0)
    assert parse_amount(None) == Decimal(0)
    assert parse_amount("abc") == Decimal(0)


def test_no_tip():
    transaction = _transaction(transaction_amount="15000")
    assert transaction.tip_indicator == TipIndicator.NO_TIP
    assert transaction.amount == Decimal("15000")
    assert transaction.tip_calculated is None
    assert transaction.total == Decimal("15000")


def test_static_payload_has_zero_amount(bni_payload):
    transaction = Transaction(decode_structured(bni_payload))
    assert transaction.amount == Decimal(0)
    assert transaction.total == Decimal(0)


def test_input_tip():
    transaction = _transaction(transaction_amount="15000", tip_indicator="01")
    assert transaction.tip_indicator == TipIndicator.INPUT_TIP
    assert transaction.tip_calculated is None
    assert transaction.total == Decimal("15000")


def test_fixed_tip():
    transaction = _transaction(transaction_amount="15000", tip_indicator="02", fixed_tip_amount="2000")
    assert transaction.tip_indicator == TipIndicator.FIXED_AMOUNT
    assert transaction.fixed_tip_amount == Decimal("2000")
    assert transaction.tip_calculated == Decimal("2000")
    assert transaction.total == Decimal("17000")


def test_percentage_tip():
    transaction = _transaction(transaction_amount="15000", tip_indicator="03", percentage_tip_amount="10")
    assert transaction.tip_indicator == TipIndicator.FIXED_PERCENTAGE
    assert transaction.tip_calculated == Decimal("1500")
    assert transaction.total == Decimal("16500")


def test_unparsable_amount_is_zero():
    transaction = _transaction(transaction_amount="12A", tip_indicator="02", fixed_tip_amount="500")
    assert transaction.amount == Decimal(0)
    assert transaction.total == Decimal("500")


def test_as_dict_percentage():
    data = _transaction(transaction_amount="20000", tip_indicator="03", percentage_tip_amount="5").as_dict()
    assert data == {
        "tip_indicator_raw": "03",
        "tip_indicator": "FIXED_PERCENTAGE",
        "transaction_amount": "20000",
        "percentage_tip_amount": "5",
        "tip_calculated": "1000",
    }


def test_as_dict_without_tip():
    data = _transaction(transaction_amount="100").as_dict()
    assert data["tip_indicator"] == ""
    assert data["tip_calculated"] is None
    assert "fixed_tip_amount" not in data
