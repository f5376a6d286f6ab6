"""Tests for the Luhn (mod 10) helpers."""
import pytest

from qrislink.utils import is_luhn_valid, luhn_check_digit, luhn_sum


def test_known_valid_number():
    assert is_luhn_valid("79927398713")
    assert luhn_sum("79927398713") == 70


def test_known_invalid_number():
    assert not is_luhn_valid("79927398710")


def test_check_digit():
    assert luhn_check_digit("7992739871") == "3"
    assert is_luhn_valid("7992739871" + luhn_check_digit("7992739871"))


@pytest.mark.parametrize("value", ["", "12a4", " 1234"])
def test_non_numeric_is_invalid(value):
    assert is_luhn_valid(value) is False


def test_luhn_sum_rejects_non_digits():
    with pytest.raises(ValueError):
        luhn_sum("12-34")


def test_unicode_digits_are_not_digits():
    assert is_luhn_valid("7992739871³") is False
    with pytest.raises(ValueError):
        luhn_sum("12²")
