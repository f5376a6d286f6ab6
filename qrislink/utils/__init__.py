from qrislink.utils.luhn import is_luhn_valid, luhn_check_digit, luhn_sum
from qrislink.utils.text import is_ascii_digits

__all__ = ["is_ascii_digits", "is_luhn_valid", "luhn_check_digit", "luhn_sum"]
