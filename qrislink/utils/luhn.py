from __future__ import annotations

import logging

from qrislink.utils.text import is_ascii_digits

logger = logging.getLogger(__name__)


def luhn_sum(digits: str, verbose: bool = False) -> int:
    """
    Mod-10 weighted digit sum, doubling every second digit from the right.

    Raises:
        ValueError: If ``digits`` contains anything but decimal digits.
    """
    if not is_ascii_digits(digits):
        raise ValueError(f"{digits!r} is not a valid numeric string")
    total = 0
    double = False
    for index in range(len(digits) - 1, -1, -1):
        digit = int(digits[index])
        processed = digit * 2 if double else digit
        if processed > 9:
            processed -= 9
        total += processed
        double = not double
        if verbose:
            logger.debug("index=%d digit=%d processed=%d sum=%d", index, digit, processed, total)
    return total


def is_luhn_valid(digits: str, verbose: bool = False) -> bool:
    if not is_ascii_digits(digits):
        return False
    return luhn_sum(digits, verbose=verbose) % 10 == 0


def luhn_check_digit(partial: str) -> str:
    """Digit that makes ``partial + digit`` pass the Luhn check."""
    total = luhn_sum(partial + "0")
    return str((10 - total % 10) % 10)
