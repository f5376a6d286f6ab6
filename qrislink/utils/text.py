from __future__ import annotations


def is_ascii_digits(text: str) -> bool:
    """True for a non-empty string of ``0``-``9`` only (``str.isdigit`` also accepts ``"²"``)."""
    return text.isascii() and text.isdigit()
