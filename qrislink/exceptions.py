from __future__ import annotations

from typing import Optional


class QrisError(ValueError):
    """Base class for errors raised by qrislink."""


class MalformedTlvError(QrisError):
    """
    Raised when TLV framing cannot be parsed at all.

    Attributes:
        tag: The offending tag characters, if known.
        position: Cursor offset where decoding stopped.
    """

    def __init__(self, message: str, tag: str = "", position: int = -1, details: Optional[str] = None) -> None:
        self.message = message
        self.tag = tag
        self.position = position
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        text = self.message
        if self.tag:
            text += f" (tag {self.tag!r})"
        if self.position >= 0:
            text += f" at position {self.position}"
        if self.details:
            text += f": {self.details}"
        return text


class InvalidPayloadError(QrisError):
    """Raised when a payload is empty or fails the format gate."""
