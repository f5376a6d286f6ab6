"""
TLV codec for QRIS / EMV Merchant Presented Mode payload strings.

Each record is written as ``TT LL VALUE``: a 2-digit tag, a 2-digit decimal
length and exactly ``LL`` characters of value. Composite tags carry another
TLV stream of the same shape as their value.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from qrislink.exceptions import MalformedTlvError
from qrislink.utils.text import is_ascii_digits

logger = logging.getLogger(__name__)

TAG_WIDTH = 2
LENGTH_WIDTH = 2
HEADER_WIDTH = TAG_WIDTH + LENGTH_WIDTH
MAX_VALUE_LENGTH = 99

_TAG_RE = re.compile(r"^[0-9]{2}$")
_SIGNED_TAG_RE = re.compile(r"^[+-][0-9]$")


@dataclass(frozen=True)
class TlvRecord:
    """
    A single tag/length/value triple.

    Attributes:
        tag: Two decimal digits, ``"00"`` to ``"99"``.
        length: Number of characters in ``value``.
        value: The raw value characters.
    """
    tag: str
    length: int
    value: str

    @classmethod
    def of(cls, tag: str, value: str) -> "TlvRecord":
        """Build a record whose length is taken from ``value``."""
        return cls(tag=tag, length=len(value), value=value)

    def encode(self) -> str:
        return f"{self.tag}{self.length:02d}{self.value}"


def is_valid_tag(tag: str) -> bool:
    return bool(_TAG_RE.match(tag))


def _parse_length(text: str) -> int:
    if len(text) == LENGTH_WIDTH and is_ascii_digits(text):
        return int(text)
    return 0


def decode_tlv(data: str) -> list[TlvRecord]:
    """
    Decode a TLV string into records, in payload order.

    Decoding is lenient about the tail: it stops when fewer than four
    characters remain, or when a record declares more value characters than
    are left, and returns what was read so far. An unparsable length field
    counts as zero.

    A tag that looks numeric but is not two plain digits (``"-1"``, ``"+5"``)
    is skipped together with its declared value. A tag that is not numeric
    at all leaves no way to find the next record.

    Args:
        data: The TLV encoded string.

    Returns:
        A list of ``TlvRecord`` objects.

    Raises:
        MalformedTlvError: If a tag field is not numeric.
    """
    records: list[TlvRecord] = []
    index = 0
    size = len(data)
    while index + HEADER_WIDTH <= size:
        tag = data[index:index + TAG_WIDTH]
        tag_ok = is_valid_tag(tag)
        if not tag_ok and not _SIGNED_TAG_RE.match(tag):
            raise MalformedTlvError("Non-numeric tag", tag=tag, position=index)

        length = _parse_length(data[index + TAG_WIDTH:index + HEADER_WIDTH])
        start = index + HEADER_WIDTH
        if start + length > size:
            break

        if not tag_ok:
            logger.debug("Skipping out-of-range tag %r at %d", tag, index, extra={"details": {"tag": tag, "position": index}})
            index = start + length
            continue

        records.append(TlvRecord(tag=tag, length=length, value=data[start:start + length]))
        index = start + length
    return records


def encode_tlv(records: Iterable[TlvRecord]) -> str:
    """
    Encode records into a TLV string, in the order given.

    Args:
        records: The records to serialise.

    Returns:
        The concatenated ``TT LL VALUE`` string.

    Raises:
        ValueError: If a record has a malformed tag, a length outside
            ``0..99`` or a length that does not match its value.
    """
    parts: list[str] = []
    for record in records:
        if not is_valid_tag(record.tag):
            raise ValueError(f"Tag must be two decimal digits, got {record.tag!r}")
        if not 0 <= record.length <= MAX_VALUE_LENGTH:
            raise ValueError(f"Length for tag {record.tag} out of range: {record.length}")
        if record.length != len(record.value):
            raise ValueError(
                f"Length for tag {record.tag} is {record.length} but value has {len(record.value)} characters"
            )
        parts.append(record.encode())
    return "".join(parts)


def get_value_by_tag(records: Sequence[TlvRecord], tag: str) -> Optional[str]:
    """Return the value of the first record carrying ``tag``, or ``None``."""
    for record in records:
        if record.tag == tag:
            return record.value
    return None


def get_sub_tag_value(records: Sequence[TlvRecord], parent_tag: str, sub_tag: str) -> Optional[str]:
    """
    Decode the value of ``parent_tag`` as a nested stream and look up ``sub_tag`` in it.

    Returns ``None`` when the parent is missing or empty, the nested stream
    does not decode, or the sub tag is absent.
    """
    parent_value = get_value_by_tag(records, parent_tag)
    if not parent_value:
        return None
    try:
        nested = decode_tlv(parent_value)
    except MalformedTlvError:
        return None
    return get_value_by_tag(nested, sub_tag)
