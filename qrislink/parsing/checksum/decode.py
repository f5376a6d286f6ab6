"""
Checksum extraction and validation for QRIS payloads.

The checksum is the last record of a payload: tag ``63``, length ``04`` and
four hex digits. It covers every character before the hex digits, the
``6304`` header included, as UTF-8 bytes.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from qrislink.core.crc import crc16_hex
from qrislink.parsing.schema import CRC_TAG

_COVERED_PREFIX_RE = re.compile(r"^.+63[0-9]{2}")
_TAIL_RE = re.compile(r"(63[0-9]{2})([0-9A-Fa-f]{4})\Z")

CHECKSUM_HEADER = f"{CRC_TAG}04"


@dataclass(frozen=True)
class ChecksumRecord:
    """
    Result of checking one payload.

    Attributes:
        covered_prefix: The part of the payload the checksum is computed over,
            empty when it could not be located.
        embedded_value: The 4 hex digits at the end of the payload, uppercased,
            or ``None`` when the payload has no checksum tail.
        computed_value: The checksum computed over ``covered_prefix``.
    """
    covered_prefix: str
    embedded_value: Optional[str]
    computed_value: str

    @property
    def verifiable(self) -> bool:
        return self.embedded_value is not None and bool(self.computed_value)

    @property
    def is_valid(self) -> bool:
        return self.verifiable and self.embedded_value == self.computed_value

    def as_dict(self) -> dict:
        return {
            "code": self.embedded_value,
            "computed": self.computed_value,
            "is_valid_crc": self.is_valid,
        }


def covered_prefix(payload: str) -> str:
    """
    Return the checksum-covered prefix of ``payload``.

    When the payload ends in a checksum tail the prefix is everything but the
    final four hex digits. Otherwise it is the longest prefix ending in
    ``63`` plus two digits, or ``""`` if there is none.
    """
    if _TAIL_RE.search(payload):
        return payload[:-4]
    match = _COVERED_PREFIX_RE.match(payload)
    return match.group(0) if match else ""


def compute_checksum(payload: str) -> str:
    """
    Compute the CRC-16/CCITT-FALSE checksum of a payload.

    Returns:
        Four uppercase hex digits, or ``""`` when the payload has no
        checksum header to delimit the covered prefix.
    """
    prefix = covered_prefix(payload)
    if not prefix:
        return ""
    return crc16_hex(prefix)


def embedded_checksum(payload: str) -> Optional[str]:
    match = _TAIL_RE.search(payload)
    return match.group(2).upper() if match else None


def is_checksum_valid(payload: str) -> bool:
    """True only if the payload ends in a checksum tail that matches its content."""
    embedded = embedded_checksum(payload)
    return embedded is not None and embedded == compute_checksum(payload)


def checksum_record(payload: str) -> ChecksumRecord:
    prefix = covered_prefix(payload)
    return ChecksumRecord(
        covered_prefix=prefix,
        embedded_value=embedded_checksum(payload),
        computed_value=crc16_hex(prefix) if prefix else "",
    )


def sign_payload(body: str) -> str:
    """
    Append a checksum record to ``body``.

    A trailing checksum record already present on ``body`` is replaced, so
    signing is idempotent.
    """
    if _TAIL_RE.search(body):
        body = body[:-8]
    elif body.endswith(CHECKSUM_HEADER):
        body = body[:-4]
    unsigned = body + CHECKSUM_HEADER
    return unsigned + crc16_hex(unsigned)
