"""
Cheap structural checks run before a payload is decoded.
"""
from __future__ import annotations

import logging
from typing import Optional

from qrislink.parsing.tlv import decode_tlv, get_value_by_tag

logger = logging.getLogger(__name__)

MIN_PAYLOAD_LENGTH = 10
PAYLOAD_PREFIX = "000201"
SCHEME_IDENTIFIER = "CO.QRIS.WWW"

# Mandatory tags and their maximum value lengths.
MANDATORY_TAG_MAX_LENGTHS: dict[str, int] = {
    "00": 2,
    "51": 99,
    "52": 4,
    "53": 3,
    "58": 2,
    "59": 25,
    "60": 15,
    "63": 4,
}


def rejection_reason(payload: Optional[str], strict: bool = False) -> Optional[str]:
    """
    Explain why ``payload`` would be rejected, or return ``None`` if it is acceptable.

    Args:
        payload: The raw payload string.
        strict: Also decode the payload and check the mandatory tags. Any
            error raised while decoding rejects the payload.
    """
    if not payload or len(payload) < MIN_PAYLOAD_LENGTH:
        return "payload too short"
    if not payload.startswith(PAYLOAD_PREFIX):
        return f"payload does not start with {PAYLOAD_PREFIX}"
    if SCHEME_IDENTIFIER not in payload:
        return f"payload does not contain {SCHEME_IDENTIFIER}"
    if not strict:
        return None

    try:
        records = decode_tlv(payload)
    except Exception as exc:
        return f"malformed TLV: {exc}"
    for tag, max_length in MANDATORY_TAG_MAX_LENGTHS.items():
        value = get_value_by_tag(records, tag)
        if value is None:
            return f"missing mandatory tag {tag}"
        if len(value) > max_length:
            return f"tag {tag} longer than {max_length}"
    return None


def is_acceptable_payload(payload: Optional[str], strict: bool = False) -> bool:
    """
    Gate a payload before full decoding.

    Lenient mode checks the length, the ``000201`` prefix and the presence
    of the QRIS scheme identifier. Strict mode additionally requires every
    mandatory tag to be present and within its maximum length.
    """
    reason = rejection_reason(payload, strict=strict)
    if reason is not None:
        logger.info("Payload rejected: %s", reason, extra={"details": {"strict": strict, "reason": reason}})
        return False
    return True
