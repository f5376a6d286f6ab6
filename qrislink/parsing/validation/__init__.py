"""
Format validation gate for QRIS payloads.
"""
from qrislink.parsing.validation.decode import (
    MANDATORY_TAG_MAX_LENGTHS,
    MIN_PAYLOAD_LENGTH,
    PAYLOAD_PREFIX,
    SCHEME_IDENTIFIER,
    is_acceptable_payload,
    rejection_reason,
)

__all__ = [
    "MANDATORY_TAG_MAX_LENGTHS",
    "MIN_PAYLOAD_LENGTH",
    "PAYLOAD_PREFIX",
    "SCHEME_IDENTIFIER",
    "is_acceptable_payload",
    "rejection_reason",
]
