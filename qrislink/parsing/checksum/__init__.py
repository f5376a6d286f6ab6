"""
CRC-16 checksum extraction, validation and signing for QRIS payloads.
"""
from qrislink.parsing.checksum.decode import (
    CHECKSUM_HEADER,
    ChecksumRecord,
    checksum_record,
    compute_checksum,
    covered_prefix,
    embedded_checksum,
    is_checksum_valid,
    sign_payload,
)

__all__ = [
    "CHECKSUM_HEADER",
    "ChecksumRecord",
    "checksum_record",
    "compute_checksum",
    "covered_prefix",
    "embedded_checksum",
    "is_checksum_valid",
    "sign_payload",
]
