"""
Static tag schema for QRIS Merchant Presented Mode payloads.
"""
from qrislink.parsing.schema.tags import (
    ADDITIONAL_DATA,
    CRC_TAG,
    MERCHANT_INFORMATION_TAGS,
    MPM_TAGS,
    TagNode,
    resolve_by_id_among,
    resolve_by_name,
)

__all__ = [
    "ADDITIONAL_DATA",
    "CRC_TAG",
    "MERCHANT_INFORMATION_TAGS",
    "MPM_TAGS",
    "TagNode",
    "resolve_by_id_among",
    "resolve_by_name",
]
