"""
TLV (Tag-Length-Value) codec for QRIS payload strings.

Tags and lengths are both fixed-width, 2 decimal digits; values are text.
"""
from qrislink.parsing.tlv.decode import (
    HEADER_WIDTH,
    MAX_VALUE_LENGTH,
    TlvRecord,
    decode_tlv,
    encode_tlv,
    get_sub_tag_value,
    get_value_by_tag,
    is_valid_tag,
)

__all__ = [
    "HEADER_WIDTH",
    "MAX_VALUE_LENGTH",
    "TlvRecord",
    "decode_tlv",
    "encode_tlv",
    "get_sub_tag_value",
    "get_value_by_tag",
    "is_valid_tag",
]
