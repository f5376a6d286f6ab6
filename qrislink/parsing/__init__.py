"""
This package contains the codec layers for QRIS Merchant Presented Mode
payload strings.

Sub-packages:

- ``tlv``: Flat TLV tokenizer and encoder.
- ``schema``: Static tag schema (tag ids, field names, sub-tags).
- ``structured``: Schema-directed decoding into named fields and back.
- ``checksum``: CRC-16 extraction, validation and signing.
- ``validation``: Cheap structural gate before decoding.
"""
from qrislink.parsing.checksum import ChecksumRecord, checksum_record, compute_checksum, is_checksum_valid, sign_payload
from qrislink.parsing.schema import MPM_TAGS, TagNode, resolve_by_id_among, resolve_by_name
from qrislink.parsing.structured import Composite, Leaf, decode_structured, encode_structured, to_field_map, to_records
from qrislink.parsing.tlv import TlvRecord, decode_tlv, encode_tlv
from qrislink.parsing.validation import is_acceptable_payload

__all__ = [
    "ChecksumRecord",
    "Composite",
    "Leaf",
    "MPM_TAGS",
    "TagNode",
    "TlvRecord",
    "checksum_record",
    "compute_checksum",
    "decode_structured",
    "decode_tlv",
    "encode_structured",
    "encode_tlv",
    "is_acceptable_payload",
    "is_checksum_valid",
    "resolve_by_id_among",
    "resolve_by_name",
    "sign_payload",
    "to_field_map",
    "to_records",
]
