"""
Schema-directed structural decoding of QRIS payloads into named fields.
"""
from qrislink.parsing.structured.decode import (
    Composite,
    FieldMap,
    FieldValue,
    Leaf,
    composite_value,
    decode_structured,
    encode_structured,
    leaf_value,
    to_field_map,
    to_plain_dict,
    to_records,
)

__all__ = [
    "Composite",
    "FieldMap",
    "FieldValue",
    "Leaf",
    "composite_value",
    "decode_structured",
    "encode_structured",
    "leaf_value",
    "to_field_map",
    "to_plain_dict",
    "to_records",
]
