"""
Schema-directed decoding of TLV records into named fields, and back.

A decoded field map is keyed by schema field name. Leaf tags map to a
``Leaf`` holding the raw value; composite tags map to a ``Composite``
holding their sub-fields by name. Tags the schema does not know are dropped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Sequence, Union

from qrislink.parsing.schema import MPM_TAGS, TagNode, resolve_by_id_among, resolve_by_name
from qrislink.parsing.tlv import TlvRecord, decode_tlv, encode_tlv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Leaf:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Composite:
    fields: Mapping[str, str] = field(default_factory=dict)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.fields.get(name, default)

    def __getitem__(self, name: str) -> str:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


FieldValue = Union[Leaf, Composite]
FieldMap = dict[str, FieldValue]


def _map_children(node: TagNode, records: Sequence[TlvRecord]) -> dict[str, str]:
    children: dict[str, str] = {}
    for record in records:
        child = resolve_by_id_among(node.children, record.tag)
        if child is not None and child.name not in children:
            children[child.name] = record.value
    return children


def to_field_map(records: Sequence[TlvRecord], schema: Sequence[TagNode] = MPM_TAGS) -> FieldMap:
    """
    Map top-level records onto the schema.

    Composite values are decoded as nested TLV streams, one level deep. A
    nested stream that fails to decode is logged and its field omitted. A
    sub-tag repeated inside one composite keeps its first value.

    Args:
        records: Top-level records in payload order.
        schema: The top-level schema nodes.

    Returns:
        The decoded field map, in payload order.
    """
    fields: FieldMap = {}
    for record in records:
        node = resolve_by_id_among(schema, record.tag)
        if node is None:
            logger.debug("Dropping unknown tag %s", record.tag, extra={"details": {"tag": record.tag}})
            continue
        if not node.is_composite:
            fields[node.name] = Leaf(record.value)
            continue
        try:
            nested = decode_tlv(record.value)
        except ValueError as exc:
            logger.warning(
                "Error decoding child tags for %s: %s",
                record.tag,
                exc,
                extra={"details": {"tag": record.tag, "name": node.name, "position": getattr(exc, "position", -1)}},
            )
            continue
        fields[node.name] = Composite(_map_children(node, nested))
    return fields


def decode_structured(text: str, schema: Sequence[TagNode] = MPM_TAGS) -> FieldMap:
    """
    Decode a payload string straight into a field map.

    Raises:
        MalformedTlvError: If the top-level stream has a non-numeric tag.
    """
    return to_field_map(decode_tlv(text), schema)


def _stringify(node: TagNode, value: Any) -> str:
    if isinstance(value, Leaf):
        return value.value
    if isinstance(value, Composite):
        value = value.fields
    if isinstance(value, Mapping):
        if not node.is_composite:
            raise ValueError(f"Field {node.name!r} is a leaf tag and cannot hold nested fields")
        return encode_tlv(_child_records(node, value))
    return str(value)


def _child_records(node: TagNode, values: Mapping[str, Any]) -> list[TlvRecord]:
    records: list[TlvRecord] = []
    for name, value in values.items():
        child = next((c for c in node.children if c.name == name), None)
        if child is None:
            continue
        records.append(TlvRecord.of(child.id, _stringify(child, value)))
    return records


def to_records(field_map: Mapping[str, Any], schema: Sequence[TagNode] = MPM_TAGS) -> list[TlvRecord]:
    """
    Turn a field map back into TLV records.

    Output order follows the field map's iteration order. Names the schema
    does not know are skipped. Composite values (``Composite`` or a plain
    mapping) are re-encoded from their sub-fields; leaf values may be
    ``Leaf``, ``str`` or anything with a sensible ``str()``.

    Raises:
        ValueError: If a leaf tag is given nested fields, or a value is
            longer than 99 characters.
    """
    records: list[TlvRecord] = []
    for name, value in field_map.items():
        resolved = resolve_by_name(name, schema)
        if resolved is None:
            continue
        tag_id, siblings = resolved
        node = resolve_by_id_among(siblings, tag_id)
        records.append(TlvRecord.of(tag_id, _stringify(node, value)))
    return records


def encode_structured(field_map: Mapping[str, Any], schema: Sequence[TagNode] = MPM_TAGS) -> str:
    """Encode a field map into a payload string (without adding a checksum)."""
    return encode_tlv(to_records(field_map, schema))


def to_plain_dict(field_map: Mapping[str, FieldValue]) -> dict[str, Any]:
    """Flatten a field map into JSON-friendly ``str`` / ``dict`` values."""
    plain: dict[str, Any] = {}
    for name, value in field_map.items():
        if isinstance(value, Composite):
            plain[name] = dict(value.fields)
        else:
            plain[name] = value.value
    return plain


def leaf_value(field_map: Mapping[str, FieldValue], name: str) -> Optional[str]:
    value = field_map.get(name)
    return value.value if isinstance(value, Leaf) else None


def composite_value(field_map: Mapping[str, FieldValue], name: str) -> Optional[Composite]:
    value = field_map.get(name)
    return value if isinstance(value, Composite) else None
