"""
Tag schema for QRIS Merchant Presented Mode payloads.

Every known top-level tag maps to a snake_case field name. Composite tags
(merchant account information and additional data) declare their sub-tags
as children; children are always leaves.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence


@dataclass(frozen=True)
class TagNode:
    """
    A single schema entry.

    Attributes:
        id: The 2-digit tag.
        name: Field name used in the decoded field map.
        children: Sub-tag schema for composite tags, empty for leaves.
    """
    id: str
    name: str
    children: tuple["TagNode", ...] = field(default_factory=tuple)

    @property
    def is_composite(self) -> bool:
        return bool(self.children)

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    def find_child(self, child_id: str) -> Optional["TagNode"]:
        return resolve_by_id_among(self.children, child_id)


def _merchant_information(tag_id: str) -> TagNode:
    return TagNode(
        tag_id,
        f"merchant_information_{tag_id}",
        (
            TagNode("00", "global_unique_identifier"),
            TagNode("01", "merchant_pan"),
            TagNode("02", "merchant_id"),
            TagNode("03", "merchant_criteria"),
        ),
    )


# Merchant account information templates carried by QRIS payloads.
MERCHANT_INFORMATION_TAGS: tuple[str, ...] = ("26", "27", "50", "51")

ADDITIONAL_DATA = TagNode(
    "62",
    "additional_data",
    (
        TagNode("00", "billing_ide"),
        TagNode("01", "bill_number"),
        TagNode("02", "mobile_number"),
        TagNode("03", "store_label"),
        TagNode("04", "loyalty_number"),
        TagNode("05", "reference_label"),
        TagNode("06", "customer_label"),
        TagNode("07", "terminal_label"),
        TagNode("08", "purpose_of_transaction"),
        TagNode("09", "additional_consumer_data"),
        TagNode("10", "merchant_tax_id"),
        TagNode("11", "merchant_channel"),
        TagNode("99", "extra_data"),
    ),
)

CRC_TAG = "63"

MPM_TAGS: tuple[TagNode, ...] = (
    TagNode("00", "payload_format_indicator"),
    TagNode("01", "point_of_initiation_method"),
    TagNode("02", "merchant_principal_visa"),
    TagNode("04", "merchant_principal_mastercard"),
    *(_merchant_information(tag_id) for tag_id in MERCHANT_INFORMATION_TAGS),
    TagNode("52", "mcc"),
    TagNode("53", "transaction_currency"),
    TagNode("54", "transaction_amount"),
    TagNode("55", "tip_indicator"),
    TagNode("56", "fixed_tip_amount"),
    TagNode("57", "percentage_tip_amount"),
    TagNode("58", "country_code"),
    TagNode("59", "merchant_name"),
    TagNode("60", "merchant_city"),
    TagNode("61", "merchant_postal_code"),
    ADDITIONAL_DATA,
    TagNode(CRC_TAG, "crc"),
)


def resolve_by_id_among(siblings: Sequence[TagNode], tag_id: str) -> Optional[TagNode]:
    """Return the node with ``tag_id`` among ``siblings``, or ``None``."""
    for node in siblings:
        if node.id == tag_id:
            return node
    return None


def resolve_by_name(
    name: str,
    schema: Sequence[TagNode] = MPM_TAGS,
) -> Optional[tuple[str, Sequence[TagNode]]]:
    """
    Find the tag id for a field name anywhere in the schema forest.

    Top-level nodes are searched before any children, so a name that exists
    at both levels resolves to the top-level tag.

    Args:
        name: The field name to look up.
        schema: The schema forest to search.

    Returns:
        ``(tag_id, owner_siblings)`` where ``owner_siblings`` is the list the
        node was found in, or ``None`` when the name is unknown.
    """
    levels: list[Sequence[TagNode]] = [schema]
    while levels:
        siblings = levels.pop(0)
        for node in siblings:
            if node.name == name:
                return node.id, siblings
        levels.extend(node.children for node in siblings if node.children)
    return None
