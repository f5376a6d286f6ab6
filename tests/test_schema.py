"""Tests for the tag schema and its lookups."""
from qrislink.parsing.schema import (
    ADDITIONAL_DATA,
    MERCHANT_INFORMATION_TAGS,
    MPM_TAGS,
    TagNode,
    resolve_by_id_among,
    resolve_by_name,
)


def test_top_level_ids_are_unique():
    ids = [node.id for node in MPM_TAGS]
    assert len(ids) == len(set(ids))


def test_top_level_names_are_unique():
    names = [node.name for node in MPM_TAGS]
    assert len(names) == len(set(names))


def test_children_are_leaves():
    for node in MPM_TAGS:
        for child in node.children:
            assert child.children == ()


def test_merchant_information_templates():
    for tag_id in MERCHANT_INFORMATION_TAGS:
        node = resolve_by_id_among(MPM_TAGS, tag_id)
        assert node is not None
        assert node.name == f"merchant_information_{tag_id}"
        assert [c.id for c in node.children] == ["00", "01", "02", "03"]
        assert [c.name for c in node.children] == [
            "global_unique_identifier",
            "merchant_pan",
            "merchant_id",
            "merchant_criteria",
        ]


def test_additional_data_children():
    ids = [c.id for c in ADDITIONAL_DATA.children]
    assert ids == [f"{i:02d}" for i in range(12)] + ["99"]
    assert ADDITIONAL_DATA.find_child("99").name == "extra_data"
    assert ADDITIONAL_DATA.find_child("07").name == "terminal_label"


def test_resolve_by_id_among_known():
    node = resolve_by_id_among(MPM_TAGS, "53")
    assert node == TagNode("53", "transaction_currency")


def test_resolve_by_id_among_unknown():
    assert resolve_by_id_among(MPM_TAGS, "98") is None
    assert ADDITIONAL_DATA.find_child("50") is None


def test_resolve_by_name_top_level():
    tag_id, siblings = resolve_by_name("merchant_city")
    assert tag_id == "60"
    assert siblings is MPM_TAGS


def test_resolve_by_name_child():
    tag_id, siblings = resolve_by_name("bill_number")
    assert tag_id == "01"
    assert siblings is ADDITIONAL_DATA.children


def test_resolve_by_name_prefers_top_level():
    schema = (
        TagNode("10", "outer", (TagNode("01", "shared"),)),
        TagNode("20", "shared"),
    )
    tag_id, siblings = resolve_by_name("shared", schema)
    assert tag_id == "20"
    assert siblings is schema


def test_resolve_by_name_unknown():
    assert resolve_by_name("does_not_exist") is None


def test_label():
    assert resolve_by_id_among(MPM_TAGS, "00").label == "Payload Format Indicator"
