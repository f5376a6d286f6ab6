"""Tests for the TLV codec (decode, encode, lookups, edge cases)."""
import pytest

from qrislink.exceptions import MalformedTlvError
from qrislink.parsing.tlv import (
    TlvRecord,
    decode_tlv,
    encode_tlv,
    get_sub_tag_value,
    get_value_by_tag,
    is_valid_tag,
)


def test_decode_single_record():
    assert decode_tlv("000201") == [TlvRecord("00", 2, "01")]


def test_decode_multiple_records_in_order():
    result = decode_tlv("0002010102115303360")
    assert result == [
        TlvRecord("00", 2, "01"),
        TlvRecord("01", 2, "11"),
        TlvRecord("53", 3, "360"),
    ]


def test_decode_empty():
    assert decode_tlv("") == []


def test_decode_shorter_than_header():
    assert decode_tlv("000") == []


def test_decode_zero_length_value():
    assert decode_tlv("0100") == [TlvRecord("01", 0, "")]


def test_decode_truncated_tail_returns_records_so_far():
    # Tag 59 declares 12 characters but only 5 follow.
    result = decode_tlv("5303360" + "5912VFS G")
    assert result == [TlvRecord("53", 3, "360")]


def test_decode_trailing_partial_header_ignored():
    assert decode_tlv("5303360" + "59") == [TlvRecord("53", 3, "360")]


def test_decode_unparsable_length_counts_as_zero():
    # "AB" is not a length, so tag 01 gets an empty value and decoding resumes right after it.
    result = decode_tlv("01AB5303360")
    assert result == [TlvRecord("01", 0, ""), TlvRecord("53", 3, "360")]


def test_decode_non_numeric_tag_raises():
    with pytest.raises(MalformedTlvError) as excinfo:
        decode_tlv("fewijnfjnfjif2")
    assert excinfo.value.tag == "fe"
    assert excinfo.value.position == 0


def test_decode_non_numeric_tag_after_valid_records():
    with pytest.raises(MalformedTlvError) as excinfo:
        decode_tlv("000201XY0201")
    assert excinfo.value.position == 6
    assert "XY" in str(excinfo.value)


def test_decode_signed_tag_is_skipped_with_its_value():
    # "-1" looks numeric but is not a valid tag; its 3-char value is skipped too.
    result = decode_tlv("000201" + "-103abc" + "5303360")
    assert result == [TlvRecord("00", 2, "01"), TlvRecord("53", 3, "360")]


def test_decode_unknown_numeric_tag_is_kept():
    result = decode_tlv("000201" + "98021A")
    assert result[-1] == TlvRecord("98", 2, "1A")


def test_decode_full_payload(bni_payload):
    records = decode_tlv(bni_payload)
    tags = [r.tag for r in records]
    assert tags == ["00", "01", "26", "51", "52", "53", "58", "59", "60", "61", "62", "63"]
    assert get_value_by_tag(records, "59") == "VFS GLOBAL 6"
    assert get_value_by_tag(records, "63") == "D7C5"
    for record in records:
        assert record.length == len(record.value)


def test_encode_records():
    records = [TlvRecord("00", 2, "01"), TlvRecord("53", 3, "360")]
    assert encode_tlv(records) == "0002015303360"


def test_encode_pads_length():
    assert encode_tlv([TlvRecord.of("62", "0703A01")]) == "62070703A01"


def test_encode_empty():
    assert encode_tlv([]) == ""


def test_encode_rejects_length_mismatch():
    with pytest.raises(ValueError):
        encode_tlv([TlvRecord("59", 4, "VFS GLOBAL 6")])


def test_encode_rejects_bad_tag():
    with pytest.raises(ValueError):
        encode_tlv([TlvRecord("5", 3, "360")])


def test_encode_rejects_value_over_99_characters():
    with pytest.raises(ValueError):
        encode_tlv([TlvRecord.of("62", "x" * 100)])


def test_roundtrip_full_payload(bni_payload):
    assert encode_tlv(decode_tlv(bni_payload)) == bni_payload


def test_record_of_sets_length():
    record = TlvRecord.of("60", "JAKARTA SELATAN")
    assert record.length == 15


def test_get_value_by_tag_missing():
    assert get_value_by_tag([TlvRecord("00", 2, "01")], "63") is None


def test_get_sub_tag_value(bni_payload):
    records = decode_tlv(bni_payload)
    assert get_sub_tag_value(records, "51", "02") == "ID2022233782269"
    assert get_sub_tag_value(records, "62", "07") == "A01"
    assert get_sub_tag_value(records, "62", "01") is None
    assert get_sub_tag_value(records, "27", "00") is None


def test_is_valid_tag():
    assert is_valid_tag("00")
    assert is_valid_tag("99")
    assert not is_valid_tag("9")
    assert not is_valid_tag("-1")
    assert not is_valid_tag("A1")


def test_decode_unicode_digit_length_counts_as_zero():
    # "²²" passes str.isdigit() but is not a length.
    assert decode_tlv("01²²AB") == [TlvRecord("01", 0, "")]
    assert decode_tlv("01²²5303360") == [TlvRecord("01", 0, ""), TlvRecord("53", 3, "360")]


def test_multibyte_value_length_counts_characters():
    records = decode_tlv("5910Kedai Café")
    assert records == [TlvRecord("59", 10, "Kedai Café")]
    assert encode_tlv(records) == "5910Kedai Café"
    assert TlvRecord.of("59", "Kedai Café").length == 10
