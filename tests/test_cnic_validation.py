import pytest

from pkcnic.services.cnic_validation import evaluate_cnic
from pkcnic.utils.cnic import is_valid


@pytest.mark.parametrize(
    "cnic, cnic_format",
    [
        ("12345-1234567-1", "dashed"),
        ("1234512345671", "undashed"),
        ("  99999-9999999-9\n", "dashed"),
    ],
)
def test_valid_cnic_has_no_reason(cnic, cnic_format):
    result = evaluate_cnic(cnic)

    assert result.is_valid is True
    assert result.cnic_format == cnic_format
    assert result.reason is None


@pytest.mark.parametrize("cnic", ["", "   ", None])
def test_empty_cnic_is_required(cnic):
    result = evaluate_cnic(cnic)

    assert result.is_valid is False
    assert result.cnic_format is None
    assert result.reason == "CNIC is required."


@pytest.mark.parametrize(
    "cnic",
    ["invalid-cnic-123", "12345-123456-1", "1234512345671-1", "12345 1234567 1"],
)
def test_unrecognised_layout(cnic):
    result = evaluate_cnic(cnic)

    assert result.is_valid is False
    assert result.cnic_format is None
    assert "13 digits" in result.reason


@pytest.mark.parametrize(
    "cnic, cnic_format, word",
    [
        ("02345-1234567-1", "dashed", "Province"),
        ("1034512345671", "undashed", "District"),
        ("12000-1234567-1", "dashed", "Family"),
        ("1234500000001", "undashed", "Serial"),
    ],
)
def test_field_out_of_range(cnic, cnic_format, word):
    result = evaluate_cnic(cnic)

    assert result.is_valid is False
    assert result.cnic_format == cnic_format
    assert result.reason.startswith(word)


def test_province_is_reported_before_later_fields():
    # province, family and serial are all zero
    result = evaluate_cnic("00000-0000000-0")

    assert result.reason.startswith("Province")


@pytest.mark.parametrize(
    "cnic",
    [
        "12345-1234567-1",
        "1234512345671",
        "10345-1234567-1",
        "12345-0000000-1",
        "abcdefghijklm",
        " ",
    ],
)
def test_verdict_matches_is_valid(cnic):
    assert evaluate_cnic(cnic).is_valid == is_valid(cnic)


@pytest.mark.parametrize("cnic", ["\u00a012345-1234567-1", "1234512345671\u00a0"])
def test_unicode_spaces_are_not_trimmed(cnic):
    result = evaluate_cnic(cnic)

    assert result.is_valid is False
    assert result.cnic_format is None
    assert result.is_valid == is_valid(cnic)


def test_ascii_control_whitespace_is_trimmed():
    result = evaluate_cnic("\x0b12345-1234567-1\x00")

    assert result.is_valid is True
    assert result.cnic_format == "dashed"
