# pkcnic/utils/cnic.py
"""
Pakistan CNIC validation and normalization.

A CNIC is 13 digits, written either dashed (12345-1234567-1) or
undashed (1234512345671). Field layout of the 13 digits:

    province_code  offset 0,  1 digit   1..9
    district_code  offset 0,  2 digits  11..99
    family_number  offset 2,  3 digits  001..999
    serial_number  offset 5,  7 digits  0000001..9999999
    check_digit    offset 12, 1 digit   0..9 (not verified)

Every function trims surrounding whitespace first and never raises on bad
input: validators return False, formatters and extract_info return None.
"""

import re
from typing import Optional

from pkcnic.schemas.cnic import CnicInfo

# ASCII only: \d would also accept Arabic-Indic and other Unicode digits.
CNIC_WITH_DASHES_PATTERN = re.compile(r"[0-9]{5}-[0-9]{7}-[0-9]")
CNIC_WITHOUT_DASHES_PATTERN = re.compile(r"[0-9]{13}")

CNIC_LENGTH = 13

# Only ASCII whitespace and NUL are trimmed; NBSP and other Unicode spaces are not.
CNIC_WHITESPACE = " \t\n\r\x0b\x00"

# (name, offset, length, min, max)
CNIC_FIELDS = (
    ("province_code", 0, 1, 1, 9),
    ("district_code", 0, 2, 11, 99),
    ("family_number", 2, 3, 1, 999),
    ("serial_number", 5, 7, 1, 9999999),
    ("check_digit", 12, 1, 0, 9),
)


def clean_cnic(cnic: Optional[str]) -> str:
    return (cnic or "").strip(CNIC_WHITESPACE)


def _is_ascii_digits(s: str) -> bool:
    return s.isascii() and s.isdigit()


def _field(numeric: str, offset: int, length: int) -> str:
    return numeric[offset:offset + length]


def invalid_field(numeric: str) -> Optional[str]:
    """
    Return the name of the first field out of range, or None if every
    field passes. `numeric` must be the 13-digit form; anything else
    reports "length".
    """
    if len(numeric) != CNIC_LENGTH or not _is_ascii_digits(numeric):
        return "length"

    for name, offset, length, low, high in CNIC_FIELDS:
        value = int(_field(numeric, offset, length))
        if value < low or value > high:
            return name

    return None


def _is_valid_numeric(numeric: str) -> bool:
    return invalid_field(numeric) is None


def _add_dashes(numeric: str) -> str:
    return f"{numeric[:5]}-{numeric[5:12]}-{numeric[12]}"


def is_valid_with_dashes(cnic: Optional[str]) -> bool:
    """Validate the dashed form: 5 digits, dash, 7 digits, dash, 1 digit."""
    cnic = clean_cnic(cnic)
    if not cnic:
        return False

    if not CNIC_WITH_DASHES_PATTERN.fullmatch(cnic):
        return False

    return _is_valid_numeric(cnic.replace("-", ""))


def is_valid_without_dashes(cnic: Optional[str]) -> bool:
    """Validate the undashed form: exactly 13 digits."""
    cnic = clean_cnic(cnic)
    if not cnic:
        return False

    if not CNIC_WITHOUT_DASHES_PATTERN.fullmatch(cnic):
        return False

    return _is_valid_numeric(cnic)


def is_valid(cnic: Optional[str]) -> bool:
    """Validate a CNIC in either the dashed or the undashed form."""
    cnic = clean_cnic(cnic)
    if not cnic:
        return False

    return is_valid_with_dashes(cnic) or is_valid_without_dashes(cnic)


def format_with_dashes(cnic: Optional[str]) -> Optional[str]:
    """
    Return the dashed form (12345-1234567-1), or None if invalid.
    Already-dashed input comes back trimmed but otherwise unchanged.
    """
    cnic = clean_cnic(cnic)
    if not cnic:
        return None

    if is_valid_with_dashes(cnic):
        return cnic

    if is_valid_without_dashes(cnic):
        return _add_dashes(cnic)

    return None


def format_without_dashes(cnic: Optional[str]) -> Optional[str]:
    """Return the 13-digit form (1234512345671), or None if invalid."""
    cnic = clean_cnic(cnic)
    if not cnic:
        return None

    if is_valid_without_dashes(cnic):
        return cnic

    if is_valid_with_dashes(cnic):
        return cnic.replace("-", "")

    return None


def extract_info(cnic: Optional[str]) -> Optional[CnicInfo]:
    """
    Split a valid CNIC into its fields.

    `identifier` echoes the trimmed input in whatever form the caller
    used; every other field comes from the 13-digit form, so the dashed
    and undashed spellings of one CNIC give the same values.
    """
    cnic = clean_cnic(cnic)
    if not is_valid(cnic):
        return None

    numeric = cnic.replace("-", "")
    fields = {
        name: _field(numeric, offset, length)
        for name, offset, length, _low, _high in CNIC_FIELDS
    }

    return CnicInfo(
        identifier=cnic,
        identifier_with_dashes=_add_dashes(numeric),
        identifier_without_dashes=numeric,
        **fields,
    )
