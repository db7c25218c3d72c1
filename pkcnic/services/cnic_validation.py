from pkcnic.schemas.cnic import CnicFormat
from pkcnic.utils.cnic import (
    CNIC_WITH_DASHES_PATTERN,
    CNIC_WITHOUT_DASHES_PATTERN,
    clean_cnic,
    invalid_field,
)


class CnicValidationResult:
    def __init__(
        self,
        is_valid: bool,
        cnic_format: CnicFormat | None = None,
        reason: str | None = None,
    ):
        self.is_valid = is_valid
        self.cnic_format = cnic_format
        self.reason = reason


_FIELD_REASONS = {
    "province_code": "Province code must be between 1 and 9.",
    "district_code": "District code must be between 11 and 99.",
    "family_number": "Family number must be between 001 and 999.",
    "serial_number": "Serial number must be between 0000001 and 9999999.",
    "check_digit": "Check digit must be between 0 and 9.",
}


def evaluate_cnic(cnic: str | None) -> CnicValidationResult:
    """
    Same verdict as is_valid(), plus which layout matched and the
    first rule that failed:
    - Empty input
    - Layout: 12345-1234567-1 or 1234512345671
    - Field ranges, in order: province, district, family, serial
    """
    cnic = clean_cnic(cnic)

    if not cnic:
        return CnicValidationResult(
            is_valid=False,
            reason="CNIC is required.",
        )

    if CNIC_WITH_DASHES_PATTERN.fullmatch(cnic):
        cnic_format = "dashed"
    elif CNIC_WITHOUT_DASHES_PATTERN.fullmatch(cnic):
        cnic_format = "undashed"
    else:
        return CnicValidationResult(
            is_valid=False,
            reason="CNIC must be 13 digits, either 12345-1234567-1 or 1234512345671.",
        )

    failed = invalid_field(cnic.replace("-", ""))
    if failed is not None:
        return CnicValidationResult(
            is_valid=False,
            cnic_format=cnic_format,
            reason=_FIELD_REASONS[failed],
        )

    return CnicValidationResult(
        is_valid=True,
        cnic_format=cnic_format,
        reason=None,
    )
