from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


CnicFormat = Literal["dashed", "undashed"]


class CnicInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Trimmed input, in the caller's format")
    identifier_with_dashes: str = Field(..., description="12345-1234567-1 form")
    identifier_without_dashes: str = Field(..., description="1234512345671 form")
    province_code: str = Field(..., min_length=1, max_length=1)
    district_code: str = Field(..., min_length=2, max_length=2)
    family_number: str = Field(..., min_length=3, max_length=3)
    serial_number: str = Field(..., min_length=7, max_length=7)
    check_digit: str = Field(..., min_length=1, max_length=1)


class CnicRequest(BaseModel):
    cnic: str = Field(..., description="CNIC with or without dashes")


class CnicFormatRequest(CnicRequest):
    dashes: bool = Field(True, description="True for 12345-1234567-1, False for 1234512345671")


class CnicValidateResponse(BaseModel):
    cnic: str
    is_valid: bool
    is_valid_with_dashes: bool
    is_valid_without_dashes: bool
    cnic_format: CnicFormat | None = None
    reason: str | None = None


class CnicFormatResponse(BaseModel):
    cnic: str
    formatted: str
