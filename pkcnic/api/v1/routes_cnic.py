import logging

from fastapi import APIRouter, HTTPException

from pkcnic.schemas.cnic import (
    CnicFormatRequest,
    CnicFormatResponse,
    CnicInfo,
    CnicRequest,
    CnicValidateResponse,
)
from pkcnic.services.cnic_validation import evaluate_cnic
from pkcnic.utils.cnic import (
    clean_cnic,
    extract_info,
    format_with_dashes,
    format_without_dashes,
    is_valid_with_dashes,
    is_valid_without_dashes,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/cnic",
    tags=["CNIC"],
)


def _mask(cnic: str) -> str:
    cnic = clean_cnic(cnic)
    if len(cnic) <= 4:
        return "*" * len(cnic)
    return "*" * (len(cnic) - 4) + cnic[-4:]


def _reject(cnic: str) -> HTTPException:
    result = evaluate_cnic(cnic)
    logger.info("Rejected CNIC %s: %s", _mask(cnic), result.reason)
    return HTTPException(
        status_code=422,
        detail=result.reason,
    )


@router.post(
    "/validate",
    response_model=CnicValidateResponse,
    summary="Check a CNIC in either format",
)
async def validate_cnic(payload: CnicRequest) -> CnicValidateResponse:
    """
    Always 200; `is_valid` carries the verdict and `reason` explains
    a rejection.
    """
    result = evaluate_cnic(payload.cnic)

    return CnicValidateResponse(
        cnic=clean_cnic(payload.cnic),
        is_valid=result.is_valid,
        is_valid_with_dashes=is_valid_with_dashes(payload.cnic),
        is_valid_without_dashes=is_valid_without_dashes(payload.cnic),
        cnic_format=result.cnic_format,
        reason=result.reason,
    )


@router.post(
    "/format",
    response_model=CnicFormatResponse,
    summary="Convert a CNIC to the dashed or undashed form",
)
async def format_cnic(payload: CnicFormatRequest) -> CnicFormatResponse:
    if payload.dashes:
        formatted = format_with_dashes(payload.cnic)
    else:
        formatted = format_without_dashes(payload.cnic)

    if formatted is None:
        raise _reject(payload.cnic)

    return CnicFormatResponse(
        cnic=clean_cnic(payload.cnic),
        formatted=formatted,
    )


@router.post(
    "/extract",
    response_model=CnicInfo,
    summary="Split a CNIC into province, district, family, serial and check digit",
)
async def extract_cnic(payload: CnicRequest) -> CnicInfo:
    info = extract_info(payload.cnic)

    if info is None:
        raise _reject(payload.cnic)

    return info
