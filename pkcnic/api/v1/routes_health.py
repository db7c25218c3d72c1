from typing import get_args

from fastapi import APIRouter

from pkcnic.core.config import settings
from pkcnic.schemas.cnic import CnicFormat

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Health check")
async def health_check():
    return {
        "app": settings.APP_NAME,
        "status": "ok",
        "cnic_formats": list(get_args(CnicFormat)),
    }
