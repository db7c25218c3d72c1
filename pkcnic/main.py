import logging

from fastapi import FastAPI

from pkcnic.api.v1.routes_health import router as health_router
from pkcnic.api.v1.routes_cnic import router as cnic_router
from pkcnic.core.config import settings


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app 
app = FastAPI(
    title="PkCnic Backend",
    version="1.0.0",
    description="Pakistan CNIC validation and formatting",
)

# Include backend routes
app.include_router(health_router, prefix=settings.API_V1_PREFIX)
app.include_router(cnic_router, prefix=settings.API_V1_PREFIX)
