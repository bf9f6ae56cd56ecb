"""
Informational endpoints.

``GET /`` describes the service and its routes; ``GET /health`` and
``GET /test`` report a status label with the current time.  None of
these touch the user store.
"""

from fastapi import APIRouter, Request

from users_api.app.schemas.info import ServiceInfo, StatusReport
from users_api.app.services.info_service import InfoService

router = APIRouter()


@router.get("/", response_model=ServiceInfo)
async def get_info(request: Request) -> ServiceInfo:
    """Return the service name, version, description and endpoints."""
    return InfoService.describe(request.app.state.settings)


@router.get("/health", response_model=StatusReport)
async def health() -> StatusReport:
    return InfoService.status("ok")


@router.get("/test", response_model=StatusReport)
async def test_endpoint() -> StatusReport:
    return InfoService.status("test")
