# presentation/api/endpoints/status.py
from fastapi import APIRouter, Depends

from ....application.dto.vpn_dto import HealthResponse
from ....domain.entities.record import utc_timestamp
from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api", tags=["status"])

@router.get("/status")
async def get_status(services: ServiceContainer = Depends(get_services)):
    return success(services.vpn_service.get_status())

@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(status="ok", timestamp=utc_timestamp())
