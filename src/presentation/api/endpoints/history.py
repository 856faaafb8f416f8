# presentation/api/endpoints/history.py
from typing import Optional
from fastapi import APIRouter, Depends

from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api/history", tags=["history"])

@router.get("")
async def list_history(
    limit: Optional[str] = None,
    services: ServiceContainer = Depends(get_services)
):
    return success([e.to_dict() for e in services.list_history.execute(limit)])

@router.delete("")
async def clear_history(services: ServiceContainer = Depends(get_services)):
    removed = services.clear_history.execute()
    services.audit_logger.log_history_cleared(removed)
    return success(include_data=False)
