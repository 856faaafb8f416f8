# presentation/api/endpoints/connection.py
from typing import Optional
from fastapi import APIRouter, Depends

from ....application.dto.vpn_dto import ConnectRequest
from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api/connection", tags=["connection"])

@router.get("")
async def get_connection(services: ServiceContainer = Depends(get_services)):
    return success(services.vpn_service.get_connection().to_dict())

@router.post("/connect")
async def connect(
    payload: Optional[ConnectRequest] = None,
    services: ServiceContainer = Depends(get_services)
):
    server_id = payload.server_id if payload else None
    connection = services.vpn_service.connect(server_id)
    services.audit_logger.log_connection_change("connect", connection.server_id, connection.server_name)
    return success(connection.to_dict())

@router.post("/disconnect")
async def disconnect(services: ServiceContainer = Depends(get_services)):
    previous = services.vpn_service.get_connection()
    connection = services.vpn_service.disconnect()
    if previous.connected:
        services.audit_logger.log_connection_change("disconnect", previous.server_id, previous.server_name)
    return success(connection.to_dict())
