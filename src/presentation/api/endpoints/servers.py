# presentation/api/endpoints/servers.py
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, status

from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api/servers", tags=["servers"])

@router.get("")
async def list_servers(services: ServiceContainer = Depends(get_services)):
    return success([s.to_dict() for s in services.list_servers.execute()])

@router.get("/{server_id}")
async def get_server(server_id: str, services: ServiceContainer = Depends(get_services)):
    return success(services.get_server.execute(server_id).to_dict())

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_server(
    body: Optional[Dict[str, Any]] = Body(None),
    services: ServiceContainer = Depends(get_services)
):
    server = services.create_server.execute(body or {})
    services.audit_logger.log_resource_creation("server", server.id, {"name": server.name})
    return success(server.to_dict())

@router.put("/{server_id}")
async def update_server(
    server_id: str,
    body: Optional[Dict[str, Any]] = Body(None),
    services: ServiceContainer = Depends(get_services)
):
    changes = body or {}
    server = services.update_server.execute(server_id, changes)
    services.audit_logger.log_resource_update("server", server_id, {"fields": sorted(changes)})
    return success(server.to_dict())

@router.delete("/{server_id}")
async def delete_server(server_id: str, services: ServiceContainer = Depends(get_services)):
    removed = services.delete_server.execute(server_id)
    if removed:
        services.audit_logger.log_resource_deletion("server", server_id)
    return success(include_data=False)
