# presentation/api/endpoints/rules.py
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, status

from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api/rules", tags=["rules"])

@router.get("")
async def list_rules(services: ServiceContainer = Depends(get_services)):
    return success([r.to_dict() for r in services.list_rules.execute()])

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_rule(
    body: Optional[Dict[str, Any]] = Body(None),
    services: ServiceContainer = Depends(get_services)
):
    rule = services.create_rule.execute(body or {})
    services.audit_logger.log_resource_creation("rule", rule.id, {"pattern": rule.pattern})
    return success(rule.to_dict())

@router.delete("/{rule_id}")
async def delete_rule(rule_id: str, services: ServiceContainer = Depends(get_services)):
    if services.delete_rule.execute(rule_id):
        services.audit_logger.log_resource_deletion("rule", rule_id)
    return success(include_data=False)

@router.patch("/{rule_id}/toggle")
async def toggle_rule(rule_id: str, services: ServiceContainer = Depends(get_services)):
    rule = services.toggle_rule.execute(rule_id)
    services.audit_logger.log_resource_update("rule", rule_id, {"enabled": rule.enabled})
    return success(rule.to_dict())
