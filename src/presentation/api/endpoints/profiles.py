# presentation/api/endpoints/profiles.py
from fastapi import APIRouter, Depends

from ..deps import ServiceContainer, get_services, success

router = APIRouter(prefix="/api/profiles", tags=["profiles"])

@router.get("")
async def list_profiles(services: ServiceContainer = Depends(get_services)):
    return success([p.to_dict() for p in services.list_profiles.execute()])

@router.get("/active")
async def get_active_profile(services: ServiceContainer = Depends(get_services)):
    profile = services.get_active_profile.execute()
    return success(profile.to_dict() if profile else None)
