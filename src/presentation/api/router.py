# presentation/api/router.py
from fastapi import APIRouter
from .endpoints import (
    connection,
    history,
    profiles,
    rules,
    servers,
    status,
)

api_router = APIRouter()
api_router.include_router(servers.router)
api_router.include_router(rules.router)
api_router.include_router(profiles.router)
api_router.include_router(connection.router)
api_router.include_router(history.router)
api_router.include_router(status.router)
