from __future__ import annotations

from fastapi import APIRouter

from staff_directory.core.config import settings
from staff_directory.models.directory import LoadState
from staff_directory.services.directory_client import directory_client
from staff_directory.services.directory_shell import directory_shell
from staff_directory.services.location_service import location_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    services["directory_api"] = "configured" if directory_client.initialized else "not_configured"
    services["location"] = location_service.provider if location_service.initialized else "not_configured"

    return {
        "status": "degraded" if directory_shell.load_state == LoadState.ERRORED else "healthy",
        "version": settings.APP_VERSION,
        "load_state": directory_shell.load_state.value,
        "services": services,
    }


@router.get("/upstream")
async def upstream_check():
    ok = await directory_client.check_connection()
    return {"directory_api": "ok" if ok else "error"}


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
