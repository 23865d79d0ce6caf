from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.employee_repository import employee_repository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    try:
        if employee_repository.initialized:
            ok = await employee_repository.check_connection()
            services["database"] = "ok" if ok else "error"
        else:
            services["database"] = "not_configured"
    except Exception:
        services["database"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
