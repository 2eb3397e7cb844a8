from __future__ import annotations

from fastapi import APIRouter

from hr_analytics.core.config import settings
from hr_analytics.services.employee_service import employee_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    try:
        if employee_service.initialized:
            ok = await employee_service.check_connection()
            services["employee_store"] = "ok" if ok else "error"
        else:
            services["employee_store"] = "not_configured"
    except Exception:
        services["employee_store"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "backend": employee_service.backend,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
