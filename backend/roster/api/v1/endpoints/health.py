from __future__ import annotations

from fastapi import APIRouter, Depends

from roster.core.config import settings
from roster.core.dependencies import get_list_views
from roster.services.employee_api import employee_api
from roster.services.employee_list import ListViewRegistry

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    list_views: ListViewRegistry = Depends(get_list_views),  # noqa: B008
):
    services: dict[str, str] = {}

    try:
        if employee_api.initialized:
            ok = await employee_api.check_connection()
            services["employee_api"] = "ok" if ok else "error"
        else:
            services["employee_api"] = "not_configured"
    except Exception:
        services["employee_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "open_list_views": len(list_views),
        "max_list_views": list_views.max_views,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
