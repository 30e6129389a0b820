"""Health check endpoint."""

import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from site_functions.config import settings

# Cold start time of this function instance
_app_start_time = time.time()

router = APIRouter(tags=["Health"])


@router.get("/status")
async def get_status() -> JSONResponse:
    """
    Health check for monitoring.

    Reports which upstreams are configured without contacting them.

    Returns:
        JSONResponse with status, version, uptime and configured upstreams
    """
    uptime_seconds = int(time.time() - _app_start_time)

    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "version": settings.api_version,
            "uptime_seconds": uptime_seconds,
            "configured": {
                "supabase": bool(settings.supabase_url and settings.supabase_service_key),
                "hubspot": bool(settings.hubspot_private_token),
                "calcom_webhook": bool(settings.calcom_webhook_secret),
                "notifications": settings.notifications_enabled,
            },
        },
    )
