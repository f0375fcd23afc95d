# routers/health.py

from fastapi import APIRouter

from core.config import settings
from core.config_validator import validate_auth_config

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


# -----------------------------------------------------
# GET /health/app
# Lightweight check for uptime monitors
# -----------------------------------------------------
@router.get("/app", summary="App health check")
async def health_app():
    missing = validate_auth_config()
    return {
        "service": settings.PROJECT_NAME,
        "status": "ok",
        "auth": "configured" if not missing else "not_configured",
    }
