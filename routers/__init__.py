# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .access import router as access_router
from .validation import router as validation_router
from .health import router as health_router


# Master router for mounting everything under one prefix
api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(access_router)
api_router.include_router(validation_router)
api_router.include_router(health_router)

__all__ = ["api_router"]
