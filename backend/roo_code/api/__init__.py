"""
API routes package initialization.
"""

from fastapi import APIRouter

from roo_code.api.assistant import router as assistant_router
from roo_code.api.settings import router as settings_router
from roo_code.api.sparc import router as sparc_router

# Create main API router with v1 versioning
api_router = APIRouter(prefix="/api/v1")

api_router.include_router(assistant_router)
api_router.include_router(sparc_router)
api_router.include_router(settings_router)

__all__ = ["api_router"]
