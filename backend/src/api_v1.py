"""API v1 router: all JSON endpoints under /api/v1 prefix."""

from fastapi import APIRouter

from .credits.routes import router as account_router
from .generation.routes import router as generation_router
from .letters.routes import router as letters_router

api_v1_router = APIRouter(prefix="/api/v1", tags=["api-v1"])

api_v1_router.include_router(generation_router)
api_v1_router.include_router(letters_router)
api_v1_router.include_router(account_router)
