"""API v1 routers.

Resources:
    /api/v1/authorization/me - Caller's role and permissions
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.authorization import authorization_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(authorization_router)

__all__ = [
    "v1_router",
]
