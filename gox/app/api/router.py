"""
Top‑level router.

Aggregates the endpoint routers.  Which routers are mounted depends on
the settings, so the router is built per application.
"""

from fastapi import APIRouter

from ..core.config import Settings
from .endpoints import home, users


def build_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(home.router, tags=["home"])
    router.include_router(users.router, tags=["users"])
    if settings.enable_user_creation:
        router.include_router(users.creation_router, tags=["users"])
    return router
