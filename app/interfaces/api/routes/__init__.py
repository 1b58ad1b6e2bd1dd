from fastapi import FastAPI

from .auth import router as auth_router
from .health import router as health_router
from .notifications import router as notifications_router
from .prayers import router as prayers_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(prayers_router)
    app.include_router(notifications_router)
