from fastapi import FastAPI

from .devices import router as devices_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(devices_router)
    app.include_router(notifications_router)
