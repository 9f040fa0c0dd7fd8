"""FastAPI dependency utilities."""

from functools import partial

from fastapi import Depends

from pushgate.application.use_cases.notifications import ConnectionFactory
from pushgate.config import Settings, get_settings
from pushgate.infrastructure.gateway import open_for_delivery


def get_app_settings() -> Settings:
    return get_settings()


def get_connection_factory(
    settings: Settings = Depends(get_app_settings),
) -> ConnectionFactory:
    """Return the callable that opens one gateway connection per delivery pass."""

    return partial(open_for_delivery, settings)
