import logging

from pushgate.main import app, create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

__all__ = ["app", "create_app"]
