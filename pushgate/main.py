from contextlib import asynccontextmanager

from fastapi import FastAPI

from pushgate.infrastructure.database import engine, initialize_database
from pushgate.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release the engine on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(title="pushgate", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
