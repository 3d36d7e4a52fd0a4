import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_settings
from app.interfaces.api.dependencies import get_library_manager, reset_dependency_cache
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepara la biblioteca al arrancar y la descarta al cerrar."""

    manager = get_library_manager()
    logger.info("Biblioteca inicializada con %d libros", len(manager.available_titles))
    yield
    reset_dependency_cache()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
