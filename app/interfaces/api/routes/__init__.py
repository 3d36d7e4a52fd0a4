from fastapi import FastAPI

from .books import router as books_router
from .hello import router as hello_router
from .pricing import router as pricing_router
from .readers import router as readers_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(hello_router)
    app.include_router(books_router)
    app.include_router(pricing_router)
    app.include_router(readers_router)
    app.include_router(users_router)
