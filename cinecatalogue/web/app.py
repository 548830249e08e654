"""
Application FastAPI du catalogue.

Initialise l'application web avec le Container DI, monte les routes et
traduit les erreurs du domaine en statuts HTTP.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..container import Container
from ..core.errors import AlreadyImportedError, MovieNotFoundError
from .routes.export import router as export_router
from .routes.movies import router as movies_router
from .routes.tmdb import router as tmdb_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Cree l'application web.

    Args:
        container: Container a utiliser (un nouveau par defaut)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au demarrage et ferme les clients HTTP a l'arret."""
        app_container = container or Container()
        app_container.database.init()
        app.state.container = app_container
        yield
        await app_container.tmdb_client().close()
        await app_container.weather_client().close()
        app_container.shutdown_resources()

    app = FastAPI(title="CineCatalogue", version=__version__, lifespan=lifespan)

    @app.exception_handler(MovieNotFoundError)
    async def movie_not_found(request: Request, exc: MovieNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(AlreadyImportedError)
    async def already_imported(request: Request, exc: AlreadyImportedError):
        logger.info("Import refuse: {error}", error=str(exc))
        return JSONResponse(
            status_code=409,
            content={"detail": "Film deja importe", "movie_id": exc.existing_id},
        )

    app.include_router(movies_router)
    app.include_router(tmdb_router)
    app.include_router(export_router)
    return app


app = create_app()
