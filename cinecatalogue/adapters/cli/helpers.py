"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_catalogue : decorateur injectant un CatalogueService initialise
"""

from contextlib import contextmanager
from functools import wraps

from loguru import logger as loguru_logger
from rich.console import Console

from cinecatalogue.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinecatalogue")
    try:
        yield
    finally:
        loguru_logger.enable("cinecatalogue")


def with_catalogue(func):
    """
    Decorateur qui injecte un CatalogueService en premier argument.

    Cree un container, initialise la base, ouvre une session puis ferme
    la session et les clients HTTP a la fin de la commande.

    Usage:
        @with_catalogue
        async def my_command(service, ...):
            movies = service.list_movies()
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        container = Container()
        container.database.init()
        session = container.session()
        try:
            service = container.catalogue_service(
                movie_repo=container.movie_repository(session=session)
            )
            return await func(service, *args, **kwargs)
        finally:
            session.close()
            await container.tmdb_client().close()
            await container.weather_client().close()
            container.shutdown_resources()

    return wrapper
