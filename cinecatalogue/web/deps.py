"""
Dependances partagees de l'application web.

Chaque requete obtient une session SQLModel dediee, fermee en fin de requete,
et un CatalogueService construit par le container de l'application.
"""

from collections.abc import Iterator

from fastapi import Request

from ..container import Container
from ..services.catalogue import CatalogueService


def get_container(request: Request) -> Container:
    """Retourne le container DI attache a l'application."""
    return request.app.state.container


def get_catalogue_service(request: Request) -> Iterator[CatalogueService]:
    """Fournit un CatalogueService lie a une session fraiche."""
    container = get_container(request)
    session = container.session()
    try:
        repo = container.movie_repository(session=session)
        yield container.catalogue_service(movie_repo=repo)
    finally:
        session.close()
