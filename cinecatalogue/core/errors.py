"""
Exceptions du domaine CineCatalogue.

Les clients des fournisseurs externes ne propagent jamais ces erreurs a
l'appelant : elles restent internes a la couche d'integration, qui les
convertit en absence de donnees (None). Seules les erreurs du catalogue
local remontent jusqu'a la couche web/CLI.
"""

from typing import Optional


class CatalogueError(Exception):
    """Erreur de base de l'application."""


class TransportError(CatalogueError):
    """
    Echec reseau lors d'un appel sortant (connexion, DNS, timeout).

    Attributes:
        url: URL effective de la requete (secrets masques)
    """

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Echec de transport vers {url}: {reason}")


class MovieNotFoundError(CatalogueError):
    """Le film demande n'existe pas dans le catalogue local."""

    def __init__(self, movie_id: int) -> None:
        self.movie_id = movie_id
        super().__init__(f"Film introuvable: {movie_id}")


class AlreadyImportedError(CatalogueError):
    """
    Le film TMDB est deja present dans le catalogue.

    Attributes:
        tmdb_id: ID TMDB demande
        existing_id: ID interne du film deja importe
    """

    def __init__(self, tmdb_id: int, existing_id: Optional[int]) -> None:
        self.tmdb_id = tmdb_id
        self.existing_id = existing_id
        super().__init__(f"Film TMDB {tmdb_id} deja importe (id={existing_id})")
