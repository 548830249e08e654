"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) definissant les contrats pour la persistance du
catalogue. L'implementation concrete utilise SQLite via SQLModel.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cinecatalogue.core.entities.media import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des films du catalogue.

    Definit les operations CRUD sur les entites Movie.
    """

    @abstractmethod
    def list(self) -> list[Movie]:
        """Liste tous les films, les plus recemment crees en premier."""
        ...

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        ...

    @abstractmethod
    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        """Recupere un film par son ID TMDB."""
        ...

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Insere un nouveau film et retourne l'entite persistee."""
        ...

    @abstractmethod
    def update(self, movie: Movie) -> Movie:
        """Met a jour un film existant. Leve MovieNotFoundError si absent."""
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        """Supprime un film par ID. Retourne True si supprime."""
        ...
