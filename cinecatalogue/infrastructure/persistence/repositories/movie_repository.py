"""
Implementation SQLModel du repository Movie.

Implemente l'interface IMovieRepository pour la persistance des films
du catalogue dans la base SQLite via SQLModel.
"""

import json
from datetime import timezone
from typing import Optional

from loguru import logger
from sqlmodel import Session, col, select

from cinecatalogue.core.entities.media import Movie
from cinecatalogue.core.errors import MovieNotFoundError
from cinecatalogue.core.ports.repositories import IMovieRepository
from cinecatalogue.infrastructure.persistence.models import MovieModel, utcnow


def _dump_list(values: tuple[str, ...]) -> Optional[str]:
    return json.dumps(list(values)) if values else None


def _as_utc(value):
    """SQLite perd le fuseau : les horodatages relus sont consideres UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implemente IMovieRepository avec conversion bidirectionnelle
    entre l'entite Movie (domaine) et MovieModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modele DB en entite domaine."""
        return Movie(
            id=model.id,
            tmdb_id=model.tmdb_id,
            title=model.title,
            original_title=model.original_title,
            overview=model.overview,
            release_date=model.release_date,
            genres=tuple(model.genres),
            poster_path=model.poster_path,
            original_language=model.original_language,
            runtime_minutes=model.runtime_minutes,
            vote_average=model.vote_average,
            cast=tuple(model.cast),
            reference_city=model.reference_city,
            latitude=model.latitude,
            longitude=model.longitude,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _apply(self, model: MovieModel, entity: Movie) -> None:
        """Copie les champs modifiables de l'entite vers le modele."""
        model.tmdb_id = entity.tmdb_id
        model.title = entity.title
        model.original_title = entity.original_title
        model.overview = entity.overview
        model.release_date = entity.release_date
        model.genres_json = _dump_list(entity.genres)
        model.poster_path = entity.poster_path
        model.original_language = entity.original_language
        model.runtime_minutes = entity.runtime_minutes
        model.vote_average = entity.vote_average
        model.cast_json = _dump_list(entity.cast)
        model.reference_city = entity.reference_city
        model.latitude = entity.latitude
        model.longitude = entity.longitude

    def list(self) -> list[Movie]:
        """Liste tous les films, les plus recemment crees en premier."""
        statement = select(MovieModel).order_by(
            col(MovieModel.created_at).desc(), col(MovieModel.id).desc()
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        """Recupere un film par son ID interne."""
        model = self._session.get(MovieModel, movie_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        """Recupere un film par son ID TMDB."""
        statement = select(MovieModel).where(MovieModel.tmdb_id == tmdb_id)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def create(self, movie: Movie) -> Movie:
        """Insere un film ; created_at est fixe a l'instant courant."""
        model = MovieModel(title=movie.title)
        self._apply(model, movie)
        model.created_at = utcnow()
        model.updated_at = None
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        logger.info("Film cree: {title} (id={id})", title=model.title, id=model.id)
        return self._to_entity(model)

    def update(self, movie: Movie) -> Movie:
        """Met a jour un film existant ; created_at est conserve."""
        model = self._session.get(MovieModel, movie.id) if movie.id is not None else None
        if model is None:
            raise MovieNotFoundError(movie.id)
        self._apply(model, movie)
        model.updated_at = utcnow()
        self._session.add(model)
        self._session.commit()
        self._session.refresh(model)
        logger.info("Film mis a jour: {title} (id={id})", title=model.title, id=model.id)
        return self._to_entity(model)

    def delete(self, movie_id: int) -> bool:
        """Supprime un film. Retourne True si supprime."""
        model = self._session.get(MovieModel, movie_id)
        if model is None:
            return False
        self._session.delete(model)
        self._session.commit()
        logger.info("Film supprime: id={id}", id=movie_id)
        return True
