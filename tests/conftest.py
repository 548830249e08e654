"""
Fixtures pytest partagees pour les tests CineCatalogue.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (base en memoire, secrets factices)
- Engine et session SQLite en memoire
- Repository et entite Movie d'exemple
"""

from collections.abc import Iterator
from datetime import date

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from cinecatalogue.config import Settings
from cinecatalogue.core.entities.media import Movie
from cinecatalogue.infrastructure.persistence.database import create_db_engine, init_db
from cinecatalogue.infrastructure.persistence.repositories import SQLModelMovieRepository


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings isoles du fichier .env et de l'environnement de l'utilisateur."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        tmdb_auth_mode="bearer",
        tmdb_bearer_token="test-token",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Engine SQLite en memoire avec les tables creees."""
    db_engine = init_db(create_db_engine("sqlite://"))
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as db_session:
        yield db_session


@pytest.fixture
def movie_repository(session: Session) -> SQLModelMovieRepository:
    """Repository Movie sur la base en memoire."""
    return SQLModelMovieRepository(session)


@pytest.fixture
def matrix_movie() -> Movie:
    """Film non persiste, importe depuis TMDB et geolocalise a Sao Paulo."""
    return Movie(
        tmdb_id=603,
        title="Matrix",
        original_title="The Matrix",
        overview="Um hacker aprende a verdade.",
        release_date=date(1999, 3, 30),
        genres=("Acao", "Ficcao cientifica"),
        poster_path="/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
        original_language="en",
        runtime_minutes=136,
        vote_average=8.2,
        cast=("Keanu Reeves", "Laurence Fishburne"),
        reference_city="Sao Paulo",
        latitude=-23.5505,
        longitude=-46.6333,
    )
