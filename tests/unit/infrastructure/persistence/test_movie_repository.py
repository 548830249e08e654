"""
Tests unitaires pour SQLModelMovieRepository (SQLite en memoire).
"""

from dataclasses import replace
from datetime import date, timezone

import pytest

from cinecatalogue.core.entities.media import Movie
from cinecatalogue.core.errors import MovieNotFoundError
from cinecatalogue.infrastructure.persistence.models import MovieModel


class TestMovieRepository:

    def test_create_assigns_id_and_timestamp(self, movie_repository, matrix_movie) -> None:
        created = movie_repository.create(matrix_movie)

        assert created.id is not None
        assert created.created_at is not None
        assert created.created_at.tzinfo == timezone.utc
        assert created.updated_at is None

    def test_round_trip_preserves_fields(self, movie_repository, matrix_movie) -> None:
        created = movie_repository.create(matrix_movie)
        loaded = movie_repository.get_by_id(created.id)

        assert loaded.title == "Matrix"
        assert loaded.release_date == date(1999, 3, 30)
        assert loaded.genres == ("Acao", "Ficcao cientifica")
        assert loaded.cast == ("Keanu Reeves", "Laurence Fishburne")
        assert loaded.latitude == -23.5505
        assert loaded.has_coordinates

    def test_empty_lists_stored_as_null(self, movie_repository, session) -> None:
        created = movie_repository.create(Movie(title="Sem genero"))
        model = session.get(MovieModel, created.id)

        assert model.genres_json is None
        assert model.genres == []

    def test_get_missing_returns_none(self, movie_repository) -> None:
        assert movie_repository.get_by_id(404) is None
        assert movie_repository.get_by_tmdb_id(404) is None

    def test_get_by_tmdb_id(self, movie_repository, matrix_movie) -> None:
        created = movie_repository.create(matrix_movie)
        assert movie_repository.get_by_tmdb_id(603).id == created.id

    def test_list_most_recent_first(self, movie_repository) -> None:
        first = movie_repository.create(Movie(title="Primeiro"))
        second = movie_repository.create(Movie(title="Segundo"))

        ids = [movie.id for movie in movie_repository.list()]

        assert ids == [second.id, first.id]

    def test_update_keeps_created_at(self, movie_repository, matrix_movie) -> None:
        created = movie_repository.create(matrix_movie)

        updated = movie_repository.update(replace(created, reference_city="Rio de Janeiro"))

        assert updated.reference_city == "Rio de Janeiro"
        assert updated.created_at == created.created_at
        assert updated.updated_at is not None

    def test_update_missing_raises(self, movie_repository, matrix_movie) -> None:
        with pytest.raises(MovieNotFoundError):
            movie_repository.update(replace(matrix_movie, id=77))

    def test_delete(self, movie_repository, matrix_movie) -> None:
        created = movie_repository.create(matrix_movie)

        assert movie_repository.delete(created.id) is True
        assert movie_repository.delete(created.id) is False
        assert movie_repository.get_by_id(created.id) is None
