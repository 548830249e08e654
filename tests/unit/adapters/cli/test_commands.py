"""
Tests unitaires pour les commandes CLI.

Les commandes s'executent sur une base SQLite temporaire ; aucune ne
contacte les fournisseurs externes.
"""

from unittest.mock import AsyncMock

import pytest
from dependency_injector import providers
from typer.testing import CliRunner

from cinecatalogue import __version__
from cinecatalogue.adapters.api.tmdb_client import TMDBClient
from cinecatalogue.adapters.api.weather_client import OpenMeteoClient
from cinecatalogue.container import Container
from cinecatalogue.core.entities.media import Movie
from cinecatalogue.core.ports.api_clients import Forecast
from cinecatalogue.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_database(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Base de donnees temporaire et TMDB non configure."""
    monkeypatch.setenv("CINECAT_DATABASE_URL", f"sqlite:///{tmp_path / 'catalogue.db'}")
    monkeypatch.delenv("CINECAT_TMDB_BEARER_TOKEN", raising=False)
    monkeypatch.delenv("CINECAT_TMDB_API_KEY", raising=False)
    return tmp_path


class TestInfoCommands:

    def test_version(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "catalogue.db" in result.output


class TestCatalogueCommands:

    def test_list_empty(self) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "Catalogue vide" in result.output

    def test_delete_missing(self) -> None:
        result = runner.invoke(app, ["delete", "42"])
        assert result.exit_code == 1

    def test_export_csv(self, isolated_database) -> None:
        output = isolated_database / "out" / "films.csv"

        result = runner.invoke(app, ["export", "csv", str(output)])

        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith("Id,Title,")

    def test_export_unknown_format(self, isolated_database) -> None:
        result = runner.invoke(app, ["export", "pdf", str(isolated_database / "x.pdf")])
        assert result.exit_code == 2


class TestShowCommand:

    @pytest.fixture
    def weather_client(self) -> AsyncMock:
        return AsyncMock(spec=OpenMeteoClient)

    @pytest.fixture
    def container(self, monkeypatch: pytest.MonkeyPatch, weather_client: AsyncMock) -> Container:
        container = Container()
        container.tmdb_client.override(providers.Object(AsyncMock(spec=TMDBClient)))
        container.weather_client.override(providers.Object(weather_client))
        monkeypatch.setattr("cinecatalogue.adapters.cli.helpers.Container", lambda: container)
        return container

    def _store(self, container: Container) -> int:
        container.database.init()
        session = container.session()
        try:
            movie = container.movie_repository(session=session).create(
                Movie(title="Filme caseiro", reference_city="Recife", latitude=-8.05, longitude=-34.9)
            )
        finally:
            session.close()
        return movie.id

    def test_empty_forecast_is_shown_not_reported_unavailable(
        self, container: Container, weather_client: AsyncMock
    ) -> None:
        weather_client.get_daily_forecast.return_value = Forecast(latitude=-8.0, longitude=-34.9)
        movie_id = self._store(container)

        result = runner.invoke(app, ["show", str(movie_id)])

        assert result.exit_code == 0
        assert "Meteo - Recife" in result.output
        assert "indisponible" not in result.output

    def test_missing_forecast_reported_unavailable(
        self, container: Container, weather_client: AsyncMock
    ) -> None:
        weather_client.get_daily_forecast.return_value = None
        movie_id = self._store(container)

        result = runner.invoke(app, ["show", str(movie_id)])

        assert result.exit_code == 0
        assert "Prevision meteo indisponible" in result.output
