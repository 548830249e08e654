"""
Service d'orchestration du catalogue.

Combine le catalogue local (repository) avec les fournisseurs externes
pour assembler les donnees d'une page :
- fiche film : lecture locale, puis details TMDB, configuration des images
  et prevision meteo en parallele
- recherche TMDB paginee
- import d'un film TMDB en deux temps (brouillon pre-rempli, puis confirmation)

Les absences de donnees des fournisseurs degradent la page (pas de poster,
pas de meteo) sans jamais la faire echouer.
"""

import asyncio
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from loguru import logger

from cinecatalogue.core.entities.media import Movie
from cinecatalogue.core.errors import AlreadyImportedError, MovieNotFoundError
from cinecatalogue.core.ports.api_clients import (
    Forecast,
    IMovieMetadataClient,
    IWeatherClient,
    MovieDetails,
    SearchPage,
)
from cinecatalogue.core.ports.repositories import IMovieRepository
from cinecatalogue.services.poster import (
    DEFAULT_IMAGE_BASE_URL,
    PREFERRED_POSTER_SIZE,
    build_poster_url,
)


@dataclass(frozen=True)
class MoviePage:
    """
    Donnees assemblees pour la fiche d'un film.

    Attributes:
        movie: Enregistrement local
        details: Details TMDB, None si indisponibles
        poster_url: URL absolue du poster, None sans poster
        forecast: Prevision meteo de la ville de reference, None si indisponible
    """

    movie: Movie
    details: Optional[MovieDetails] = None
    poster_url: Optional[str] = None
    forecast: Optional[Forecast] = None


def parse_release_date(value: Optional[str]) -> Optional[date]:
    """Convertit une date TMDB (YYYY-MM-DD) en date, None si vide ou illisible."""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def movie_from_details(details: MovieDetails) -> Movie:
    """Construit un film non persiste, pre-rempli depuis les details TMDB."""
    return Movie(
        tmdb_id=details.id,
        title=details.title,
        original_title=details.original_title,
        overview=details.overview,
        release_date=parse_release_date(details.release_date),
        genres=details.genres,
        poster_path=details.poster_path or "",
        original_language=details.original_language,
        runtime_minutes=details.runtime,
        vote_average=details.vote_average,
        cast=details.cast[: MovieDetails.MAX_CAST],
    )


class CatalogueService:
    """
    Orchestration du catalogue local et des fournisseurs externes.

    Example:
        service = CatalogueService(movie_repo, tmdb_client, weather_client)
        page = await service.movie_page(1)
        if page.forecast:
            for day in page.forecast.days:
                print(day.day, day.temperature_max, day.temperature_min)
    """

    def __init__(
        self,
        movie_repo: IMovieRepository,
        metadata_client: IMovieMetadataClient,
        weather_client: IWeatherClient,
        poster_fallback_base_url: str = DEFAULT_IMAGE_BASE_URL,
        poster_size: str = PREFERRED_POSTER_SIZE,
    ) -> None:
        """
        Initialise le service.

        Args:
            movie_repo: Repository des films
            metadata_client: Client du fournisseur de metadonnees
            weather_client: Client du fournisseur meteo
            poster_fallback_base_url: Hote des images si la configuration TMDB manque
            poster_size: Taille de poster preferee
        """
        self._movie_repo = movie_repo
        self._metadata_client = metadata_client
        self._weather_client = weather_client
        self._poster_fallback_base_url = poster_fallback_base_url
        self._poster_size = poster_size

    # CRUD local

    def list_movies(self) -> list[Movie]:
        """Liste les films, les plus recents en premier."""
        return self._movie_repo.list()

    def get_movie(self, movie_id: int) -> Movie:
        """Retourne un film ou leve MovieNotFoundError."""
        movie = self._movie_repo.get_by_id(movie_id)
        if movie is None:
            raise MovieNotFoundError(movie_id)
        return movie

    def create_movie(self, movie: Movie) -> Movie:
        """Cree un film saisi manuellement."""
        return self._movie_repo.create(replace(movie, id=None))

    def update_movie(self, movie_id: int, movie: Movie) -> Movie:
        """Met a jour un film ; l'ID de l'URL fait foi."""
        return self._movie_repo.update(replace(movie, id=movie_id))

    def delete_movie(self, movie_id: int) -> None:
        """Supprime un film ou leve MovieNotFoundError."""
        if not self._movie_repo.delete(movie_id):
            raise MovieNotFoundError(movie_id)

    # Pages enrichies

    async def poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """Construit l'URL du poster (configuration TMDB si disponible)."""
        if not poster_path:
            return None
        configuration = await self._metadata_client.get_configuration()
        return build_poster_url(
            configuration,
            poster_path,
            fallback_base_url=self._poster_fallback_base_url,
            preferred_size=self._poster_size,
        )

    async def _forecast_for(self, movie: Movie) -> Optional[Forecast]:
        if not movie.has_coordinates:
            return None
        return await self._weather_client.get_daily_forecast(movie.latitude, movie.longitude)

    async def _details_for(self, movie: Movie) -> Optional[MovieDetails]:
        if movie.tmdb_id <= 0:
            return None
        return await self._metadata_client.get_movie_details(movie.tmdb_id)

    async def movie_page(self, movie_id: int) -> MoviePage:
        """
        Assemble la fiche d'un film.

        La lecture locale precede les appels externes, qui sont ensuite
        lances en parallele (details, poster, meteo).

        Raises:
            MovieNotFoundError: Film absent du catalogue
        """
        movie = self.get_movie(movie_id)

        details, poster_url, forecast = await asyncio.gather(
            self._details_for(movie),
            self.poster_url(movie.poster_path),
            self._forecast_for(movie),
        )

        if details is None and movie.tmdb_id > 0:
            logger.warning("Details TMDB indisponibles pour {title}", title=movie.title)

        return MoviePage(
            movie=movie,
            details=details,
            poster_url=poster_url,
            forecast=forecast,
        )

    async def search(self, query: str, page: int = 1) -> SearchPage:
        """
        Recherche TMDB. Une requete vide ou un echec amont donnent une page vide.
        """
        if not query or not query.strip():
            return SearchPage(page=max(page, 1))
        result = await self._metadata_client.search_movies(query, page)
        return result if result is not None else SearchPage(page=max(page, 1))

    # Import TMDB

    def _ensure_not_imported(self, tmdb_id: int) -> None:
        existing = self._movie_repo.get_by_tmdb_id(tmdb_id)
        if existing is not None:
            raise AlreadyImportedError(tmdb_id, existing.id)

    async def prepare_import(self, tmdb_id: int) -> Optional[Movie]:
        """
        Prepare l'import d'un film TMDB.

        Returns:
            Film non persiste pre-rempli (ville et coordonnees a completer),
            ou None si les details TMDB sont indisponibles

        Raises:
            AlreadyImportedError: Film deja present dans le catalogue
        """
        self._ensure_not_imported(tmdb_id)
        details = await self._metadata_client.get_movie_details(tmdb_id)
        if details is None:
            return None
        return movie_from_details(details)

    def confirm_import(self, movie: Movie) -> Movie:
        """
        Enregistre un film importe apres completion par l'utilisateur.

        Raises:
            AlreadyImportedError: Film importe entre-temps
        """
        if movie.tmdb_id > 0:
            self._ensure_not_imported(movie.tmdb_id)
        created = self._movie_repo.create(replace(movie, id=None))
        logger.info("Film importe depuis TMDB: {title} ({tmdb_id})", title=created.title, tmdb_id=created.tmdb_id)
        return created
