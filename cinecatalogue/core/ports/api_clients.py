"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant les contrats pour les fournisseurs
externes : metadonnees de films (TMDB) et previsions meteo (Open-Meteo).
Les valeurs retournees sont immuables ; une absence de donnees (erreur reseau,
statut HTTP non 2xx, JSON inattendu) est toujours signalee par None.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, NamedTuple, Optional


@dataclass(frozen=True)
class MovieSummary:
    """
    Resultat de recherche TMDB.

    Attributs :
        id : ID TMDB
        title : Titre localise
        original_title : Titre en langue originale
        overview : Synopsis
        release_date : Date de sortie brute (YYYY-MM-DD), si connue
        poster_path : Chemin relatif du poster, si connu
        original_language : Code de la langue originale
        vote_average : Note moyenne (0-10)
    """

    id: int
    title: str = ""
    original_title: str = ""
    overview: str = ""
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    original_language: str = ""
    vote_average: float = 0.0


@dataclass(frozen=True)
class MovieDetails(MovieSummary):
    """
    Details TMDB d'un film, enrichis des credits.

    Attributs :
        runtime : Duree en minutes
        genres : Noms de genre dans l'ordre TMDB
        cast : Acteurs principaux (MAX_CAST au plus, ordre du generique)
    """

    MAX_CAST = 5

    runtime: Optional[int] = None
    genres: tuple[str, ...] = ()
    cast: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchPage:
    """Page de resultats de recherche."""

    page: int = 1
    total_pages: int = 0
    total_results: int = 0
    results: tuple[MovieSummary, ...] = ()


@dataclass(frozen=True)
class ImageInfo:
    """Descripteur d'une image (backdrop ou poster)."""

    file_path: str = ""
    width: int = 0
    height: int = 0
    aspect_ratio: Optional[float] = None
    vote_average: Optional[float] = None
    vote_count: int = 0


@dataclass(frozen=True)
class ImageSet:
    """Images d'un film, dans l'ordre retourne par TMDB."""

    id: int
    backdrops: tuple[ImageInfo, ...] = ()
    posters: tuple[ImageInfo, ...] = ()


@dataclass(frozen=True)
class ImageConfiguration:
    """
    Configuration de service des images TMDB.

    Attributs :
        base_url : URL de base HTTP
        secure_base_url : URL de base HTTPS
        poster_sizes : Tailles supportees, de la plus petite a "original"
    """

    base_url: str = ""
    secure_base_url: str = ""
    poster_sizes: tuple[str, ...] = ()


class DailyTemperature(NamedTuple):
    """Temperatures d'un jour de prevision."""

    day: date
    temperature_max: float
    temperature_min: float


@dataclass(frozen=True)
class Forecast:
    """
    Prevision journaliere pour un couple latitude/longitude.

    Les trois sequences journalieres sont paralleles et de meme longueur
    (garanti par le client a la deserialisation).
    """

    latitude: float
    longitude: float
    timezone: str = ""
    elevation: float = 0.0
    dates: tuple[date, ...] = ()
    temperature_max: tuple[float, ...] = ()
    temperature_min: tuple[float, ...] = ()
    units: dict[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if not (len(self.dates) == len(self.temperature_max) == len(self.temperature_min)):
            raise ValueError("Les series journalieres doivent avoir la meme longueur")

    @property
    def days(self) -> Iterator[DailyTemperature]:
        """Itere sur les jours de prevision."""
        for values in zip(self.dates, self.temperature_max, self.temperature_min):
            yield DailyTemperature(*values)

    def __len__(self) -> int:
        return len(self.dates)


class IMovieMetadataClient(ABC):
    """
    Interface du fournisseur de metadonnees de films.

    Toutes les operations sont en lecture seule et retournent None en cas
    d'absence de donnees, sans jamais lever d'exception vers l'appelant.
    """

    @abstractmethod
    async def search_movies(self, query: str, page: int = 1) -> Optional[SearchPage]:
        """Recherche des films par titre (page 1-indexee)."""
        ...

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        """Recupere les details d'un film, credits inclus."""
        ...

    @abstractmethod
    async def get_movie_images(self, movie_id: int) -> Optional[ImageSet]:
        """Recupere les backdrops et posters d'un film."""
        ...

    @abstractmethod
    async def get_configuration(self) -> Optional[ImageConfiguration]:
        """Recupere la configuration de service des images."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...


class IWeatherClient(ABC):
    """Interface du fournisseur de previsions meteo."""

    @abstractmethod
    async def get_daily_forecast(
        self, latitude: float, longitude: float
    ) -> Optional[Forecast]:
        """Recupere la prevision de temperatures journalieres."""
        ...
