"""
Schemas Pydantic des requetes et reponses de l'API web.

Convention : les schemas de requete se terminent par "In", ceux de
reponse par "Out". La conversion depuis les entites du domaine se fait
via les constructeurs from_*.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from cinecatalogue.core.entities.media import Movie
from cinecatalogue.core.ports.api_clients import (
    Forecast,
    MovieDetails,
    MovieSummary,
    SearchPage,
)
from cinecatalogue.services.catalogue import MoviePage


class MovieIn(BaseModel):
    """Film saisi ou complete par l'utilisateur."""

    tmdb_id: int = Field(default=0, ge=0)
    title: str = Field(min_length=1, max_length=300)
    original_title: str = ""
    overview: str = ""
    release_date: Optional[date] = None
    genres: list[str] = Field(default_factory=list)
    poster_path: str = ""
    original_language: str = ""
    runtime_minutes: Optional[int] = Field(default=None, ge=0)
    vote_average: Optional[float] = Field(default=None, ge=0, le=10)
    cast: list[str] = Field(default_factory=list)
    reference_city: str = ""
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    def to_entity(self) -> Movie:
        return Movie(
            tmdb_id=self.tmdb_id,
            title=self.title,
            original_title=self.original_title,
            overview=self.overview,
            release_date=self.release_date,
            genres=tuple(self.genres),
            poster_path=self.poster_path,
            original_language=self.original_language,
            runtime_minutes=self.runtime_minutes,
            vote_average=self.vote_average,
            cast=tuple(self.cast),
            reference_city=self.reference_city,
            latitude=self.latitude,
            longitude=self.longitude,
        )


class MovieOut(MovieIn):
    """Film du catalogue tel que persiste."""

    id: Optional[int] = None
    title: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, movie: Movie) -> MovieOut:
        return cls(
            id=movie.id,
            tmdb_id=movie.tmdb_id,
            title=movie.title,
            original_title=movie.original_title,
            overview=movie.overview,
            release_date=movie.release_date,
            genres=list(movie.genres),
            poster_path=movie.poster_path,
            original_language=movie.original_language,
            runtime_minutes=movie.runtime_minutes,
            vote_average=movie.vote_average,
            cast=list(movie.cast),
            reference_city=movie.reference_city,
            latitude=movie.latitude,
            longitude=movie.longitude,
            created_at=movie.created_at,
            updated_at=movie.updated_at,
        )


class MovieSummaryOut(BaseModel):
    id: int
    title: str
    original_title: str
    overview: str
    release_date: Optional[str] = None
    poster_path: Optional[str] = None
    original_language: str
    vote_average: float

    @classmethod
    def from_summary(cls, summary: MovieSummary) -> MovieSummaryOut:
        return cls(
            id=summary.id,
            title=summary.title,
            original_title=summary.original_title,
            overview=summary.overview,
            release_date=summary.release_date,
            poster_path=summary.poster_path,
            original_language=summary.original_language,
            vote_average=summary.vote_average,
        )


class MovieDetailsOut(MovieSummaryOut):
    runtime: Optional[int] = None
    genres: list[str] = Field(default_factory=list)
    cast: list[str] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details: MovieDetails) -> MovieDetailsOut:
        return cls(
            **MovieSummaryOut.from_summary(details).model_dump(),
            runtime=details.runtime,
            genres=list(details.genres),
            cast=list(details.cast),
        )


class SearchPageOut(BaseModel):
    query: str
    page: int
    total_pages: int
    total_results: int
    results: list[MovieSummaryOut]

    @classmethod
    def from_page(cls, query: str, page: SearchPage) -> SearchPageOut:
        return cls(
            query=query,
            page=page.page,
            total_pages=page.total_pages,
            total_results=page.total_results,
            results=[MovieSummaryOut.from_summary(item) for item in page.results],
        )


class ForecastDayOut(BaseModel):
    day: date
    temperature_max: float
    temperature_min: float


class ForecastOut(BaseModel):
    latitude: float
    longitude: float
    timezone: str
    elevation: float
    units: dict[str, str] = Field(default_factory=dict)
    days: list[ForecastDayOut]

    @classmethod
    def from_forecast(cls, forecast: Forecast) -> ForecastOut:
        return cls(
            latitude=forecast.latitude,
            longitude=forecast.longitude,
            timezone=forecast.timezone,
            elevation=forecast.elevation,
            units=dict(forecast.units),
            days=[
                ForecastDayOut(
                    day=day.day,
                    temperature_max=day.temperature_max,
                    temperature_min=day.temperature_min,
                )
                for day in forecast.days
            ],
        )


class MoviePageOut(BaseModel):
    """Fiche film : enregistrement local + enrichissements optionnels."""

    movie: MovieOut
    details: Optional[MovieDetailsOut] = None
    poster_url: Optional[str] = None
    forecast: Optional[ForecastOut] = None

    @classmethod
    def from_page(cls, page: MoviePage) -> MoviePageOut:
        return cls(
            movie=MovieOut.from_entity(page.movie),
            details=(
                MovieDetailsOut.from_details(page.details)
                if page.details is not None
                else None
            ),
            poster_url=page.poster_url,
            forecast=(
                ForecastOut.from_forecast(page.forecast)
                if page.forecast is not None
                else None
            ),
        )


class ImportDraftOut(BaseModel):
    """Brouillon d'import pre-rempli depuis TMDB, a completer puis confirmer."""

    movie: MovieOut
    poster_url: Optional[str] = None
