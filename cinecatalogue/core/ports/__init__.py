"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports repository :
- IMovieRepository : Stockage des films du catalogue

Ports client API :
- IMovieMetadataClient : Fournisseur de metadonnees (TMDB)
- IWeatherClient : Fournisseur de previsions meteo (Open-Meteo)
"""

from cinecatalogue.core.ports.api_clients import (
    DailyTemperature,
    Forecast,
    ImageConfiguration,
    ImageInfo,
    ImageSet,
    IMovieMetadataClient,
    IWeatherClient,
    MovieDetails,
    MovieSummary,
    SearchPage,
)
from cinecatalogue.core.ports.repositories import IMovieRepository

__all__ = [
    # Repositories
    "IMovieRepository",
    # Clients API
    "IMovieMetadataClient",
    "IWeatherClient",
    "MovieSummary",
    "MovieDetails",
    "SearchPage",
    "ImageInfo",
    "ImageSet",
    "ImageConfiguration",
    "Forecast",
    "DailyTemperature",
]
