"""
Clients API externes pour l'enrichissement du catalogue.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database pour les metadonnees de films
- Open-Meteo: previsions meteo journalieres

Infrastructure partagee:
- ApiHttpClient: GET authentifie (Bearer ou cle API), journalise, timeout borne
- ResponseCache: Cache en memoire avec TTL par entree
- RateLimitError / with_retry: backoff exponentiel sur les reponses 429

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from cinecatalogue.adapters.api.cache import ResponseCache
from cinecatalogue.adapters.api.http_client import ApiHttpClient, AuthMode, HttpResult
from cinecatalogue.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from cinecatalogue.adapters.api.tmdb_client import TMDBClient
from cinecatalogue.adapters.api.weather_client import OpenMeteoClient

__all__ = [
    "ApiHttpClient",
    "AuthMode",
    "HttpResult",
    "OpenMeteoClient",
    "RateLimitError",
    "ResponseCache",
    "TMDBClient",
    "request_with_retry",
    "with_retry",
]
