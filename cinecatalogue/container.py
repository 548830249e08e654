"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le cache de reponses et les clients HTTP sont des objets construits ici et
partages explicitement ; aucun module ne conserve d'instance globale.
"""

from dependency_injector import containers, providers
from loguru import logger
from sqlmodel import Session

from .adapters.api.cache import ResponseCache
from .adapters.api.http_client import ApiHttpClient, AuthMode
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.weather_client import OpenMeteoClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelMovieRepository
from .services.catalogue import CatalogueService


def build_tmdb_http(settings: Settings) -> ApiHttpClient:
    """
    Construit l'adaptateur HTTP TMDB selon le mode d'authentification configure.

    Sans secret pour le mode choisi, l'adaptateur est cree sans authentification :
    TMDB repondra 401 et les clients retourneront None.
    """
    if not settings.tmdb_enabled:
        logger.warning(
            "TMDB non configure (mode {mode}) : metadonnees indisponibles",
            mode=settings.tmdb_auth_mode,
        )
        auth_mode, credential = AuthMode.NONE, None
    else:
        auth_mode, credential = AuthMode(settings.tmdb_auth_mode), settings.tmdb_credential

    return ApiHttpClient(
        settings.tmdb_base_url,
        auth_mode=auth_mode,
        credential=credential,
        timeout=settings.http_timeout_seconds,
        rate_limit_attempts=settings.http_rate_limit_attempts,
    )


def build_weather_http(settings: Settings) -> ApiHttpClient:
    """Construit l'adaptateur HTTP Open-Meteo (sans authentification)."""
    return ApiHttpClient(
        settings.weather_base_url,
        auth_mode=AuthMode.NONE,
        timeout=settings.http_timeout_seconds,
        rate_limit_attempts=settings.http_rate_limit_attempts,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        session = container.session()
        service = container.catalogue_service(
            movie_repo=container.movie_repository(session=session)
        )
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Base de donnees
    engine = providers.Singleton(create_db_engine, database_url=config.provided.database_url)
    database = providers.Resource(init_db, engine=engine)

    # Session factory - nouvelle session a chaque appel (a fermer par l'appelant)
    session = providers.Factory(Session, engine)

    movie_repository = providers.Factory(
        SQLModelMovieRepository,
        session=session,
    )

    # Cache de reponses - Singleton partage par les deux clients
    api_cache = providers.Singleton(ResponseCache)

    # Adaptateurs HTTP - un par fournisseur, authentification fixee a la construction
    tmdb_http = providers.Singleton(build_tmdb_http, settings=config)
    weather_http = providers.Singleton(build_weather_http, settings=config)

    # Clients API
    tmdb_client = providers.Singleton(
        TMDBClient,
        http=tmdb_http,
        cache=api_cache,
        language=config.provided.tmdb_language,
    )
    weather_client = providers.Singleton(
        OpenMeteoClient,
        http=weather_http,
        cache=api_cache,
    )

    # Service d'orchestration - Factory car depend d'un repository (session fraiche)
    catalogue_service = providers.Factory(
        CatalogueService,
        movie_repo=movie_repository,
        metadata_client=tmdb_client,
        weather_client=weather_client,
        poster_fallback_base_url=config.provided.tmdb_image_base_url_fallback,
        poster_size=config.provided.tmdb_default_poster_size,
    )
