"""
Client TMDB pour la recherche et la recuperation de metadonnees de films.

Implemente l'interface IMovieMetadataClient pour TMDB (The Movie Database).
Chaque operation suit le meme schema : lecture du cache, puis appel HTTP
en cas d'absence, deserialisation et mise en cache du resultat. Tout echec
(reseau, statut non 2xx, JSON inattendu) est journalise et converti en None.

Usage:
    cache = ResponseCache()
    http = ApiHttpClient(TMDB_BASE_URL, AuthMode.BEARER, credential="xxx")
    client = TMDBClient(http=http, cache=cache)
    page = await client.search_movies("Matrix")
    details = await client.get_movie_details(603)
    await client.close()
"""

from typing import Any, Optional

from loguru import logger

from cinecatalogue.adapters.api.cache import ResponseCache
from cinecatalogue.adapters.api.http_client import ApiHttpClient
from cinecatalogue.core.errors import TransportError
from cinecatalogue.core.ports.api_clients import (
    ImageConfiguration,
    ImageInfo,
    ImageSet,
    IMovieMetadataClient,
    MovieDetails,
    MovieSummary,
    SearchPage,
)

TMDB_BASE_URL = "https://api.themoviedb.org/3"

# Extrait du corps d'erreur conserve dans les logs
_BODY_EXCERPT = 500


def search_key(query: str, page: int) -> str:
    """Empreinte d'une recherche."""
    return f"tmdb:search:{query}:{page}"


def details_key(movie_id: int) -> str:
    """Empreinte des details d'un film."""
    return f"tmdb:details:{movie_id}"


def images_key(movie_id: int) -> str:
    """Empreinte des images d'un film."""
    return f"tmdb:images:{movie_id}"


def configuration_key() -> str:
    """Empreinte de la configuration des images."""
    return "tmdb:config"


def _object(value: Any, field: str) -> dict[str, Any]:
    """Objet JSON imbrique ; {} si absent ou null, TypeError si autre type."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"{field}: objet JSON attendu, recu {type(value).__name__}")
    return value


def _objects(value: Any, field: str) -> list[dict[str, Any]]:
    """Liste d'objets JSON ; [] si absente ou null, TypeError si mal formee."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{field}: liste JSON attendue, recu {type(value).__name__}")
    return [_object(item, field) for item in value]


def _text(data: dict[str, Any], key: str) -> str:
    """Champ texte, chaine vide si absent ou null."""
    value = data.get(key)
    return str(value) if value is not None else ""


def _optional_text(data: dict[str, Any], key: str) -> Optional[str]:
    """Champ texte optionnel, None si absent, null ou vide."""
    value = data.get(key)
    return str(value) if value else None


def _parse_summary_fields(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": int(item["id"]),
        "title": _text(item, "title"),
        "original_title": _text(item, "original_title"),
        "overview": _text(item, "overview"),
        "release_date": _optional_text(item, "release_date"),
        "poster_path": _optional_text(item, "poster_path"),
        "original_language": _text(item, "original_language"),
        "vote_average": float(item.get("vote_average") or 0.0),
    }


def parse_search_page(data: dict[str, Any]) -> SearchPage:
    """Convertit la reponse /search/movie en SearchPage."""
    results = tuple(
        MovieSummary(**_parse_summary_fields(item))
        for item in _objects(data.get("results"), "results")
    )
    return SearchPage(
        page=int(data.get("page") or 1),
        total_pages=int(data.get("total_pages") or 0),
        total_results=int(data.get("total_results") or len(results)),
        results=results,
    )


def parse_movie_details(data: dict[str, Any]) -> MovieDetails:
    """Convertit la reponse /movie/{id}?append_to_response=credits en MovieDetails."""
    genres = tuple(
        str(genre["name"])
        for genre in _objects(data.get("genres"), "genres")
        if genre.get("name")
    )

    credits_data = _object(data.get("credits"), "credits")
    cast_names = [
        str(actor["name"])
        for actor in _objects(credits_data.get("cast"), "credits.cast")
        if actor.get("name")
    ]

    runtime = data.get("runtime")
    return MovieDetails(
        **_parse_summary_fields(data),
        runtime=int(runtime) if runtime is not None else None,
        genres=genres,
        cast=tuple(cast_names[: MovieDetails.MAX_CAST]),
    )


def _parse_image(item: dict[str, Any]) -> ImageInfo:
    aspect_ratio = item.get("aspect_ratio")
    vote_average = item.get("vote_average")
    return ImageInfo(
        file_path=_text(item, "file_path"),
        width=int(item.get("width") or 0),
        height=int(item.get("height") or 0),
        aspect_ratio=float(aspect_ratio) if aspect_ratio is not None else None,
        vote_average=float(vote_average) if vote_average is not None else None,
        vote_count=int(item.get("vote_count") or 0),
    )


def parse_image_set(data: dict[str, Any]) -> ImageSet:
    """Convertit la reponse /movie/{id}/images en ImageSet."""
    return ImageSet(
        id=int(data["id"]),
        backdrops=tuple(
            _parse_image(item) for item in _objects(data.get("backdrops"), "backdrops")
        ),
        posters=tuple(_parse_image(item) for item in _objects(data.get("posters"), "posters")),
    )


def parse_configuration(data: dict[str, Any]) -> ImageConfiguration:
    """Convertit la reponse /configuration en ImageConfiguration."""
    images = _object(data.get("images"), "images")
    sizes = images.get("poster_sizes") or []
    if not isinstance(sizes, list):
        raise TypeError("images.poster_sizes: liste JSON attendue")
    return ImageConfiguration(
        base_url=_text(images, "base_url"),
        secure_base_url=_text(images, "secure_base_url"),
        poster_sizes=tuple(str(size) for size in sizes),
    )


class TMDBClient(IMovieMetadataClient):
    """
    Client API TMDB pour les metadonnees de films.

    Implemente IMovieMetadataClient avec:
    - Recherche de films par titre, paginee
    - Details d'un film avec credits (un seul aller-retour)
    - Images (backdrops et posters) d'un film
    - Configuration de service des images
    - Cache en memoire (5 min recherches, 10 min details/images, 6 h configuration)

    L'authentification (Bearer ou cle API) est portee par l'ApiHttpClient injecte.
    """

    def __init__(
        self,
        http: ApiHttpClient,
        cache: ResponseCache,
        language: str = "pt-BR",
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            http: Adaptateur HTTP configure sur l'URL TMDB et son authentification
            cache: Cache de reponses partage
            language: Langue des metadonnees (ex: "pt-BR")
        """
        self._http = http
        self._cache = cache
        self._language = language

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def _get_json(
        self, path: str, params: Optional[dict[str, Any]] = None
    ) -> Optional[dict[str, Any]]:
        """
        Appelle TMDB et decode le JSON.

        Returns:
            Le document JSON, ou None apres journalisation en cas d'echec
        """
        try:
            result = await self._http.fetch(path, params=params)
        except TransportError as e:
            logger.error("TMDB injoignable ({path}): {reason}", path=path, reason=e.reason)
            return None

        if not result.ok:
            logger.error(
                "Erreur TMDB {path}. Status: {status}. Corps: {body}",
                path=path,
                status=result.status_code,
                body=result.text[:_BODY_EXCERPT],
            )
            return None

        try:
            data = result.json()
        except ValueError:
            logger.error("JSON TMDB invalide ({path})", path=path)
            return None

        if not isinstance(data, dict):
            logger.error("Reponse TMDB inattendue ({path}): objet JSON attendu", path=path)
            return None
        return data

    async def search_movies(self, query: str, page: int = 1) -> Optional[SearchPage]:
        """
        Recherche des films par titre.

        Une requete vide (ou composee d'espaces) retourne une page vide sans
        appel reseau ni acces au cache.

        Args:
            query: Titre du film a rechercher
            page: Numero de page (1-indexe)

        Returns:
            SearchPage, ou None en cas d'echec amont
        """
        query = (query or "").strip()
        page = max(int(page), 1)
        if not query:
            return SearchPage(page=page)

        cache_key = search_key(query, page)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._get_json(
            "/search/movie",
            params={"query": query, "page": page, "language": self._language},
        )
        if data is None:
            return None

        try:
            result = parse_search_page(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Recherche TMDB illisible ({query}): {error!r}", query=query, error=e)
            return None

        await self._cache.set(cache_key, result, ResponseCache.SEARCH_TTL)
        return result

    async def get_movie_details(self, movie_id: int) -> Optional[MovieDetails]:
        """
        Recupere les details complets d'un film, credits inclus.

        Args:
            movie_id: ID TMDB du film

        Returns:
            MovieDetails, ou None si introuvable ou en cas d'echec
        """
        cache_key = details_key(movie_id)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._get_json(
            f"/movie/{movie_id}",
            params={"language": self._language, "append_to_response": "credits"},
        )
        if data is None:
            return None

        try:
            details = parse_movie_details(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Details TMDB illisibles ({movie_id}): {error!r}", movie_id=movie_id, error=e)
            return None

        await self._cache.set(cache_key, details, ResponseCache.DETAILS_TTL)
        return details

    async def get_movie_images(self, movie_id: int) -> Optional[ImageSet]:
        """
        Recupere les backdrops et posters d'un film.

        Args:
            movie_id: ID TMDB du film

        Returns:
            ImageSet, ou None en cas d'echec
        """
        cache_key = images_key(movie_id)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._get_json(f"/movie/{movie_id}/images")
        if data is None:
            return None

        try:
            images = parse_image_set(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Images TMDB illisibles ({movie_id}): {error!r}", movie_id=movie_id, error=e)
            return None

        await self._cache.set(cache_key, images, ResponseCache.IMAGES_TTL)
        return images

    async def get_configuration(self) -> Optional[ImageConfiguration]:
        """
        Recupere la configuration de service des images (cache 6 heures).

        Returns:
            ImageConfiguration, ou None en cas d'echec
        """
        cache_key = configuration_key()
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._get_json("/configuration")
        if data is None:
            return None

        try:
            configuration = parse_configuration(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Configuration TMDB illisible: {error!r}", error=e)
            return None

        await self._cache.set(cache_key, configuration, ResponseCache.CONFIGURATION_TTL)
        return configuration

    async def close(self) -> None:
        """Ferme l'adaptateur HTTP."""
        await self._http.close()
