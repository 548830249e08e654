"""
Adaptateur HTTP partage par les clients des fournisseurs externes.

Chaque instance est liee a une URL de base et a un unique mode
d'authentification fixe a la construction :
- BEARER : header "Authorization: Bearer <token>" sur chaque requete
- API_KEY : parametre de requete "api_key=<cle>" sur chaque requete
- NONE : aucune authentification (Open-Meteo)

Les statuts non 2xx ne levent pas d'exception : ils sont retournes dans
un HttpResult et l'appelant decide du repli. Seuls les echecs reseau
(connexion, timeout) levent TransportError. Chaque appel est journalise
avec l'URL effective (cle API masquee), le statut et la duree.
"""

import json
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

from cinecatalogue.adapters.api.retry import RateLimitError, request_with_retry
from cinecatalogue.core.errors import TransportError
from cinecatalogue.logging_config import http_logger

REDACTED = "***"
_SECRET_PARAMS = ("api_key",)


class AuthMode(str, Enum):
    """Mode d'authentification d'un fournisseur."""

    NONE = "none"
    BEARER = "bearer"
    API_KEY = "api_key"


@dataclass(frozen=True)
class HttpResult:
    """
    Reponse brute d'un appel sortant.

    Attributes:
        status_code: Statut HTTP
        text: Corps de la reponse decode
        url: URL effective (secrets masques)
        duration_ms: Duree de l'appel en millisecondes
    """

    status_code: int
    text: str
    url: str
    duration_ms: float

    @property
    def ok(self) -> bool:
        """Vrai pour un statut 2xx."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode le corps JSON. Leve ValueError si le corps est invalide."""
        return json.loads(self.text)


def redact_url(url: httpx.URL | str) -> str:
    """Masque les parametres secrets (api_key) d'une URL pour les logs."""
    url = httpx.URL(str(url))
    if not any(name in url.params for name in _SECRET_PARAMS):
        return str(url)
    params = [
        (name, REDACTED if name in _SECRET_PARAMS else value)
        for name, value in url.params.multi_items()
    ]
    return str(url.copy_with(params=params))


class ApiHttpClient:
    """
    Client HTTP GET avec authentification fixe et timeout borne.

    Example:
        http = ApiHttpClient(
            "https://api.themoviedb.org/3",
            auth_mode=AuthMode.BEARER,
            credential="eyJhbGciOi...",
        )
        result = await http.fetch("/configuration")
        if result.ok:
            data = result.json()
        await http.close()
    """

    def __init__(
        self,
        base_url: str,
        auth_mode: AuthMode = AuthMode.NONE,
        credential: Optional[str] = None,
        timeout: float = 10.0,
        rate_limit_attempts: int = 3,
        rate_limit_max_wait: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialise l'adaptateur.

        Args:
            base_url: URL de base du fournisseur
            auth_mode: Mode d'authentification (fixe pour la duree de vie du client)
            credential: Jeton Bearer ou cle API selon auth_mode
            timeout: Timeout global d'un appel en secondes
            rate_limit_attempts: Tentatives maximum sur reponse 429
            rate_limit_max_wait: Attente maximum entre deux tentatives 429
            transport: Transport httpx optionnel (tests)

        Raises:
            ValueError: Si le mode exige un secret et qu'aucun n'est fourni
        """
        auth_mode = AuthMode(auth_mode)
        if auth_mode is not AuthMode.NONE and not credential:
            raise ValueError(f"Le mode d'authentification {auth_mode.value} exige un secret")

        self._base_url = base_url
        self._auth_mode = auth_mode
        self._credential = credential
        self._timeout = timeout
        self._rate_limit_attempts = rate_limit_attempts
        self._rate_limit_max_wait = rate_limit_max_wait
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def auth_mode(self) -> AuthMode:
        """Mode d'authentification actif."""
        return self._auth_mode

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            params = {}

            if self._auth_mode is AuthMode.BEARER:
                headers["Authorization"] = f"Bearer {self._credential}"
            elif self._auth_mode is AuthMode.API_KEY:
                params["api_key"] = self._credential

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def fetch(
        self, path: str, params: Optional[dict[str, Any]] = None
    ) -> HttpResult:
        """
        Execute un GET sur le fournisseur.

        Args:
            path: Chemin relatif a l'URL de base (ex: "/search/movie")
            params: Parametres de requete

        Returns:
            HttpResult, y compris pour les statuts non 2xx

        Raises:
            TransportError: Echec reseau ou timeout
        """
        client = self._get_client()
        url = redact_url(client.build_request("GET", path, params=params).url)

        start = time.perf_counter()
        try:
            response = await request_with_retry(
                client,
                "GET",
                path,
                max_attempts=self._rate_limit_attempts,
                max_wait=self._rate_limit_max_wait,
                params=params,
            )
        except RateLimitError as e:
            if e.response is None:
                raise
            response = e.response
        except httpx.HTTPError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            http_logger.warning(
                "HTTP GET {url} -> echec ({reason}) en {duration_ms:.0f} ms",
                url=url,
                reason=type(e).__name__,
                duration_ms=duration_ms,
            )
            raise TransportError(url, str(e) or type(e).__name__) from e

        duration_ms = (time.perf_counter() - start) * 1000
        http_logger.info(
            "HTTP GET {url} -> {status} en {duration_ms:.0f} ms",
            url=url,
            status=response.status_code,
            duration_ms=duration_ms,
        )
        return HttpResult(
            status_code=response.status_code,
            text=response.text,
            url=url,
            duration_ms=duration_ms,
        )

    async def close(self) -> None:
        """Ferme le client HTTP sous-jacent."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
