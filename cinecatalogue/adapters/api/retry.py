"""
Mecanisme de retry avec backoff exponentiel pour les API externes.

Seules les reponses 429 (rate limiting) sont relancees, avec un delai
croissant et du jitter aleatoire. Le header Retry-After est respecte
lorsqu'il est present (plafonne a max_wait). Toute autre reponse,
succes ou erreur, est retournee telle quelle a l'appelant.

Usage:
    # Avec le decorateur
    @with_retry(max_attempts=5, max_wait=60)
    async def my_api_call():
        ...

    # Avec la fonction helper
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
        response: Derniere reponse 429 recue, si disponible
    """

    def __init__(
        self,
        retry_after: Optional[float] = None,
        response: Optional[httpx.Response] = None,
    ) -> None:
        self.retry_after = retry_after
        self.response = response
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    """Convertit le header Retry-After (secondes) en float, None si illisible."""
    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        # Format date HTTP : non supporte, on retombe sur le backoff
        return None
    return max(seconds, 0.0)


class _wait_retry_after_or_backoff:
    """Attend Retry-After si fourni, sinon backoff exponentiel avec jitter."""

    def __init__(self, min_wait: float, max_wait: float) -> None:
        self._max_wait = max_wait
        self._backoff = wait_random_exponential(multiplier=1, min=min_wait, max=max_wait)

    def __call__(self, retry_state: RetryCallState) -> float:
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, RateLimitError) and exc.retry_after is not None:
            return min(exc.retry_after, self._max_wait)
        return self._backoff(retry_state)


def with_retry(max_attempts: int = 5, max_wait: float = 60, min_wait: float = 1):
    """
    Decorateur pour relancer sur RateLimitError avec backoff exponentiel.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)
        min_wait: Delai minimum du backoff en secondes (defaut: 1)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=_wait_retry_after_or_backoff(min_wait=min_wait, max_wait=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: float = 60,
    min_wait: float = 1,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur 429.

    Convertit les reponses 429 en RateLimitError et relance avec
    backoff exponentiel. Les autres reponses (2xx, 4xx, 5xx) sont
    retournees immediatement sans retry ; c'est a l'appelant de
    decider quoi faire d'un statut d'erreur.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (relative au base_url du client)
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre deux tentatives en secondes
        min_wait: Delai minimum du backoff en secondes
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response (quel que soit le statut, sauf 429)

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.TransportError: Erreurs reseau et timeouts (sans retry)
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait, min_wait=min_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after = _parse_retry_after(response.headers.get("Retry-After"))
            raise RateLimitError(retry_after, response=response)
        return response

    return await _do_request()
