"""
Cache de reponses en memoire pour les API externes, avec TTL par entree.

Le cache est propre au processus (aucune persistance entre redemarrages)
et partage par les clients TMDB et Open-Meteo. Chaque appelant fixe le
TTL de ses entrees :
- Recherches (SEARCH_TTL): 5 minutes
- Details et images (DETAILS_TTL, IMAGES_TTL): 10 minutes
- Configuration des images (CONFIGURATION_TTL): 6 heures
- Previsions meteo (FORECAST_TTL): 10 minutes

Une entree n'est visible que strictement avant insertion + ttl. Les entrees
expirees sont masquees a la lecture et purgees a chaque ecriture
(cachetools.TLRUCache), il n'y a pas d'eviction par taille. Les echecs
amont ne sont jamais mis en cache.
"""

import threading
import time
from typing import Any, Callable, NamedTuple, Optional

from cachetools import TLRUCache

from cinecatalogue.logging_config import http_logger


class _Entry(NamedTuple):
    value: Any
    ttl: float


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class ResponseCache:
    """
    Cache cle/valeur avec TTL par entree, sur pour un acces concurrent.

    Les methodes get/set sont asynchrones pour s'utiliser comme les autres
    collaborateurs des clients API ; les operations en memoire ne bloquent pas.

    Example:
        cache = ResponseCache()
        await cache.set("tmdb:search:matrix:1", page, ResponseCache.SEARCH_TTL)
        data = await cache.get("tmdb:search:matrix:1")
    """

    SEARCH_TTL = 5 * 60  # 5 minutes
    DETAILS_TTL = 10 * 60  # 10 minutes
    IMAGES_TTL = 10 * 60  # 10 minutes
    CONFIGURATION_TTL = 6 * 60 * 60  # 6 heures
    FORECAST_TTL = 10 * 60  # 10 minutes

    def __init__(
        self,
        timer: Callable[[], float] = time.monotonic,
        maxsize: Optional[int] = None,
    ) -> None:
        """
        Initialise un cache vide.

        Args:
            timer: Horloge monotone en secondes (injectable pour les tests)
            maxsize: Nombre maximum d'entrees, None pour aucune limite
        """
        self._lock = threading.Lock()
        self._cache: TLRUCache = TLRUCache(
            maxsize=float("inf") if maxsize is None else maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args:
            key: Empreinte de la requete

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        with self._lock:
            entry = self._cache.get(key)
        if entry is None:
            return None
        http_logger.debug("Cache hit: {key}", key=key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: float) -> None:
        """
        Stocke (ou remplace) une valeur avec un TTL.

        Args:
            key: Empreinte de la requete
            value: Valeur a stocker (jamais None)
            ttl: Duree de vie en secondes (> 0)
        """
        if value is None:
            raise ValueError("Le cache ne stocke pas de valeur None")
        if ttl <= 0:
            raise ValueError(f"TTL invalide: {ttl}")
        with self._lock:
            self._cache[key] = _Entry(value, ttl)

    async def delete(self, key: str) -> None:
        """Supprime une entree (sans effet si absente)."""
        with self._lock:
            self._cache.pop(key, None)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        with self._lock:
            self._cache.clear()

    def purge_expired(self) -> int:
        """
        Purge les entrees expirees.

        Returns:
            Nombre d'entrees supprimees
        """
        with self._lock:
            removed = self._cache.expire()
        return len(removed)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._cache

    def __len__(self) -> int:
        """Nombre d'entrees stockees, expirees non purgees comprises."""
        with self._lock:
            return len(self._cache)
