"""
Tests unitaires pour ResponseCache.

Ces tests verifient:
- Stockage et recuperation de valeurs
- Expiration stricte a insertion + ttl (horloge injectee)
- Remplacement d'une entree et purge des entrees expirees
- Refus des valeurs None et des TTL invalides
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor

import pytest

from cinecatalogue.adapters.api.cache import ResponseCache


class FakeTimer:
    """Horloge controlable pour simuler l'ecoulement du temps."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture
def cache(timer: FakeTimer) -> ResponseCache:
    return ResponseCache(timer=timer)


class TestResponseCache:
    """Tests pour la classe ResponseCache."""

    @pytest.mark.asyncio
    async def test_get_returns_none_for_missing_key(self, cache: ResponseCache) -> None:
        """get() retourne None pour une cle inexistante."""
        assert await cache.get("tmdb:details:1") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, cache: ResponseCache) -> None:
        """set() puis get() retourne la valeur stockee."""
        await cache.set("tmdb:details:603", {"title": "Matrix"}, ttl=600)
        assert await cache.get("tmdb:details:603") == {"title": "Matrix"}

    @pytest.mark.asyncio
    async def test_entry_visible_just_before_expiry(
        self, cache: ResponseCache, timer: FakeTimer
    ) -> None:
        """Une entree reste visible jusqu'a juste avant insertion + ttl."""
        await cache.set("k", "v", ttl=300)
        timer.advance(299.9)
        assert await cache.get("k") == "v"

    @pytest.mark.asyncio
    async def test_entry_hidden_at_expiry(
        self, cache: ResponseCache, timer: FakeTimer
    ) -> None:
        """Une entree n'est plus visible a insertion + ttl."""
        await cache.set("k", "v", ttl=300)
        timer.advance(300)
        assert await cache.get("k") is None

    @pytest.mark.asyncio
    async def test_set_replaces_value_and_ttl(
        self, cache: ResponseCache, timer: FakeTimer
    ) -> None:
        """Un second set() remplace la valeur et repart du nouvel instant."""
        await cache.set("k", "old", ttl=10)
        timer.advance(8)
        await cache.set("k", "new", ttl=10)
        timer.advance(8)
        assert await cache.get("k") == "new"

    @pytest.mark.asyncio
    async def test_ttl_is_per_entry(self, cache: ResponseCache, timer: FakeTimer) -> None:
        """Chaque entree a son propre TTL."""
        await cache.set("search", "page", ttl=ResponseCache.SEARCH_TTL)
        await cache.set("config", "conf", ttl=ResponseCache.CONFIGURATION_TTL)
        timer.advance(ResponseCache.SEARCH_TTL + 1)
        assert await cache.get("search") is None
        assert await cache.get("config") == "conf"

    @pytest.mark.asyncio
    async def test_purge_expired_removes_only_expired(
        self, cache: ResponseCache, timer: FakeTimer
    ) -> None:
        """purge_expired() supprime les entrees expirees et retourne leur nombre."""
        await cache.set("short", 1, ttl=5)
        await cache.set("long", 2, ttl=500)
        timer.advance(10)

        assert cache.purge_expired() == 1
        assert "short" not in cache
        assert "long" in cache
        assert len(cache) == 1

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, cache: ResponseCache) -> None:
        """delete() retire une entree, clear() vide le cache."""
        await cache.set("a", 1, ttl=60)
        await cache.set("b", 2, ttl=60)

        await cache.delete("a")
        await cache.delete("absent")
        assert await cache.get("a") is None

        await cache.clear()
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_set_rejects_none_value(self, cache: ResponseCache) -> None:
        """Les absences de donnees ne sont jamais mises en cache."""
        with pytest.raises(ValueError):
            await cache.set("k", None, ttl=60)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ttl", [0, -1])
    async def test_set_rejects_non_positive_ttl(self, cache: ResponseCache, ttl: float) -> None:
        with pytest.raises(ValueError):
            await cache.set("k", "v", ttl=ttl)

    def test_ttl_constants(self) -> None:
        """TTL : 5 min recherche, 10 min details/images/meteo, 6 h configuration."""
        assert ResponseCache.SEARCH_TTL == 300
        assert ResponseCache.DETAILS_TTL == 600
        assert ResponseCache.IMAGES_TTL == 600
        assert ResponseCache.FORECAST_TTL == 600
        assert ResponseCache.CONFIGURATION_TTL == 6 * 3600


class TestResponseCacheConcurrency:
    """Acces concurrents au cache partage par les clients."""

    KEYS = [f"tmdb:details:{i}" for i in range(8)]

    def test_threads_never_observe_foreign_values(self) -> None:
        """Des ecritures et lectures paralleles sur des cles communes restent coherentes."""
        cache = ResponseCache()
        errors: list[str] = []

        async def worker(worker_id: int) -> None:
            for n in range(300):
                key = self.KEYS[(worker_id + n) % len(self.KEYS)]
                ttl = (60, 600, 3600)[n % 3]
                await cache.set(key, (key, worker_id, n), ttl=ttl)
                value = await cache.get(self.KEYS[n % len(self.KEYS)])
                if value is not None and value[0] != self.KEYS[n % len(self.KEYS)]:
                    errors.append(f"{value!r}")
                if n % 50 == 0:
                    cache.purge_expired()

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(asyncio.run, worker(i)) for i in range(8)]
            for future in futures:
                future.result()

        assert errors == []
        assert len(cache) == len(self.KEYS)
        for key in self.KEYS:
            assert key in cache

    @pytest.mark.asyncio
    async def test_gather_with_mixed_ttls(self, cache: ResponseCache, timer: FakeTimer) -> None:
        """Les taches concurrentes conservent chacune le TTL de leur ecriture."""

        async def write(index: int) -> None:
            await cache.set(f"k{index}", index, ttl=10 if index % 2 else 1000)

        await asyncio.gather(*(write(i) for i in range(100)))
        timer.advance(500)
        values = await asyncio.gather(*(cache.get(f"k{i}") for i in range(100)))

        assert values == [i if i % 2 == 0 else None for i in range(100)]
        assert cache.purge_expired() == 50
