"""
Client Open-Meteo pour les previsions de temperatures journalieres.

Implemente l'interface IWeatherClient. Open-Meteo ne demande aucune
authentification. Les coordonnees sont tronquees a 4 decimales pour
construire l'empreinte de cache : deux points distants de moins d'environ
11 m partagent la meme entree.

Usage:
    http = ApiHttpClient(OPEN_METEO_BASE_URL)
    client = OpenMeteoClient(http=http, cache=ResponseCache())
    forecast = await client.get_daily_forecast(-23.5505, -46.6333)
"""

from datetime import date
from decimal import ROUND_DOWN, Decimal
from typing import Any, Optional

from loguru import logger

from cinecatalogue.adapters.api.cache import ResponseCache
from cinecatalogue.adapters.api.http_client import ApiHttpClient
from cinecatalogue.core.errors import TransportError
from cinecatalogue.core.ports.api_clients import Forecast, IWeatherClient

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"
DAILY_VARIABLES = "temperature_2m_max,temperature_2m_min"

_BODY_EXCERPT = 500

# Pas de quantification des coordonnees dans l'empreinte de cache
_KEY_STEP = Decimal("0.0001")


def _quantize(value: float) -> str:
    """Tronque a 4 decimales, format invariant, sans zero negatif."""
    text = str(Decimal(repr(float(value))).quantize(_KEY_STEP, rounding=ROUND_DOWN))
    return "0.0000" if text == "-0.0000" else text


def forecast_key(latitude: float, longitude: float) -> str:
    """Empreinte d'une prevision (coordonnees tronquees a 4 decimales)."""
    return f"weather:{_quantize(latitude)}:{_quantize(longitude)}"


def format_coordinate(value: float) -> str:
    """Formate une coordonnee avec un point decimal, sans notation scientifique."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def parse_forecast(data: dict[str, Any]) -> Forecast:
    """
    Convertit la reponse /forecast en Forecast.

    Raises:
        KeyError, TypeError, ValueError: Document inattendu ou series de
            longueurs differentes
    """
    daily = data.get("daily") or {}
    dates = tuple(date.fromisoformat(str(day)[:10]) for day in daily.get("time") or [])
    maxima = tuple(float(t) for t in daily.get("temperature_2m_max") or [])
    minima = tuple(float(t) for t in daily.get("temperature_2m_min") or [])

    units = {
        key: str(value)
        for key, value in (data.get("daily_units") or {}).items()
        if value is not None
    }

    return Forecast(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
        timezone=str(data.get("timezone") or ""),
        elevation=float(data.get("elevation") or 0.0),
        dates=dates,
        temperature_max=maxima,
        temperature_min=minima,
        units=units,
    )


class OpenMeteoClient(IWeatherClient):
    """Client Open-Meteo avec cache de 10 minutes par couple de coordonnees."""

    def __init__(self, http: ApiHttpClient, cache: ResponseCache) -> None:
        """
        Initialise le client meteo.

        Args:
            http: Adaptateur HTTP configure sur l'URL Open-Meteo (sans authentification)
            cache: Cache de reponses partage
        """
        self._http = http
        self._cache = cache

    async def get_daily_forecast(
        self, latitude: float, longitude: float
    ) -> Optional[Forecast]:
        """
        Recupere la prevision de temperatures min/max journalieres.

        Args:
            latitude: Latitude en degres decimaux (-90..90)
            longitude: Longitude en degres decimaux (-180..180)

        Returns:
            Forecast, ou None si les coordonnees sont invalides ou en cas d'echec
        """
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            logger.warning(
                "Coordonnees hors limites: {latitude}, {longitude}",
                latitude=latitude,
                longitude=longitude,
            )
            return None

        cache_key = forecast_key(latitude, longitude)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return cached

        params = {
            "latitude": format_coordinate(latitude),
            "longitude": format_coordinate(longitude),
            "daily": DAILY_VARIABLES,
            "timezone": "auto",
        }
        try:
            result = await self._http.fetch("/forecast", params=params)
        except TransportError as e:
            logger.error("Open-Meteo injoignable: {reason}", reason=e.reason)
            return None

        if not result.ok:
            logger.error(
                "Erreur Open-Meteo. Status: {status}. Corps: {body}",
                status=result.status_code,
                body=result.text[:_BODY_EXCERPT],
            )
            return None

        try:
            forecast = parse_forecast(result.json())
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("Prevision Open-Meteo illisible ({key}): {error!r}", key=cache_key, error=e)
            return None

        await self._cache.set(cache_key, forecast, ResponseCache.FORECAST_TTL)
        return forecast

    async def close(self) -> None:
        """Ferme l'adaptateur HTTP."""
        await self._http.close()
