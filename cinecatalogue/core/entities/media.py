"""
Entite du catalogue local.

Un Movie est un enregistrement appartenant a l'utilisateur. Il peut etre
saisi a la main ou pre-rempli depuis TMDB, puis complete avec une ville
de reference (latitude/longitude) pour l'affichage de la meteo.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass
class Movie:
    """
    Film du catalogue local.

    Attributes:
        id: ID interne en base (None tant que non persiste)
        tmdb_id: ID TMDB (0 pour une saisie manuelle)
        title: Titre localise
        original_title: Titre en langue originale
        overview: Synopsis
        release_date: Date de sortie
        genres: Noms de genre
        poster_path: Chemin du poster sur le CDN TMDB (ex: "/abc.jpg")
        original_language: Code langue originale (ex: "en")
        runtime_minutes: Duree en minutes
        vote_average: Note moyenne TMDB (0-10)
        cast: Acteurs principaux (5 au plus a l'import)
        reference_city: Ville de reference pour la meteo
        latitude: Latitude de la ville de reference
        longitude: Longitude de la ville de reference
        created_at: Horodatage de creation (UTC)
        updated_at: Horodatage de derniere modification (UTC)
    """

    id: Optional[int] = None
    tmdb_id: int = 0
    title: str = ""
    original_title: str = ""
    overview: str = ""
    release_date: Optional[date] = None
    genres: tuple[str, ...] = ()
    poster_path: str = ""
    original_language: str = ""
    runtime_minutes: Optional[int] = None
    vote_average: Optional[float] = None
    cast: tuple[str, ...] = ()
    reference_city: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def has_coordinates(self) -> bool:
        """Vrai si la ville de reference est geolocalisee."""
        return self.latitude is not None and self.longitude is not None
