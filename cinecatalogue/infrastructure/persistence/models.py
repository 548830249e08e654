"""
Modeles SQLModel pour la base de donnees du catalogue.

Ces modeles representent les tables SQLite. Ils sont distincts des entites
de domaine (dataclass dans core/entities/) ; la conversion se fait dans les
repositories.

Tables:
- movies: Films du catalogue avec metadonnees TMDB et ville de reference

Les champs JSON (*_json) stockent des listes (genres, acteurs) serialisees.
"""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Horodatage UTC courant."""
    return datetime.now(timezone.utc)


class MovieModel(SQLModel, table=True):
    """
    Modele representant un film du catalogue.

    Les metadonnees proviennent de TMDB (import) ou d'une saisie manuelle.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    tmdb_id: int = Field(default=0, index=True)
    title: str = Field(index=True)
    original_title: str = ""
    overview: str = ""
    release_date: date | None = None
    genres_json: str | None = None  # JSON: ["Acao", "Ficcao cientifica"]
    poster_path: str = ""
    original_language: str = ""
    runtime_minutes: int | None = None
    vote_average: float | None = None  # Note moyenne TMDB (0-10)
    cast_json: str | None = None  # JSON: ["Acteur 1", "Acteur 2", ...]
    reference_city: str = ""
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime | None = None

    @property
    def genres(self) -> list[str]:
        """Retourne les genres deserialises."""
        if self.genres_json:
            return json.loads(self.genres_json)
        return []

    @property
    def cast(self) -> list[str]:
        """Retourne les acteurs deserialises."""
        if self.cast_json:
            return json.loads(self.cast_json)
        return []
