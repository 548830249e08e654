"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe CINECAT_,
et peut optionnellement etre fournie via un fichier .env.

Le fournisseur de metadonnees (TMDB) accepte deux modes d'authentification
mutuellement exclusifs : jeton Bearer (v4) ou cle API (v3) en parametre de requete.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fichier .env a la racine du projet (parent du package)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

TMDB_AUTH_MODES = ("bearer", "api_key")
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe CINECAT_.
    Exemple : CINECAT_TMDB_AUTH_MODE=api_key
    """

    model_config = SettingsConfigDict(
        env_prefix="CINECAT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fournisseur de metadonnees (TMDB)
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_auth_mode: str = Field(default="bearer")
    tmdb_bearer_token: Optional[str] = Field(default=None)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="pt-BR")
    tmdb_image_base_url_fallback: str = Field(default="https://image.tmdb.org/t/p/")
    tmdb_default_poster_size: str = Field(default="w500")

    # Fournisseur meteo (Open-Meteo, sans authentification)
    weather_base_url: str = Field(default="https://api.open-meteo.com/v1")

    # Appels HTTP sortants
    http_timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    http_rate_limit_attempts: int = Field(default=3, ge=1, le=10)

    # Base de donnees
    database_url: str = Field(default="sqlite:///catalogue.db")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinecatalogue.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)
    # Canal http : appels sortants et hits du cache
    log_http_level: str = Field(default="INFO")
    log_http_file: Optional[Path] = Field(default=Path("logs/http.log"))

    @field_validator("tmdb_auth_mode", mode="before")
    @classmethod
    def normalize_auth_mode(cls, v: str) -> str:
        """Normalise et valide le mode d'authentification TMDB."""
        mode = str(v).strip().lower().replace("-", "_")
        if mode not in TMDB_AUTH_MODES:
            raise ValueError(
                f"tmdb_auth_mode doit valoir 'bearer' ou 'api_key', recu {v!r}"
            )
        return mode

    @field_validator("log_level", "log_http_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Valide un niveau loguru standard."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Niveau de log inconnu: {v!r}")
        return level

    @field_validator("log_file", "log_http_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins ; vide -> None."""
        if v is None or str(v).strip() == "":
            return None
        return Path(v).expanduser()

    @property
    def tmdb_credential(self) -> Optional[str]:
        """Retourne le secret correspondant au mode d'authentification actif."""
        if self.tmdb_auth_mode == "bearer":
            return self.tmdb_bearer_token or None
        return self.tmdb_api_key or None

    @property
    def tmdb_enabled(self) -> bool:
        """Verifie si l'API TMDB est configuree pour le mode choisi."""
        return self.tmdb_credential is not None
