"""
Construction des URL de posters TMDB.

Calcul pur, sans etat : a partir de la configuration de service des images
(ou de son absence) et du chemin relatif d'un poster, produit l'URL absolue.
"""

from typing import Optional

from cinecatalogue.core.ports.api_clients import ImageConfiguration

DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"
PREFERRED_POSTER_SIZE = "w500"
ORIGINAL_SIZE = "original"


def _is_valid_poster_path(poster_path: str) -> bool:
    """Un chemin valide est non vide, sans espace et sans schema."""
    if not poster_path or not poster_path.strip():
        return False
    if "://" in poster_path:
        return False
    return not any(char.isspace() for char in poster_path)


def choose_poster_size(
    configuration: Optional[ImageConfiguration],
    preferred_size: str = PREFERRED_POSTER_SIZE,
) -> str:
    """
    Choisit la taille de poster.

    Priorite : taille preferee si supportee, sinon la derniere (la plus grande)
    taille supportee, sinon "original".
    """
    sizes = configuration.poster_sizes if configuration else ()
    if preferred_size in sizes:
        return preferred_size
    if sizes:
        return sizes[-1]
    return ORIGINAL_SIZE


def choose_base_url(
    configuration: Optional[ImageConfiguration],
    fallback_base_url: str = DEFAULT_IMAGE_BASE_URL,
) -> str:
    """Choisit l'URL de base : HTTPS, sinon HTTP, sinon l'hote par defaut."""
    if configuration:
        if configuration.secure_base_url:
            return configuration.secure_base_url
        if configuration.base_url:
            return configuration.base_url
    return fallback_base_url or DEFAULT_IMAGE_BASE_URL


def build_poster_url(
    configuration: Optional[ImageConfiguration],
    poster_path: Optional[str],
    fallback_base_url: str = DEFAULT_IMAGE_BASE_URL,
    preferred_size: str = PREFERRED_POSTER_SIZE,
) -> Optional[str]:
    """
    Construit l'URL absolue d'un poster.

    Args:
        configuration: Configuration TMDB des images, None si indisponible
        poster_path: Chemin relatif du poster (ex: "/abc.jpg")
        fallback_base_url: Hote utilise quand la configuration est absente
        preferred_size: Taille preferee (ex: "w500")

    Returns:
        URL base + taille + chemin, ou None si le chemin est vide ou malforme
    """
    if poster_path is None or not _is_valid_poster_path(poster_path):
        return None

    if not poster_path.startswith("/"):
        poster_path = f"/{poster_path}"

    base_url = choose_base_url(configuration, fallback_base_url).rstrip("/")
    size = choose_poster_size(configuration, preferred_size)
    return f"{base_url}/{size}{poster_path}"
