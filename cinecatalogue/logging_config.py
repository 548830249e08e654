"""
Configuration du logging de CineCatalogue via loguru.

Deux canaux de journalisation :
- "app" : catalogue, services, web et CLI
- "http" : appels sortants (URL, statut, duree) et hits du cache de reponses,
  emis via http_logger

Sorties :
- stderr : coloree, un seuil par canal (log_level / http_log_level)
- fichier principal : JSON avec rotation ; le canal http n'y ecrit que ses
  avertissements et erreurs
- fichier http optionnel : JSON avec rotation, tout le canal http des DEBUG
"""

import sys
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

APP_CHANNEL = "app"
HTTP_CHANNEL = "http"

# Logger des appels sortants et du cache de reponses
http_logger = logger.bind(channel=HTTP_CHANNEL)

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[channel]: <4}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _is_http(record) -> bool:
    return record["extra"].get("channel") == HTTP_CHANNEL


def channel_filter(app_level: str, http_level: str) -> Callable[[dict], bool]:
    """
    Filtre loguru appliquant un seuil de niveau par canal.

    Args:
        app_level: Niveau minimum des messages applicatifs
        http_level: Niveau minimum des messages du canal http
    """
    app_no = logger.level(app_level.upper()).no
    http_no = logger.level(http_level.upper()).no

    def _filter(record) -> bool:
        threshold = http_no if _is_http(record) else app_no
        return record["level"].no >= threshold

    return _filter


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/cinecatalogue.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    http_log_level: str = "INFO",
    http_log_file: Optional[Path] = None,
    enqueue: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Seuil console des messages applicatifs
        log_file : Fichier JSON principal
        rotation_size : Taille maximale d'un fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
        http_log_level : Seuil console du canal http (appels sortants, cache)
        http_log_file : Fichier JSON dedie au canal http, None pour aucun
        enqueue : Ecriture des fichiers via une file (False pour les tests)
    """
    logger.remove()
    logger.configure(extra={"channel": APP_CHANNEL})

    logger.add(
        sys.stderr,
        level="TRACE",
        format=_CONSOLE_FORMAT,
        filter=channel_filter(log_level, http_log_level),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="TRACE",
        format="{message}",
        filter=channel_filter("DEBUG", "WARNING"),
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=enqueue,
    )

    if http_log_file is not None:
        http_log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            http_log_file,
            level="DEBUG",
            format="{message}",
            filter=_is_http,
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
            enqueue=enqueue,
        )

    logger.debug(
        "Logging configure",
        log_file=str(log_file),
        http_log_file=str(http_log_file) if http_log_file else None,
    )
