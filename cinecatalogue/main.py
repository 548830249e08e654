"""
Point d'entree CLI de CineCatalogue.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import delete, export, import_movie, list_movies, search, show
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="cinecatalogue",
    help="Catalogue de films enrichi par TMDB et Open-Meteo",
)

app.command(name="list")(list_movies)
app.command()(search)
app.command()(show)
# "import" est un mot reserve Python, donc on utilise name= explicitement
app.command(name="import")(import_movie)
app.command()(delete)
app.command()(export)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"Base de donnees : {config.database_url}")
    typer.echo(f"API TMDB : {config.tmdb_base_url}")
    typer.echo(f"Authentification TMDB : {config.tmdb_auth_mode}")
    typer.echo(f"TMDB : {'activee' if config.tmdb_enabled else 'desactivee'}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    typer.echo(f"API meteo : {config.weather_base_url}")
    typer.echo(f"Timeout HTTP : {config.http_timeout_seconds}s")
    typer.echo(f"Niveau de log : {config.log_level} (http : {config.log_http_level})")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineCatalogue v{__version__}")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'ecoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'ecoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web."""
    import uvicorn

    typer.echo(f"Demarrage du serveur sur {host}:{port}")
    uvicorn.run("cinecatalogue.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entree de l'application."""
    settings = Settings()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
        http_log_level=settings.log_http_level,
        http_log_file=settings.log_http_file,
    )
    logger.info("Demarrage de CineCatalogue", version=__version__)
    app()


if __name__ == "__main__":
    main()
