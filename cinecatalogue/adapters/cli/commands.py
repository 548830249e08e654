"""
Commandes CLI du catalogue : consultation, recherche et import TMDB, export.
"""

import asyncio
from dataclasses import replace
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from cinecatalogue.adapters.cli.helpers import console, suppress_loguru, with_catalogue
from cinecatalogue.core.errors import AlreadyImportedError, MovieNotFoundError
from cinecatalogue.services.exporter import export_csv, export_xlsx


def list_movies() -> None:
    """Liste les films du catalogue, les plus recents en premier."""
    asyncio.run(_list_async())


@with_catalogue
async def _list_async(service) -> None:
    movies = service.list_movies()
    if not movies:
        console.print("[yellow]Catalogue vide.[/yellow]")
        return

    table = Table(title=f"Catalogue ({len(movies)} films)")
    table.add_column("Id", justify="right")
    table.add_column("Titre")
    table.add_column("Sortie")
    table.add_column("Note", justify="right")
    table.add_column("Ville")
    for movie in movies:
        table.add_row(
            str(movie.id),
            movie.title,
            movie.release_date.isoformat() if movie.release_date else "-",
            f"{movie.vote_average:.1f}" if movie.vote_average is not None else "-",
            movie.reference_city or "-",
        )
    console.print(table)


def search(
    query: Annotated[str, typer.Argument(help="Titre a rechercher sur TMDB")],
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Page de resultats")] = 1,
) -> None:
    """Recherche des films sur TMDB."""
    asyncio.run(_search_async(query, page))


@with_catalogue
async def _search_async(service, query: str, page: int) -> None:
    with suppress_loguru():
        result = await service.search(query, page)

    if not result.results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return

    table = Table(title=f"TMDB : {query!r} (page {result.page}/{result.total_pages})")
    table.add_column("TMDB Id", justify="right")
    table.add_column("Titre")
    table.add_column("Titre original")
    table.add_column("Sortie")
    table.add_column("Note", justify="right")
    for item in result.results:
        table.add_row(
            str(item.id),
            item.title,
            item.original_title,
            item.release_date or "-",
            f"{item.vote_average:.1f}",
        )
    console.print(table)


def show(movie_id: Annotated[int, typer.Argument(help="ID du film dans le catalogue")]) -> None:
    """Affiche la fiche d'un film (details TMDB et meteo de la ville de reference)."""
    asyncio.run(_show_async(movie_id))


@with_catalogue
async def _show_async(service, movie_id: int) -> None:
    try:
        with suppress_loguru():
            page = await service.movie_page(movie_id)
    except MovieNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    movie = page.movie
    console.print(f"[bold cyan]{movie.title}[/bold cyan] ({movie.original_title or '-'})")
    if movie.overview:
        console.print(movie.overview)
    if movie.genres:
        console.print(f"Genres : {', '.join(movie.genres)}")
    if movie.cast:
        console.print(f"Elenco : {', '.join(movie.cast)}")
    if page.poster_url:
        console.print(f"Poster : {page.poster_url}")
    if page.details and page.details.runtime:
        console.print(f"Duree : {page.details.runtime} min")

    if page.forecast is not None:
        table = Table(title=f"Meteo - {movie.reference_city or 'ville de reference'}")
        table.add_column("Date")
        table.add_column("Max", justify="right")
        table.add_column("Min", justify="right")
        for day in page.forecast.days:
            table.add_row(
                day.day.isoformat(),
                f"{day.temperature_max:.1f}",
                f"{day.temperature_min:.1f}",
            )
        console.print(table)
    elif movie.has_coordinates:
        console.print("[dim]Prevision meteo indisponible.[/dim]")


def import_movie(
    tmdb_id: Annotated[int, typer.Argument(help="ID TMDB du film a importer")],
    city: Annotated[Optional[str], typer.Option("--city", help="Ville de reference")] = None,
    latitude: Annotated[
        Optional[float], typer.Option("--lat", min=-90, max=90, help="Latitude")
    ] = None,
    longitude: Annotated[
        Optional[float], typer.Option("--lon", min=-180, max=180, help="Longitude")
    ] = None,
) -> None:
    """Importe un film depuis TMDB dans le catalogue."""
    asyncio.run(_import_async(tmdb_id, city, latitude, longitude))


@with_catalogue
async def _import_async(
    service,
    tmdb_id: int,
    city: Optional[str],
    latitude: Optional[float],
    longitude: Optional[float],
) -> None:
    try:
        with suppress_loguru():
            draft = await service.prepare_import(tmdb_id)
        if draft is None:
            console.print(f"[red]Film TMDB {tmdb_id} introuvable ou TMDB indisponible.[/red]")
            raise typer.Exit(code=1)

        draft = replace(
            draft,
            reference_city=city or "",
            latitude=latitude,
            longitude=longitude,
        )
        created = service.confirm_import(draft)
    except AlreadyImportedError as e:
        console.print(f"[yellow]Film deja importe (id={e.existing_id}).[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"[green]Importe :[/green] {created.title} (id={created.id})")


def delete(movie_id: Annotated[int, typer.Argument(help="ID du film a supprimer")]) -> None:
    """Supprime un film du catalogue."""
    asyncio.run(_delete_async(movie_id))


@with_catalogue
async def _delete_async(service, movie_id: int) -> None:
    try:
        service.delete_movie(movie_id)
    except MovieNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]Film {movie_id} supprime.[/green]")


def export(
    fmt: Annotated[str, typer.Argument(help="Format: csv ou xlsx")],
    output: Annotated[Path, typer.Argument(help="Fichier de sortie")],
) -> None:
    """Exporte le catalogue en CSV ou XLSX."""
    fmt = fmt.lower()
    if fmt not in ("csv", "xlsx"):
        console.print("[red]Format inconnu (csv ou xlsx).[/red]")
        raise typer.Exit(code=2)
    asyncio.run(_export_async(fmt, output))


@with_catalogue
async def _export_async(service, fmt: str, output: Path) -> None:
    movies = service.list_movies()
    output.parent.mkdir(parents=True, exist_ok=True)
    if fmt == "csv":
        output.write_text(export_csv(movies), encoding="utf-8")
    else:
        output.write_bytes(export_xlsx(movies))
    console.print(f"[green]{len(movies)} film(s) exporte(s) vers {output}[/green]")
