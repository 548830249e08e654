"""
Export tabulaire du catalogue (CSV et tableur XLSX).

Les deux formats partagent les memes colonnes, dans le meme ordre.
"""

import csv
import io
from typing import Iterable, Optional

from openpyxl import Workbook
from openpyxl.styles import Font

from cinecatalogue.core.entities.media import Movie

EXPORT_COLUMNS = (
    "Id",
    "Title",
    "OriginalTitle",
    "ReleaseDate",
    "Genres",
    "VoteAverage",
    "ReferenceCity",
    "Latitude",
    "Longitude",
)

CSV_MEDIA_TYPE = "text/csv"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
EXPORT_BASENAME = "catalogue_films"


def _optional(value: Optional[object]) -> object:
    return "" if value is None else value


def _row(movie: Movie) -> list[object]:
    return [
        movie.id,
        movie.title,
        movie.original_title,
        movie.release_date.isoformat() if movie.release_date else "",
        ", ".join(movie.genres),
        _optional(movie.vote_average),
        movie.reference_city,
        _optional(movie.latitude),
        _optional(movie.longitude),
    ]


def export_csv(movies: Iterable[Movie]) -> str:
    """
    Serialise le catalogue en CSV (separateur virgule, guillemets si necessaire).

    Returns:
        Contenu CSV avec ligne d'en-tete
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for movie in movies:
        writer.writerow(_row(movie))
    return buffer.getvalue()


def export_xlsx(movies: Iterable[Movie]) -> bytes:
    """
    Serialise le catalogue en classeur XLSX (feuille "Movies").

    Returns:
        Contenu binaire du classeur
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = "Movies"
    sheet.append(list(EXPORT_COLUMNS))
    for cell in sheet[1]:
        cell.font = Font(bold=True)

    for movie in movies:
        row = _row(movie)
        # Date et nombres en types natifs pour le tableur
        row[3] = movie.release_date
        row[5] = movie.vote_average
        row[7] = movie.latitude
        row[8] = movie.longitude
        sheet.append(row)

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
