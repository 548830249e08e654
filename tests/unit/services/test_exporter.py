"""
Tests unitaires pour l'export CSV et XLSX du catalogue.
"""

import csv
import io
from datetime import date

from openpyxl import load_workbook

from cinecatalogue.core.entities.media import Movie
from cinecatalogue.services.exporter import EXPORT_COLUMNS, export_csv, export_xlsx


def _movies() -> list[Movie]:
    return [
        Movie(
            id=1,
            title="Matrix",
            original_title="The Matrix",
            release_date=date(1999, 3, 30),
            genres=("Acao", "Ficcao cientifica"),
            vote_average=8.2,
            reference_city="Sao Paulo",
            latitude=-23.5505,
            longitude=-46.6333,
        ),
        Movie(id=2, title='Film "maison", sans date'),
    ]


class TestExportCsv:

    def test_header_only_for_empty_catalogue(self) -> None:
        assert export_csv([]) == ",".join(EXPORT_COLUMNS) + "\n"

    def test_rows(self) -> None:
        rows = list(csv.reader(io.StringIO(export_csv(_movies()))))

        assert rows[0] == list(EXPORT_COLUMNS)
        assert rows[1] == [
            "1",
            "Matrix",
            "The Matrix",
            "1999-03-30",
            "Acao, Ficcao cientifica",
            "8.2",
            "Sao Paulo",
            "-23.5505",
            "-46.6333",
        ]
        # Valeurs absentes -> cellules vides, guillemets echappes
        assert rows[2] == ["2", 'Film "maison", sans date', "", "", "", "", "", "", ""]


class TestExportXlsx:

    def test_workbook_content(self) -> None:
        workbook = load_workbook(io.BytesIO(export_xlsx(_movies())))
        sheet = workbook["Movies"]
        rows = list(sheet.iter_rows(values_only=True))

        assert rows[0] == EXPORT_COLUMNS
        assert rows[1][0] == 1
        assert rows[1][1] == "Matrix"
        assert rows[1][3].date() == date(1999, 3, 30)
        assert rows[1][5] == 8.2
        assert rows[1][7] == -23.5505
        assert rows[2][3] is None
        assert sheet["A1"].font.bold
