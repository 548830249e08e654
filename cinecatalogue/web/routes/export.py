"""
Routes d'export du catalogue (CSV et XLSX).
"""

from fastapi import APIRouter, Depends, Response

from ...services.catalogue import CatalogueService
from ...services.exporter import (
    CSV_MEDIA_TYPE,
    EXPORT_BASENAME,
    XLSX_MEDIA_TYPE,
    export_csv,
    export_xlsx,
)
from ..deps import get_catalogue_service

router = APIRouter(prefix="/export", tags=["export"])


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/csv")
async def export_catalogue_csv(service: CatalogueService = Depends(get_catalogue_service)):
    """Exporte le catalogue en CSV."""
    content = export_csv(service.list_movies())
    return Response(
        content=content.encode("utf-8"),
        media_type=CSV_MEDIA_TYPE,
        headers=_attachment(f"{EXPORT_BASENAME}.csv"),
    )


@router.get("/xlsx")
async def export_catalogue_xlsx(service: CatalogueService = Depends(get_catalogue_service)):
    """Exporte le catalogue en classeur XLSX."""
    return Response(
        content=export_xlsx(service.list_movies()),
        media_type=XLSX_MEDIA_TYPE,
        headers=_attachment(f"{EXPORT_BASENAME}.xlsx"),
    )
