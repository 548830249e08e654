"""
Routes de recherche et d'import TMDB.

L'import se fait en deux temps : GET renvoie un brouillon pre-rempli que
l'utilisateur complete (ville, coordonnees), POST l'enregistre.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from ...services.catalogue import CatalogueService
from ..deps import get_catalogue_service
from ..schemas import ImportDraftOut, MovieIn, MovieOut, SearchPageOut

router = APIRouter(prefix="/tmdb", tags=["tmdb"])


@router.get("/search", response_model=SearchPageOut)
async def search(
    query: str = "",
    page: int = Query(default=1, ge=1, le=500),
    service: CatalogueService = Depends(get_catalogue_service),
):
    """Recherche TMDB paginee ; une requete vide retourne une page vide."""
    result = await service.search(query, page)
    return SearchPageOut.from_page(query.strip(), result)


@router.get("/import/{tmdb_id}", response_model=ImportDraftOut)
async def prepare_import(
    tmdb_id: int, service: CatalogueService = Depends(get_catalogue_service)
):
    """Brouillon d'import pre-rempli depuis les details TMDB."""
    draft = await service.prepare_import(tmdb_id)
    if draft is None:
        raise HTTPException(status_code=404, detail="Film TMDB introuvable")
    poster_url = await service.poster_url(draft.poster_path)
    return ImportDraftOut(movie=MovieOut.from_entity(draft), poster_url=poster_url)


@router.post("/import", response_model=MovieOut, status_code=201)
async def confirm_import(
    payload: MovieIn, service: CatalogueService = Depends(get_catalogue_service)
):
    """Enregistre le film importe et complete."""
    return MovieOut.from_entity(service.confirm_import(payload.to_entity()))
