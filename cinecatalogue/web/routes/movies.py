"""
Routes CRUD du catalogue local et fiche film enrichie.
"""

from fastapi import APIRouter, Depends, Response

from ...services.catalogue import CatalogueService
from ..deps import get_catalogue_service
from ..schemas import MovieIn, MovieOut, MoviePageOut

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieOut])
async def list_movies(service: CatalogueService = Depends(get_catalogue_service)):
    """Liste les films, les plus recents en premier."""
    return [MovieOut.from_entity(movie) for movie in service.list_movies()]


@router.post("", response_model=MovieOut, status_code=201)
async def create_movie(
    payload: MovieIn, service: CatalogueService = Depends(get_catalogue_service)
):
    """Cree un film saisi manuellement."""
    return MovieOut.from_entity(service.create_movie(payload.to_entity()))


@router.get("/{movie_id}", response_model=MoviePageOut)
async def movie_detail(
    movie_id: int, service: CatalogueService = Depends(get_catalogue_service)
):
    """Fiche film : catalogue local + details TMDB, poster et meteo."""
    page = await service.movie_page(movie_id)
    return MoviePageOut.from_page(page)


@router.put("/{movie_id}", response_model=MovieOut)
async def update_movie(
    movie_id: int,
    payload: MovieIn,
    service: CatalogueService = Depends(get_catalogue_service),
):
    """Met a jour un film."""
    return MovieOut.from_entity(service.update_movie(movie_id, payload.to_entity()))


@router.delete("/{movie_id}", status_code=204)
async def delete_movie(
    movie_id: int, service: CatalogueService = Depends(get_catalogue_service)
):
    """Supprime un film."""
    service.delete_movie(movie_id)
    return Response(status_code=204)
