from fastapi import APIRouter, Depends, Query, Response
from typing import List, Optional

from ..common.mongo_id import parse_mongo_id
from ..schemas.common import PaginationParams
from ..schemas.pokemon import Pokemon, PokemonCreate, PokemonUpdate
from ..services.pokemon_service import PokemonService
from ..deps import get_pokemon_service

router = APIRouter()


@router.post("", response_model=Pokemon, status_code=201)
@router.post("/", response_model=Pokemon, status_code=201, include_in_schema=False)
async def create_pokemon(payload: PokemonCreate, service: PokemonService = Depends(get_pokemon_service)):
    return await service.create(payload)


@router.get("", response_model=List[Pokemon])
@router.get("/", response_model=List[Pokemon], include_in_schema=False)
async def list_pokemon(
    limit: Optional[int] = Query(None, ge=1, description="Page size (defaults to DEFAULT_LIMIT)"),
    offset: int = Query(0, ge=0),
    service: PokemonService = Depends(get_pokemon_service),
):
    pagination = PaginationParams(limit=limit, offset=offset)
    return await service.find_all(pagination)


@router.get("/{term}", response_model=Pokemon)
async def get_pokemon(term: str, service: PokemonService = Depends(get_pokemon_service)):
    """Look up by dex number, Mongo id or name."""
    return await service.find_one(term)


@router.patch("/{term}", response_model=Pokemon)
async def update_pokemon(term: str, payload: PokemonUpdate, service: PokemonService = Depends(get_pokemon_service)):
    return await service.update(term, payload)


@router.delete("/{id}", status_code=204)
async def delete_pokemon(id: str, service: PokemonService = Depends(get_pokemon_service)):
    await service.remove(parse_mongo_id(id))
    return Response(status_code=204)
