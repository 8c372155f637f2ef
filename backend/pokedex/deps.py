"""FastAPI dependency providers.

Routers only ever see services; tests swap the store and HTTP collaborators
through app.dependency_overrides[get_pokemon_repository / get_http_adapter].
"""
from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from .common.http_adapter import HttpAdapter, HttpxAdapter
from .config import Settings
from .mongo import get_mongo_db
from .repositories.pokemon_repository import MongoPokemonRepository, PokemonRepository
from .services.pokemon_service import PokemonService
from .services.seed_service import SeedService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_pokemon_repository(
    mdb: AsyncIOMotorDatabase = Depends(get_mongo_db),
    settings: Settings = Depends(get_app_settings),
) -> PokemonRepository:
    return MongoPokemonRepository(mdb[settings.mongodb_collection])


def get_http_adapter(request: Request) -> HttpAdapter:
    return HttpxAdapter(request.app.state.http_client)


def get_pokemon_service(
    repository: PokemonRepository = Depends(get_pokemon_repository),
    settings: Settings = Depends(get_app_settings),
) -> PokemonService:
    return PokemonService(repository, default_limit=settings.default_limit)


def get_seed_service(
    repository: PokemonRepository = Depends(get_pokemon_repository),
    http: HttpAdapter = Depends(get_http_adapter),
    settings: Settings = Depends(get_app_settings),
) -> SeedService:
    return SeedService(repository, http, source_url=settings.pokeapi_url, limit=settings.seed_limit)
