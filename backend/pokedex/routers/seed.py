from fastapi import APIRouter, Depends

from ..services.seed_service import SeedService
from ..deps import get_seed_service

router = APIRouter()


@router.get("")
@router.get("/", include_in_schema=False)
async def execute_seed(service: SeedService = Depends(get_seed_service)) -> str:
    """Wipe the catalog and reload it from PokeAPI."""
    return await service.execute_seed()
