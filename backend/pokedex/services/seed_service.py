import logging
from typing import Any, Dict, List

from ..common.http_adapter import HttpAdapter
from ..repositories.pokemon_repository import PokemonRepository
from ..schemas.seed import PokeResponse, PokeResult

log = logging.getLogger("uvicorn.error")


def dex_number(result: PokeResult) -> int:
    # https://pokeapi.co/api/v2/pokemon/25/ -> 25
    segments = result.url.split("/")
    return int(segments[-2])


class SeedService:
    def __init__(
        self,
        repository: PokemonRepository,
        http: HttpAdapter,
        source_url: str,
        limit: int = 650,
    ) -> None:
        self.repository = repository
        self.http = http
        self.source_url = source_url
        self.limit = limit

    async def execute_seed(self) -> str:
        """Replace the whole catalog with the first `limit` entries of the PokeAPI listing.

        Not atomic: the collection is wiped before the fetch, so a failed fetch
        or insert leaves it empty until the next successful run.
        """
        await self.repository.delete_many()
        log.info("Seed: catalog cleared")

        data = await self.http.get(f"{self.source_url}?limit={self.limit}", PokeResponse)
        log.info("Seed: fetched %d entries from %s", len(data.results), self.source_url)

        docs: List[Dict[str, Any]] = [
            {"name": r.name.lower(), "no": dex_number(r)} for r in data.results
        ]
        if docs:
            await self.repository.insert_many(docs)
        log.info("Seed: inserted %d pokemon", len(docs))

        return "Seed Executed"
