from typing import Dict, Protocol, Type, TypeVar

import httpx
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def _headers() -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": "Pokedex/1.0",
    }


class HttpAdapter(Protocol):
    async def get(self, url: str, response_model: Type[T]) -> T: ...


class HttpxAdapter:
    """Single GET + typed parse. No retries; httpx / pydantic errors propagate to the caller."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self.client = client

    async def get(self, url: str, response_model: Type[T]) -> T:
        r = await self.client.get(url, headers=_headers())
        r.raise_for_status()
        return response_model.model_validate(r.json())
