from pydantic import BaseModel
from typing import List, Optional


class PokeResult(BaseModel):
    name: str
    url: str


class PokeResponse(BaseModel):
    """Listing page returned by PokeAPI's /pokemon endpoint."""

    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[PokeResult]
