import json
import logging
import math
import re
from typing import Any, Callable, Dict, List, NoReturn, Optional, Tuple

from bson import ObjectId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..common.mongo_id import is_valid_object_id
from ..errors import BadRequest, Conflict, InternalError, NotFound
from ..repositories.pokemon_repository import PokemonRepository
from ..schemas.common import PaginationParams
from ..schemas.pokemon import MAX_BSON_INT, Pokemon, PokemonCreate, PokemonUpdate

log = logging.getLogger("uvicorn.error")

Filter = Dict[str, Any]
Resolver = Callable[[str], Optional[Filter]]

# ASCII decimal literal: "25", "-3", "2.5e1", ".5"; no "1_000" or non-ASCII digits
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def by_number(key: str) -> Optional[Filter]:
    """Whole key is a number, e.g. "25", " 25 " or "2.5e1"."""
    text = key.strip()
    if not NUMBER_RE.fullmatch(text):
        return None
    try:
        no = int(text)
    except ValueError:
        value = float(text)
        if not math.isfinite(value) or not value.is_integer():
            return None
        no = int(value)
    # out of int64 range can never match, and would not encode as BSON
    if not -MAX_BSON_INT - 1 <= no <= MAX_BSON_INT:
        return None
    return {"no": no}


def by_object_id(key: str) -> Optional[Filter]:
    if not is_valid_object_id(key):
        return None
    return {"_id": ObjectId(key)}


def by_name(key: str) -> Optional[Filter]:
    return {"name": key.lower().strip()}


RESOLVERS: Tuple[Resolver, ...] = (by_number, by_object_id, by_name)


class PokemonService:
    def __init__(
        self,
        repository: PokemonRepository,
        default_limit: int = 10,
        resolvers: Tuple[Resolver, ...] = RESOLVERS,
    ) -> None:
        self.repository = repository
        self.default_limit = default_limit
        self.resolvers = resolvers

    async def create(self, payload: PokemonCreate) -> Pokemon:
        doc = payload.model_dump()
        doc["name"] = doc["name"].lower()
        try:
            return await self.repository.create(doc)
        except PyMongoError as e:
            self._handle_exceptions(e, "create")

    async def find_all(self, pagination: Optional[PaginationParams] = None) -> List[Pokemon]:
        if pagination is None:
            pagination = PaginationParams()
        limit = pagination.limit or self.default_limit
        return await self.repository.find_many(limit=limit, offset=pagination.offset)

    async def find_one(self, key: str) -> Pokemon:
        """Resolve `key` as a dex number, then a Mongo id, then a name.

        Each resolver turns the key into a store filter or declines; the first
        filter that matches a record wins.
        """
        for resolve in self.resolvers:
            query = resolve(key)
            if query is None:
                continue
            pokemon = await self.repository.find_one(query)
            if pokemon is not None:
                return pokemon
        raise NotFound(f'Pokemon with id, name or no "{key}" not found')

    async def update(self, key: str, patch: PokemonUpdate) -> Pokemon:
        pokemon = await self.find_one(key)

        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in changes:
            changes["name"] = changes["name"].lower()

        try:
            await self.repository.update_one(pokemon.id, changes)
        except PyMongoError as e:
            self._handle_exceptions(e, "update")
        # merged view, not a re-read
        return pokemon.model_copy(update=changes)

    async def remove(self, id: str) -> None:
        if not is_valid_object_id(id):
            raise BadRequest(f"{id} is not a valid MongoId")
        deleted = await self.repository.delete_one({"_id": ObjectId(id)})
        if deleted == 0:
            raise BadRequest(f'Pokemon with id "{id}" not found')

    def _handle_exceptions(self, error: PyMongoError, action: str) -> NoReturn:
        if isinstance(error, DuplicateKeyError):
            key_value = (error.details or {}).get("keyValue")
            raise Conflict(f"Pokemon exists in db {json.dumps(key_value, default=str)}")
        log.error("Pokemon %s failed: %r", action, error)
        raise InternalError(f"Can't {action} Pokemon - Check server logs")
