from typing import Any, Dict, List, Optional, Protocol

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from ..schemas.pokemon import Pokemon


class PokemonRepository(Protocol):
    """Store operations the catalog needs.

    Implementations raise pymongo.errors.DuplicateKeyError when a write collides
    with the unique `no` / `name` indexes; other store failures surface as
    pymongo.errors.PyMongoError subclasses.
    """

    async def create(self, doc: Dict[str, Any]) -> Pokemon: ...

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Pokemon]: ...

    async def find_many(self, limit: int, offset: int) -> List[Pokemon]: ...

    async def update_one(self, id: str, patch: Dict[str, Any]) -> None: ...

    async def delete_one(self, filter: Dict[str, Any]) -> int: ...

    async def delete_many(self) -> None: ...

    async def insert_many(self, docs: List[Dict[str, Any]]) -> None: ...


def _to_pokemon(doc: Dict[str, Any]) -> Pokemon:
    doc = dict(doc)
    doc["id"] = str(doc.pop("_id"))
    return Pokemon(**doc)


async def ensure_indexes(coll: AsyncIOMotorCollection) -> None:
    await coll.create_index("no", unique=True, name="unique_no")
    await coll.create_index("name", unique=True, name="unique_name")


class MongoPokemonRepository:
    def __init__(self, coll: AsyncIOMotorCollection) -> None:
        self.coll = coll

    async def create(self, doc: Dict[str, Any]) -> Pokemon:
        doc = dict(doc)
        res = await self.coll.insert_one(doc)
        doc["_id"] = res.inserted_id
        return _to_pokemon(doc)

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Pokemon]:
        doc = await self.coll.find_one(filter)
        return _to_pokemon(doc) if doc else None

    async def find_many(self, limit: int, offset: int) -> List[Pokemon]:
        cursor = self.coll.find({}).sort("no", 1).skip(offset).limit(limit)
        return [_to_pokemon(d) async for d in cursor]

    async def update_one(self, id: str, patch: Dict[str, Any]) -> None:
        if not patch:
            return
        await self.coll.update_one({"_id": ObjectId(id)}, {"$set": patch})

    async def delete_one(self, filter: Dict[str, Any]) -> int:
        res = await self.coll.delete_one(filter)
        return res.deleted_count

    async def delete_many(self) -> None:
        await self.coll.delete_many({})

    async def insert_many(self, docs: List[Dict[str, Any]]) -> None:
        # insert_many mutates the dicts (adds _id); hand it copies
        await self.coll.insert_many([dict(d) for d in docs])
