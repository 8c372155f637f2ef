from typing import Optional

from fastapi import HTTPException, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from .config import Settings


def create_mongo_client(settings: Settings) -> Optional[AsyncIOMotorClient]:
    # Allow disabling Mongo for local/dev runs by setting MONGO_ENABLED=false
    if not (settings.mongodb_uri and settings.mongo_enabled):
        return None
    return AsyncIOMotorClient(settings.mongodb_uri)


def mongo_enabled(request: Request) -> bool:
    return getattr(request.app.state, "mongo_client", None) is not None


async def get_mongo_db(request: Request) -> AsyncIOMotorDatabase:
    client: Optional[AsyncIOMotorClient] = getattr(request.app.state, "mongo_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="mongodb not configured")
    return client[request.app.state.settings.mongodb_db_name]
