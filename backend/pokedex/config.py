import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


def _env_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    mongodb_uri: Optional[str]
    mongo_enabled: bool
    mongodb_db_name: str
    mongodb_collection: str
    default_limit: int
    pokeapi_url: str
    seed_limit: int
    http_timeout: float
    port: int


@lru_cache()
def get_settings() -> Settings:
    """Read runtime settings from the environment (.env is loaded on package import).

    Mongo stays disabled unless MONGODB_URI is set; MONGO_ENABLED=false turns it off
    even when a URI is present. Call get_settings.cache_clear() after changing env vars.
    """
    return Settings(
        mongodb_uri=os.getenv("MONGODB_URI") or None,
        mongo_enabled=_env_bool("MONGO_ENABLED", "true"),
        mongodb_db_name=os.getenv("MONGODB_DB_NAME", "pokedex"),
        mongodb_collection=os.getenv("MONGODB_COLLECTION", "pokemons"),
        default_limit=int(os.getenv("DEFAULT_LIMIT", "10")),
        pokeapi_url=os.getenv("POKEAPI_URL", "https://pokeapi.co/api/v2/pokemon"),
        seed_limit=int(os.getenv("SEED_LIMIT", "650")),
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "10.0")),
        port=int(os.getenv("PORT", "3000")),
    )
