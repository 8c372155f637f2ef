from typing import Any

from bson import ObjectId

from ..errors import BadRequest


def is_valid_object_id(value: Any) -> bool:
    # bson accepts 24-char hex strings (or 12 raw bytes / ObjectId instances)
    if not isinstance(value, (str, ObjectId)):
        return False
    return ObjectId.is_valid(value)


def parse_mongo_id(value: str) -> str:
    """Path guard for routes that only take a raw Mongo id."""
    if not is_valid_object_id(value):
        raise BadRequest(f"{value} is not a valid MongoId")
    return value
