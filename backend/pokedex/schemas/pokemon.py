from pydantic import BaseModel, Field
from typing import Optional

# BSON stores integers as signed 64-bit
MAX_BSON_INT = 2**63 - 1


class PokemonBase(BaseModel):
    no: int = Field(..., ge=1, le=MAX_BSON_INT, description="National dex number")
    name: str = Field(..., min_length=1)


class PokemonCreate(PokemonBase):
    pass


class PokemonUpdate(BaseModel):
    no: Optional[int] = Field(default=None, ge=1, le=MAX_BSON_INT)
    name: Optional[str] = Field(default=None, min_length=1)


class Pokemon(PokemonBase):
    id: str
