from pydantic import BaseModel, Field
from typing import Optional


class PaginationParams(BaseModel):
    # None means the service's configured default page size (DEFAULT_LIMIT);
    # no upper bound, callers may ask for the whole collection
    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)
