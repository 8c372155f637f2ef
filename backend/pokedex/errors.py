from fastapi import HTTPException


class BadRequest(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=400, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=404, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str) -> None:
        super().__init__(status_code=409, detail=detail)


class InternalError(HTTPException):
    """Unclassified store failure. The detail is generic; the cause goes to the server log."""

    def __init__(self, detail: str = "Internal server error - Check server logs") -> None:
        super().__init__(status_code=500, detail=detail)
