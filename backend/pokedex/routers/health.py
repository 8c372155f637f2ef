from fastapi import APIRouter, Request

from ..mongo import mongo_enabled

router = APIRouter()


@router.get("/")
def root():
    return {"status": "ok"}


@router.get("/db")
async def db_health(request: Request):
    if not mongo_enabled(request):
        return {"status": "degraded", "database": None, "detail": "mongodb not configured"}
    try:
        await request.app.state.mongo_client.admin.command("ping")
        return {"status": "ok", "database": "mongo"}
    except Exception as e:
        return {"status": "error", "database": "mongo", "detail": str(e)}
