import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .mongo import create_mongo_client
from .repositories.pokemon_repository import ensure_indexes
from .routers import health, pokemon, seed

app = FastAPI(title="Pokedex API")
logger = logging.getLogger("uvicorn.error")

app.state.settings = get_settings()
app.state.mongo_client = None
app.state.http_client = None

# Dev CORS (adjust origins for production)
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(pokemon.router, prefix="/api/v2/pokemon", tags=["pokemon"])
app.include_router(seed.router, prefix="/api/v2/seed", tags=["seed"])


@app.on_event("startup")
async def on_startup():
	settings = app.state.settings
	app.state.http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout))

	client = create_mongo_client(settings)
	if client is None:
		logger.warning("MongoDB disabled: set MONGODB_URI to enable the catalog routes")
		return
	app.state.mongo_client = client
	try:
		await client.admin.command("ping")
		# Unique no / name indexes back the duplicate-key conflicts
		try:
			await ensure_indexes(client[settings.mongodb_db_name][settings.mongodb_collection])
		except Exception as ie:
			logger.warning("Pokemon index creation failed: %s", ie)
		logger.info("Database connected: MongoDB (%s)", settings.mongodb_db_name)
	except Exception as e:
		logger.warning("MongoDB ping failed: %s", e)


@app.on_event("shutdown")
async def on_shutdown():
	if app.state.http_client is not None:
		await app.state.http_client.aclose()
		app.state.http_client = None
	if app.state.mongo_client is not None:
		app.state.mongo_client.close()
		app.state.mongo_client = None


@app.get("/")
def read_root():
	return {"message": "Pokedex API is running"}


if __name__ == "__main__":
	import uvicorn
	uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
