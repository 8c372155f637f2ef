import pytest
from fastapi.testclient import TestClient

from pokedex.deps import get_http_adapter, get_pokemon_repository
from pokedex.main import app

from fakes import FakeHttpAdapter, InMemoryPokemonRepository, poke_listing


@pytest.fixture
def repo() -> InMemoryPokemonRepository:
    return InMemoryPokemonRepository()


@pytest.fixture
def http() -> FakeHttpAdapter:
    return FakeHttpAdapter(payload=poke_listing("bulbasaur", "ivysaur", "venusaur"))


@pytest.fixture
def client(repo, http):
    app.dependency_overrides[get_pokemon_repository] = lambda: repo
    app.dependency_overrides[get_http_adapter] = lambda: http
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
