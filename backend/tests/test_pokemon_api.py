from bson import ObjectId


def create(client, no, name):
    r = client.post("/api/v2/pokemon", json={"no": no, "name": name})
    assert r.status_code == 201, r.text
    return r.json()


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Pokedex API is running"}
    assert client.get("/health/").json() == {"status": "ok"}
    assert client.get("/health/db").json()["status"] == "degraded"


def test_create_returns_lowercased_record(client):
    body = create(client, 25, "Pikachu")
    assert body["name"] == "pikachu"
    assert body["no"] == 25
    assert ObjectId.is_valid(body["id"])


def test_create_ignores_extra_fields(client):
    r = client.post("/api/v2/pokemon", json={"no": 1, "name": "Bulbasaur", "type": "grass"})
    assert r.status_code == 201
    assert set(r.json()) == {"id", "no", "name"}


def test_create_validates_payload(client):
    assert client.post("/api/v2/pokemon", json={"no": 0, "name": "x"}).status_code == 422
    assert client.post("/api/v2/pokemon", json={"no": 1, "name": ""}).status_code == 422
    assert client.post("/api/v2/pokemon", json={"name": "x"}).status_code == 422


def test_create_duplicate_name_is_409(client):
    create(client, 25, "pikachu")
    r = client.post("/api/v2/pokemon", json={"no": 26, "name": "PIKACHU"})
    assert r.status_code == 409
    assert "pikachu" in r.json()["detail"]


def test_list_paginates_by_no(client):
    for no, name in ((3, "venusaur"), (1, "bulbasaur"), (2, "ivysaur"), (4, "charmander")):
        create(client, no, name)
    r = client.get("/api/v2/pokemon", params={"limit": 2, "offset": 1})
    assert r.status_code == 200
    assert [p["no"] for p in r.json()] == [2, 3]

    assert [p["no"] for p in client.get("/api/v2/pokemon").json()] == [1, 2, 3, 4]


def test_list_rejects_bad_pagination(client):
    assert client.get("/api/v2/pokemon", params={"limit": 0}).status_code == 422
    assert client.get("/api/v2/pokemon", params={"offset": -1}).status_code == 422


def test_get_by_each_key_form(client):
    created = create(client, 25, "Pikachu")
    for key in ("25", created["id"], "Pikachu"):
        r = client.get(f"/api/v2/pokemon/{key}")
        assert r.status_code == 200
        assert r.json() == created


def test_get_missing_is_404(client):
    r = client.get("/api/v2/pokemon/missingno")
    assert r.status_code == 404
    assert r.json()["detail"] == 'Pokemon with id, name or no "missingno" not found'


def test_patch_then_get_reflects_lowercased_name(client):
    created = create(client, 25, "pikachu")
    r = client.patch("/api/v2/pokemon/pikachu", json={"name": "Raichu"})
    assert r.status_code == 200
    assert r.json() == {"id": created["id"], "no": 25, "name": "raichu"}

    assert client.get("/api/v2/pokemon/25").json()["name"] == "raichu"
    assert client.get("/api/v2/pokemon/pikachu").status_code == 404


def test_patch_missing_is_404(client):
    assert client.patch("/api/v2/pokemon/999", json={"name": "x"}).status_code == 404


def test_delete_existing_then_get_is_404(client):
    created = create(client, 25, "pikachu")
    r = client.delete(f"/api/v2/pokemon/{created['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert client.get(f"/api/v2/pokemon/{created['id']}").status_code == 404


def test_delete_nonexistent_id_is_400(client):
    r = client.delete(f"/api/v2/pokemon/{ObjectId()}")
    assert r.status_code == 400
    assert "not found" in r.json()["detail"]


def test_delete_requires_mongo_id(client):
    create(client, 25, "pikachu")
    r = client.delete("/api/v2/pokemon/25")
    assert r.status_code == 400
    assert r.json()["detail"] == "25 is not a valid MongoId"
    assert client.get("/api/v2/pokemon/25").status_code == 200


def test_catalog_routes_need_mongo_without_overrides():
    from fastapi.testclient import TestClient
    from pokedex.main import app

    r = TestClient(app).get("/api/v2/pokemon")
    assert r.status_code == 503
    assert r.json()["detail"] == "mongodb not configured"


def test_oversized_no_is_422(client):
    assert client.post("/api/v2/pokemon", json={"no": 10**20, "name": "x"}).status_code == 422
    create(client, 25, "pikachu")
    assert client.patch("/api/v2/pokemon/25", json={"no": 10**20}).status_code == 422


def test_oversized_number_key_is_404(client):
    assert client.get("/api/v2/pokemon/99999999999999999999").status_code == 404
