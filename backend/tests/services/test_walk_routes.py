"""Walk Routes — status codes and payload shapes for every endpoint.

Invariants:
    - 400 for malformed ids, missing creation fields, duplicate keywords,
      and malformed bodies
    - 404 for valid-looking ids with no walk
    - 500 with the storage message when the database fails
    - Null fields omitted from walk payloads
"""

from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.api.dependencies import get_walk_reads
from app.core.identifiers import new_walk_id
from app.main import app
from app.models.walk import Walk

MALFORMED_ID = "6645b78203cb60825982c2f8"


# --- reads --------------------------------------------------------------------

async def test_all_lists_walks(client, add_walk):
    await add_walk(name="A")
    await add_walk(name="B")
    res = await client.get("/all")
    assert res.status_code == 200
    assert sorted(w["name"] for w in res.json()) == ["A", "B"]


async def test_walk_payload_omits_null_fields(client, add_walk):
    walk = await add_walk(name="A", website_url=None)
    res = await client.get(f"/id/{walk.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == walk.id
    assert "website_url" not in body
    assert "keywords" not in body


async def test_get_by_id_invalid_returns_400(client):
    res = await client.get(f"/id/{MALFORMED_ID}")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_IDENTIFIER"


async def test_get_by_id_unknown_returns_404(client):
    res = await client.get(f"/id/{new_walk_id()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_search_is_case_insensitive(client, add_walk):
    await add_walk(name="Le 2 square de Montsouris")
    await add_walk(name="Jardin", intro_text="Un Square fleuri")
    await add_walk(name="Quai")
    res = await client.get("/search/square")
    assert res.status_code == 200
    assert len(res.json()) == 2


async def test_site_internet(client, add_walk):
    await add_walk(name="Site", website_url="https://example.org")
    await add_walk(name="NoSite")
    res = await client.get("/site-internet")
    assert [w["name"] for w in res.json()] == ["Site"]


async def test_mot_cle(client, add_walk):
    await add_walk(name="Five", keywords=list("abcde"))
    await add_walk(name="Six", keywords=list("abcdef"))
    res = await client.get("/mot-cle")
    assert [w["name"] for w in res.json()] == ["Six"]


async def test_publie_sorted_and_empty_year(client, add_walk):
    await add_walk(name="Late", entry_date="2019-11-20")
    await add_walk(name="Early", entry_date="2019-03-01")

    res = await client.get("/publie/2019")
    assert [w["name"] for w in res.json()] == ["Early", "Late"]

    res = await client.get("/publie/2020")
    assert res.status_code == 200
    assert res.json() == []


async def test_arrondissement_count(client, add_walk):
    await add_walk(address="1 rue de Rivoli")
    await add_walk(address="11 rue Oberkampf")
    await add_walk(address="5 rue Mouffetard")
    res = await client.get("/arrondissement/1")
    assert res.json() == {"count": 2}


async def test_synthese(client, add_walk):
    await add_walk(address="X")
    await add_walk(address="X")
    await add_walk(address="Y")
    res = await client.get("/synthese")
    assert sorted(res.json(), key=lambda r: r["address"]) == [
        {"address": "X", "count": 2},
        {"address": "Y", "count": 1},
    ]


async def test_categories(client, add_walk):
    await add_walk(category="parc")
    await add_walk(category="jardin")
    res = await client.get("/categories")
    assert sorted(res.json()) == ["jardin", "parc"]


async def test_storage_failure_returns_500_with_driver_message(
    client, test_engine,
):
    async with test_engine.begin() as conn:
        await conn.run_sync(Walk.__table__.drop)

    res = await client.get("/all")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert "no such table: walks" in error["message"]


async def test_driver_error_outside_session_returns_500(client):
    class _FailingReads:
        async def list_all(self):
            raise OperationalError(
                "SELECT 1", {}, Exception("server closed the connection"),
            )

    app.dependency_overrides[get_walk_reads] = lambda: _FailingReads()
    res = await client.get("/all")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert "server closed the connection" in error["message"]


async def test_unexpected_error_returns_500_without_details(client):
    class _BrokenReads:
        async def list_all(self):
            raise RuntimeError("secret internal state")

    app.dependency_overrides[get_walk_reads] = lambda: _BrokenReads()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as raw_client:
        res = await raw_client.get("/all")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert error["category"] == "internal"
    assert "secret" not in error["message"]


# --- mutations ----------------------------------------------------------------

async def test_add_creates_walk(client):
    res = await client.post("/add", json={
        "name": "Nouvelle balade", "address": "1 rue de la paix",
        "category": "parc", "route": ["Depart", "Arrivee"],
    })
    assert res.status_code == 200
    body = res.json()
    assert len(body["id"]) == 32
    assert body["route"] == ["Depart", "Arrivee"]

    fetched = await client.get(f"/id/{body['id']}")
    assert fetched.json()["name"] == "Nouvelle balade"


async def test_add_keeps_integer_image_dimensions(client):
    res = await client.post("/add", json={
        "name": "Parc", "address": "2 rue Gazan", "category": "parc",
        "image": {"filename": "parc.jpg", "width": 800, "height": 600.5},
    })
    fetched = await client.get(f"/id/{res.json()['id']}")
    image = fetched.json()["image"]
    assert image["width"] == 800
    assert isinstance(image["width"], int)
    assert image["height"] == 600.5


async def test_add_missing_fields_returns_400(client):
    res = await client.post("/add", json={"name": "Sans adresse"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_add_mot_cle_then_duplicate(client, add_walk):
    walk = await add_walk(keywords=["parc"])

    res = await client.put(f"/add-mot-cle/{walk.id}", json={"keyword": "jardin"})
    assert res.status_code == 200
    assert res.json()["keywords"] == ["parc", "jardin"]

    res = await client.put(f"/add-mot-cle/{walk.id}", json={"keyword": "jardin"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "DUPLICATE_KEYWORD"


async def test_add_mot_cle_invalid_and_unknown_ids(client):
    res = await client.put(f"/add-mot-cle/{MALFORMED_ID}", json={"keyword": "x"})
    assert res.status_code == 400
    res = await client.put(f"/add-mot-cle/{new_walk_id()}", json={"keyword": "x"})
    assert res.status_code == 404


async def test_add_mot_cle_requires_keyword(client, add_walk):
    walk = await add_walk()
    res = await client.put(f"/add-mot-cle/{walk.id}", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "REQUEST_VALIDATION_ERROR"


async def test_update_one(client, add_walk):
    walk = await add_walk(name="Old", city="Paris")
    res = await client.put(f"/update-one/{walk.id}", json={"name": "New"})
    assert res.status_code == 200
    assert res.json()["name"] == "New"
    assert res.json()["city"] == "Paris"


async def test_update_one_ignores_id_in_body(client, add_walk):
    walk = await add_walk()
    res = await client.put(
        f"/update-one/{walk.id}", json={"id": new_walk_id(), "city": "Lyon"},
    )
    assert res.json()["id"] == walk.id


async def test_update_one_invalid_and_unknown_ids(client):
    res = await client.put(f"/update-one/{MALFORMED_ID}", json={"name": "x"})
    assert res.status_code == 400
    res = await client.put(f"/update-one/{new_walk_id()}", json={"name": "x"})
    assert res.status_code == 404


async def test_update_many(client, add_walk):
    for i in range(3):
        await add_walk(name=f"W{i}", description_text="Immeuble Perret")
    await add_walk(name="Other", description_text="Jardin")

    res = await client.put("/update-many/Perret", json={"name": "Renamed"})
    assert res.status_code == 200
    assert res.json() == {
        "acknowledged": True, "matched_count": 3, "modified_count": 3,
    }

    names = sorted(w["name"] for w in (await client.get("/all")).json())
    assert names == ["Other", "Renamed", "Renamed", "Renamed"]


async def test_update_many_requires_name(client):
    res = await client.put("/update-many/Perret", json={})
    assert res.status_code == 400


async def test_delete_then_fetch_returns_404(client, add_walk):
    walk = await add_walk(name="Doomed")
    res = await client.delete(f"/delete/{walk.id}")
    assert res.status_code == 200
    assert res.json()["name"] == "Doomed"

    res = await client.get(f"/id/{walk.id}")
    assert res.status_code == 404


async def test_delete_invalid_and_unknown_ids(client):
    assert (await client.delete(f"/delete/{MALFORMED_ID}")).status_code == 400
    assert (await client.delete(f"/delete/{new_walk_id()}")).status_code == 404


# --- health -------------------------------------------------------------------

async def test_health(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
