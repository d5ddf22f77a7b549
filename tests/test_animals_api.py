"""Integration tests for the /animals endpoints."""

import pytest
from httpx import AsyncClient

from tests.factories import animal_json


@pytest.mark.asyncio
async def test_create_animal_returns_201(client: AsyncClient) -> None:
    resp = await client.post("/animals", json=animal_json())
    assert resp.status_code == 201
    assert resp.json() == animal_json()


@pytest.mark.asyncio
async def test_create_invalid_animal_returns_422(client: AsyncClient) -> None:
    resp = await client.post("/animals", json=animal_json(age=-2))
    assert resp.status_code == 422
    assert resp.json() == {"error": {"code": "validation_error", "message": "Invalid animal!"}}


@pytest.mark.asyncio
async def test_create_animal_missing_fields_returns_422(client: AsyncClient) -> None:
    resp = await client.post("/animals", json={"catalog_number": "01HNTWXTQSH4"})
    assert resp.status_code == 422
    assert resp.json()["error"]["message"] == "Invalid animal!"


@pytest.mark.asyncio
async def test_list_animals(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/animals")
    assert resp.status_code == 200
    assert len(resp.json()) == 4


@pytest.mark.asyncio
async def test_list_animals_empty_database_returns_404(client: AsyncClient) -> None:
    resp = await client.get("/animals")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"code": "not_found", "message": "No animal found."}}


@pytest.mark.asyncio
async def test_search_by_type(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/animals/search", params={"type": "Mammal"})
    assert resp.status_code == 200
    assert [a["name"] for a in resp.json()] == ["Lappy", "Rocky"]


@pytest.mark.asyncio
async def test_search_by_unknown_type_returns_404(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/animals/search", params={"type": "Fish"})
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "No animal found with the given type."


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [{}, {"type": ""}, {"type": "   "}])
async def test_search_by_blank_type_returns_400(
    client: AsyncClient, params: dict[str, str]
) -> None:
    resp = await client.get("/animals/search", params=params)
    assert resp.status_code == 400
    assert resp.json() == {
        "error": {"code": "invalid_argument", "message": "Animal type cannot be empty."}
    }


@pytest.mark.asyncio
async def test_get_animal(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/animals/01HNTWY9ZC3M")
    assert resp.status_code == 200
    assert resp.json()["name"] == "Kiwi"


@pytest.mark.asyncio
async def test_get_unknown_animal_returns_404(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.get("/animals/invalidNumber")
    assert resp.status_code == 404
    assert resp.json()["error"]["message"] == "No animal found with catalog number: invalidNumber"


@pytest.mark.asyncio
async def test_get_whitespace_catalog_number_returns_400(client: AsyncClient) -> None:
    resp = await client.get("/animals/%20%20%20")
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Catalog number cannot be empty."


@pytest.mark.asyncio
async def test_update_rekeys_animal(client: AsyncClient, seeded_db: None) -> None:
    body = animal_json(catalog_number="01HNTWXUPDET", age=3)
    resp = await client.put("/animals/01HNTWXTQSH4", json=body)
    assert resp.status_code == 200
    assert resp.json() == body

    assert (await client.get("/animals/01HNTWXUPDET")).status_code == 200
    assert (await client.get("/animals/01HNTWXTQSH4")).status_code == 404


@pytest.mark.asyncio
async def test_update_invalid_body_returns_422(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.put("/animals/01HNTWXTQSH4", json=animal_json(catalog_number="01H"))
    assert resp.status_code == 422
    assert resp.json()["error"]["message"] == "Invalid animal!"


@pytest.mark.asyncio
async def test_update_unknown_animal_returns_404(client: AsyncClient) -> None:
    resp = await client.put("/animals/ZZZZZZZZZZZZ", json=animal_json())
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_animal(client: AsyncClient, seeded_db: None) -> None:
    resp = await client.delete("/animals/01HNTWYF0D8R")
    assert resp.status_code == 204

    assert (await client.get("/animals/01HNTWYF0D8R")).status_code == 404


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    resp = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient) -> None:
    resp = await client.get("/health")
    assert resp.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_create_animal_with_overlong_breed_returns_422(client: AsyncClient) -> None:
    resp = await client.post("/animals", json=animal_json(breed="b" * 101))
    assert resp.status_code == 422
    assert resp.json()["error"]["message"] == "Invalid animal!"


@pytest.mark.asyncio
async def test_rejected_update_leaves_animal_unchanged(
    client: AsyncClient, seeded_db: None
) -> None:
    resp = await client.put("/animals/01HNTWXTQSH4", json=animal_json(name="   "))
    assert resp.status_code == 422

    resp = await client.get("/animals/01HNTWXTQSH4")
    assert resp.json()["name"] == "Lappy"
