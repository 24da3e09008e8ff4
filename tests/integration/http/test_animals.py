from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest


def _animal_payload(**overrides):
    payload = {
        "ear_tag": "TR-100",
        "species": "cattle",
        "breed": "Holstein",
        "gender": "female",
        "birth_date": "2022-05-15",
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_health_is_public(client):
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_requests_without_token_are_rejected(client):
    resp = await client.get("/api/v1/animals")
    assert resp.status_code == 401
    assert resp.json()["code"] == "auth_error"

    # Shares a prefix with the public health check
    resp = await client.get("/api/v1/health-records")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_create_get_list_animal(client, auth_headers):
    created = await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["status"] == "active"
    assert body["version"] == 1
    assert body["age"] == "2 years 2 months"
    assert body["category"]["key"] == "heifer"

    fetched = await client.get(f"/api/v1/animals/{body['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["ear_tag"] == "TR-100"

    listed = await client.get("/api/v1/animals", params={"status": "active"}, headers=auth_headers)
    assert listed.status_code == 200
    assert listed.json()["total"] == 1
    assert [a["id"] for a in listed.json()["items"]] == [body["id"]]


@pytest.mark.asyncio
async def test_duplicate_ear_tag_conflicts(client, auth_headers):
    await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    resp = await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    assert resp.status_code == 409
    assert resp.json()["code"] == "conflict"


@pytest.mark.asyncio
async def test_unknown_species_is_rejected(client, auth_headers):
    resp = await client.post(
        "/api/v1/animals", json=_animal_payload(species="dragon"), headers=auth_headers
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_animals_are_scoped_to_the_account(client, auth_headers, token_factory):
    created = await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    other = {"Authorization": f"Bearer {token_factory(uuid4())}"}
    resp = await client.get(f"/api/v1/animals/{created.json()['id']}", headers=other)
    assert resp.status_code == 404
    listed = await client.get("/api/v1/animals", headers=other)
    assert listed.json()["total"] == 0


@pytest.mark.asyncio
async def test_update_uses_optimistic_version(client, auth_headers):
    created = (
        await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    ).json()
    url = f"/api/v1/animals/{created['id']}"

    ok = await client.put(url, json={"version": 1, "breed": "Simmental"}, headers=auth_headers)
    assert ok.status_code == 200, ok.text
    assert ok.json()["breed"] == "Simmental"
    assert ok.json()["version"] == 2

    stale = await client.put(url, json={"version": 1, "breed": "Jersey"}, headers=auth_headers)
    assert stale.status_code == 409
    assert stale.json()["code"] == "version_conflict"


@pytest.mark.asyncio
async def test_sale_is_one_way_and_records_income(client, auth_headers):
    created = (
        await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    ).json()
    url = f"/api/v1/animals/{created['id']}"

    sold = await client.post(
        f"{url}/sell",
        json={
            "sold_to": "Mehmet",
            "sold_date": "2024-07-10",
            "sold_price": "25000",
            "record_income": True,
        },
        headers=auth_headers,
    )
    assert sold.status_code == 200, sold.text
    assert sold.json()["status"] == "sold"
    assert Decimal(sold.json()["sold_price"]) == Decimal("25000")

    death = await client.post(f"{url}/death", json={"death_date": "2024-07-12"}, headers=auth_headers)
    assert death.status_code == 409

    transactions = await client.get("/api/v1/transactions", headers=auth_headers)
    [income] = transactions.json()
    assert income["category"] == "hayvan-satis"
    assert income["animal_id"] == created["id"]


@pytest.mark.asyncio
async def test_batch_death_marks_every_animal(client, auth_headers):
    ids = []
    for tag in ("TR-1", "TR-2"):
        resp = await client.post("/api/v1/animals", json=_animal_payload(ear_tag=tag), headers=auth_headers)
        ids.append(resp.json()["id"])

    resp = await client.post(
        "/api/v1/animals/batch-death",
        json={"animal_ids": ids, "death_date": "2024-07-01", "death_reason": "flood"},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["updated"] == 2
    assert {a["status"] for a in resp.json()["items"]} == {"deceased"}


@pytest.mark.asyncio
async def test_batch_sale_books_the_total_once(client, auth_headers):
    ids = []
    for tag in ("TR-1", "TR-2", "TR-3"):
        resp = await client.post("/api/v1/animals", json=_animal_payload(ear_tag=tag), headers=auth_headers)
        ids.append(resp.json()["id"])

    resp = await client.post(
        "/api/v1/animals/batch-sale",
        json={
            "animal_ids": ids,
            "sold_to": "Mehmet",
            "sold_date": "2024-07-10",
            "sold_price": "3000",
            "record_income": True,
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["updated"] == 3
    assert [Decimal(a["sold_price"]) for a in resp.json()["items"]] == [Decimal("1000")] * 3

    txs = (
        await client.get("/api/v1/transactions", params={"category": "hayvan-satis"}, headers=auth_headers)
    ).json()
    assert len(txs) == 3
    assert sum(Decimal(tx["amount"]) for tx in txs) == Decimal("3000")


@pytest.mark.asyncio
async def test_delete_animal(client, auth_headers):
    created = (
        await client.post("/api/v1/animals", json=_animal_payload(), headers=auth_headers)
    ).json()
    url = f"/api/v1/animals/{created['id']}"
    assert (await client.delete(url, headers=auth_headers)).status_code == 204
    assert (await client.get(url, headers=auth_headers)).status_code == 404
