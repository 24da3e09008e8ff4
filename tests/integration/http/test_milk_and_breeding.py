from __future__ import annotations

from decimal import Decimal

import pytest


async def _create_cow(client, headers, ear_tag="TR-7", gender="female"):
    resp = await client.post(
        "/api/v1/animals",
        json={
            "ear_tag": ear_tag,
            "species": "cattle",
            "breed": "Holstein",
            "gender": gender,
            "birth_date": "2020-03-01",
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


@pytest.mark.asyncio
async def test_one_milk_record_per_animal_per_day(client, auth_headers):
    animal_id = await _create_cow(client, auth_headers)
    payload = {
        "animal_id": animal_id,
        "date": "2024-07-15",
        "morning_amount": "6.5",
        "evening_amount": "4",
    }
    first = await client.post("/api/v1/milk-productions", json=payload, headers=auth_headers)
    assert first.status_code == 201, first.text
    assert Decimal(first.json()["total_amount"]) == Decimal("10.5")

    second = await client.post("/api/v1/milk-productions", json=payload, headers=auth_headers)
    assert second.status_code == 409
    assert "already exists" in second.json()["message"]


@pytest.mark.asyncio
async def test_milk_summary_and_sale(client, auth_headers):
    animal_id = await _create_cow(client, auth_headers)
    for day, amount in (("2024-07-14", "6"), ("2024-07-15", "10")):
        await client.post(
            "/api/v1/milk-productions",
            json={"animal_id": animal_id, "date": day, "morning_amount": amount},
            headers=auth_headers,
        )

    sale = await client.post(
        "/api/v1/milk-productions/sales",
        json={"liters": "10", "date": "2024-07-15", "price_per_liter": "32"},
        headers=auth_headers,
    )
    assert sale.status_code == 201, sale.text
    assert sale.json()["category"] == "sut"
    assert Decimal(sale.json()["amount"]) == Decimal("320")

    summary = await client.get("/api/v1/milk-productions/summary", headers=auth_headers)
    assert summary.status_code == 200
    data = summary.json()
    assert Decimal(data["total_today"]) == Decimal("10")
    assert Decimal(data["total_this_month"]) == Decimal("16")
    assert data["days_with_production"] == 2
    assert Decimal(data["monthly_milk_income"]) == Decimal("320")


@pytest.mark.asyncio
async def test_insemination_creates_reminders_and_birth_closes_once(client, auth_headers):
    animal_id = await _create_cow(client, auth_headers)
    created = await client.post(
        "/api/v1/breeding/inseminations",
        json={"animal_id": animal_id, "date": "2024-01-01"},
        headers=auth_headers,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["expected_birth_date"] == "2024-10-10"
    assert sorted(r["reminder_date"] for r in body["reminders"]) == ["2024-07-01", "2024-08-01"]

    warnings = await client.get("/api/v1/breeding/warnings", headers=auth_headers)
    assert [w["kind"] for w in warnings.json()] == ["reduce_milk"]

    birth_url = f"/api/v1/breeding/inseminations/{body['id']}/birth"
    first = await client.post(birth_url, json={"actual_birth_date": "2024-07-14"}, headers=auth_headers)
    assert first.status_code == 200, first.text
    assert first.json()["is_pregnant"] is False

    again = await client.post(birth_url, json={"actual_birth_date": "2024-07-15"}, headers=auth_headers)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_males_cannot_be_inseminated(client, auth_headers):
    animal_id = await _create_cow(client, auth_headers, ear_tag="BULL-1", gender="male")
    resp = await client.post(
        "/api/v1/breeding/inseminations",
        json={"animal_id": animal_id, "date": "2024-01-01"},
        headers=auth_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_vaccination_list_reports_status(client, auth_headers):
    animal_id = await _create_cow(client, auth_headers)
    for next_date in ("2024-07-10", "2024-09-01"):
        resp = await client.post(
            "/api/v1/vaccinations",
            json={"animal_id": animal_id, "name": "ibr", "date": "2024-01-01", "next_date": next_date},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.text

    listed = await client.get("/api/v1/vaccinations", headers=auth_headers)
    assert listed.status_code == 200
    data = listed.json()
    assert [v["status"] for v in data["items"]] == ["overdue", "scheduled"]
    assert data["summary"]["overdue"] == 1
