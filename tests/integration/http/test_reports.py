from __future__ import annotations

import pytest


@pytest.fixture()
async def seeded(client, auth_headers):
    animal = await client.post(
        "/api/v1/animals",
        json={
            "ear_tag": "TR-42",
            "species": "cattle",
            "breed": "Holstein",
            "gender": "female",
            "birth_date": "2021-04-01",
        },
        headers=auth_headers,
    )
    animal_id = animal.json()["id"]
    await client.post(
        "/api/v1/milk-productions",
        json={"animal_id": animal_id, "date": "2024-07-10", "morning_amount": "8", "evening_amount": "7"},
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/health-records",
        json={
            "animal_id": animal_id,
            "record_type": "vet_visit",
            "title": "Routine check <annual>",
            "date": "2024-07-02",
            "cost": "450",
        },
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/transactions",
        json={"type": "expense", "category": "yem", "amount": "1200", "date": "2024-07-05"},
        headers=auth_headers,
    )
    return animal_id


@pytest.mark.asyncio
async def test_dashboard_snapshot(client, auth_headers, seeded):
    resp = await client.get("/api/v1/dashboard", headers=auth_headers)
    assert resp.status_code == 200, resp.text


@pytest.mark.asyncio
async def test_overview_report(client, auth_headers, seeded):
    resp = await client.get("/api/v1/reports/overview", headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.json()["total_animals"] == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    ["/api/v1/reports/milk.pdf", "/api/v1/reports/health-expenses.pdf", "/api/v1/reports/full.pdf"],
)
async def test_pdf_reports_are_returned_as_attachments(client, auth_headers, seeded, path):
    resp = await client.get(path, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"].startswith("attachment;")
    assert resp.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_pdf_reports_work_for_an_empty_account(client, auth_headers):
    resp = await client.get("/api/v1/reports/full.pdf", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.content.startswith(b"%PDF")
