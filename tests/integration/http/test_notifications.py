from __future__ import annotations

from uuid import uuid4

import pytest


async def _save_profile(client, headers, **fields):
    resp = await client.put("/api/v1/profile", json=fields, headers=headers)
    assert resp.status_code == 200, resp.text
    return resp.json()


@pytest.mark.asyncio
async def test_profile_defaults_missing_preferences_to_enabled(client, auth_headers):
    assert (await client.get("/api/v1/profile", headers=auth_headers)).status_code == 404
    profile = await _save_profile(
        client,
        auth_headers,
        full_name="Ayşe",
        notification_email="ayse@example.com",
        notification_preferences={"birth_reminders": False},
    )
    assert profile["notification_preferences"] == {"birth_reminders": False}
    assert profile["email_notifications_enabled"] is False


@pytest.mark.asyncio
async def test_disabled_channel_reports_failure_without_sending(
    client, auth_headers, account_id, email_service
):
    await _save_profile(client, auth_headers, notification_email="ayse@example.com")
    resp = await client.post(
        "/api/v1/notifications/email",
        json={"user_id": str(account_id), "notification_type": "test", "message": "hi"},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "success": False,
        "message": "Email notifications disabled for this user",
    }
    assert email_service.sent == []
    logs = await client.get("/api/v1/notifications/logs", headers=auth_headers)
    assert logs.json() == []


@pytest.mark.asyncio
async def test_email_is_sent_and_logged(client, auth_headers, account_id, email_service):
    await _save_profile(
        client,
        auth_headers,
        notification_email="ayse@example.com",
        email_notifications_enabled=True,
    )
    resp = await client.post(
        "/api/v1/notifications/email",
        json={
            "user_id": str(account_id),
            "notification_type": "vaccination_reminder",
            "message": "TR-1 needs its IBR shot",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"success": True, "email_id": "email-1"}

    [message] = email_service.sent
    assert message.to == ["ayse@example.com"]
    assert message.subject == "💉 Vaccination reminder - FarmTrack"
    assert "TR-1 needs its IBR shot" in message.text

    [entry] = (await client.get("/api/v1/notifications/logs", headers=auth_headers)).json()
    assert entry["status"] == "sent"
    assert entry["channel"] == "email"
    assert entry["provider_message_id"] == "email-1"


@pytest.mark.asyncio
async def test_other_users_cannot_be_targeted(client, auth_headers):
    resp = await client.post(
        "/api/v1/notifications/email",
        json={"user_id": str(uuid4()), "notification_type": "test", "message": "hi"},
        headers=auth_headers,
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_gateway_failure_returns_502_and_is_logged(
    client, auth_headers, account_id, failing_email_service
):
    await _save_profile(
        client,
        auth_headers,
        notification_email="ayse@example.com",
        email_notifications_enabled=True,
    )
    resp = await client.post(
        "/api/v1/notifications/email",
        json={"user_id": str(account_id), "notification_type": "test", "message": "hi"},
        headers=auth_headers,
    )
    assert resp.status_code == 502
    assert resp.json() == {"success": False, "error": "Email provider rejected the message"}

    [entry] = (
        await client.get("/api/v1/notifications/logs", params={"status": "failed"}, headers=auth_headers)
    ).json()
    assert entry["target"] == "ayse@example.com"
    assert "validation_error" in entry["error_message"]
    assert failing_email_service.attempts == 1


@pytest.mark.asyncio
async def test_whatsapp_number_is_normalized(client, auth_headers, account_id, whatsapp_sender):
    await _save_profile(
        client, auth_headers, phone="0532 123 45 67", whatsapp_notifications_enabled=True
    )
    resp = await client.post(
        "/api/v1/notifications/whatsapp",
        json={"user_id": str(account_id), "notification_type": "birth_reminder", "message": "Soon"},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"success": True, "message_sid": "SM0001"}
    assert whatsapp_sender.sent[0].to == "+905321234567"


@pytest.mark.asyncio
async def test_daily_summary_requires_cron_secret(client):
    resp = await client.post("/api/v1/notifications/daily")
    assert resp.status_code == 401
    resp = await client.post("/api/v1/notifications/daily", headers={"X-Cron-Secret": "nope"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_daily_summary_sends_digest(
    client, auth_headers, account_id, email_service, cron_secret
):
    await _save_profile(
        client,
        auth_headers,
        full_name="Ayşe",
        notification_email="ayse@example.com",
        email_notifications_enabled=True,
    )
    animal = await client.post(
        "/api/v1/animals",
        json={
            "ear_tag": "TR-5",
            "species": "cattle",
            "breed": "Jersey",
            "gender": "female",
            "birth_date": "2021-01-01",
        },
        headers=auth_headers,
    )
    await client.post(
        "/api/v1/vaccinations",
        json={
            "animal_id": animal.json()["id"],
            "name": "brucella",
            "date": "2024-01-01",
            "next_date": "2024-07-18",
        },
        headers=auth_headers,
    )

    resp = await client.post("/api/v1/notifications/daily", headers={"X-Cron-Secret": cron_secret})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["success"] is True
    assert (body["sent"], body["total_users"]) == (1, 1)
    assert body["results"][0]["account_id"] == str(account_id)
    [message] = email_service.sent
    assert "• TR-5: brucella - in 3 days" in message.text
