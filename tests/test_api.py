"""HTTP bindings of the drive session and preferences endpoints."""

import pytest

from drivesafe.core.config import settings


async def log_event(client, event, user_id="u1", **extra):
    return await client.post(
        "/api/drive-sessions/log", params={"userId": user_id}, json={"event": event, **extra}
    )


async def send_speed(client, speed, timestamp, user_id="u1"):
    return await client.post(
        "/api/drive-sessions/speed",
        params={"userId": user_id},
        json={"speed": speed, "latitude": 6.5244, "longitude": 3.3792, "timestamp": timestamp},
    )


class TestDriveSessionRoutes:
    async def test_start_returns_active_session_in_camel_case(self, client):
        response = await log_event(client, "start")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ACTIVE"
        assert body["userId"] == "u1"
        assert body["maxSpeed"] == 0
        assert body["avgSpeed"] == 0
        assert body["distanceTraveled"] == 0
        assert body["endTime"] is None
        assert "startTime" in body

    async def test_event_is_case_insensitive(self, client):
        assert (await log_event(client, "START")).status_code == 200
        assert (await log_event(client, " End ")).status_code == 200

    async def test_double_start_conflicts(self, client):
        await log_event(client, "start")

        response = await log_event(client, "start")

        assert response.status_code == 409
        assert response.json() == {"error": "Active session already exists"}

    async def test_end_without_start_is_404(self, client):
        response = await log_event(client, "end")

        assert response.status_code == 404
        assert response.json() == {"error": "No active session found"}

    @pytest.mark.parametrize("event", ["pause", "stop", ""])
    async def test_unknown_event_is_rejected(self, client, event):
        response = await log_event(client, event)

        assert response.status_code == 422
        active = await client.get("/api/drive-sessions/active", params={"userId": "u1"})
        assert active.json() is None

    async def test_speed_without_session_is_404(self, client):
        response = await send_speed(client, 30.0, "2025-10-19T08:00:00Z")

        assert response.status_code == 404

    async def test_full_drive(self, client):
        session_id = (await log_event(client, "start")).json()["id"]
        for i, speed in enumerate((10, 20, 30)):
            response = await send_speed(client, speed, f"2025-10-19T08:00:{i:02d}Z")
            assert response.status_code == 200
            assert response.json()["sessionId"] == session_id

        ended = (await log_event(client, "end", distanceTraveled=1.8)).json()

        assert ended["id"] == session_id
        assert ended["status"] == "COMPLETED"
        assert ended["maxSpeed"] == 30
        assert ended["avgSpeed"] == 20
        assert ended["distanceTraveled"] == 1.8
        assert ended["durationMinutes"] == 0

        samples = await client.get(f"/api/drive-sessions/{session_id}/samples", params={"userId": "u1"})
        assert [s["speed"] for s in samples.json()] == [10, 20, 30]

    async def test_active_is_null_when_not_driving(self, client):
        response = await client.get("/api/drive-sessions/active", params={"userId": "u1"})

        assert response.status_code == 200
        assert response.json() is None

    async def test_active_returns_session(self, client):
        started = (await log_event(client, "start")).json()

        response = await client.get("/api/drive-sessions/active", params={"userId": "u1"})

        assert response.json()["id"] == started["id"]

    async def test_history_newest_first(self, client):
        ids = []
        for _ in range(3):
            ids.append((await log_event(client, "start")).json()["id"])
            await log_event(client, "end")

        response = await client.get("/api/drive-sessions/history", params={"userId": "u1"})

        assert response.status_code == 200
        history = response.json()
        assert [h["id"] for h in history] == list(reversed(ids))
        assert "userId" not in history[0]
        assert set(history[0]) == {
            "id", "startTime", "endTime", "maxSpeed", "avgSpeed",
            "distanceTraveled", "durationMinutes", "status",
        }

    async def test_missing_user_id_uses_default_user(self, client):
        await client.post("/api/drive-sessions/log", json={"event": "start"})

        response = await client.get("/api/drive-sessions/active", params={"userId": settings.DEFAULT_USER_ID})

        assert response.json()["userId"] == settings.DEFAULT_USER_ID

    async def test_samples_of_unknown_session_is_404(self, client):
        response = await client.get("/api/drive-sessions/nope/samples", params={"userId": "u1"})

        assert response.status_code == 404


class TestPreferencesRoutes:
    async def test_defaults_on_first_read(self, client):
        response = await client.get("/api/preferences", params={"userId": "u1"})

        assert response.status_code == 200
        assert response.json() == {
            "userId": "u1",
            "moderateSpeedThreshold": 30,
            "highSpeedThreshold": 60,
            "autoEnableDriveMode": False,
            "notificationExceptions": None,
        }

    async def test_update(self, client):
        response = await client.put(
            "/api/preferences",
            params={"userId": "u1"},
            json={"moderateSpeedThreshold": 25, "autoEnableDriveMode": True},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["moderateSpeedThreshold"] == 25
        assert body["highSpeedThreshold"] == 60
        assert body["autoEnableDriveMode"] is True

        again = await client.get("/api/preferences", params={"userId": "u1"})
        assert again.json() == body

    async def test_null_threshold_keeps_default(self, client):
        response = await client.put(
            "/api/preferences", params={"userId": "u1"}, json={"moderateSpeedThreshold": None}
        )

        assert response.status_code == 200
        assert response.json()["moderateSpeedThreshold"] == 30

    async def test_negative_threshold_is_rejected(self, client):
        response = await client.put(
            "/api/preferences", params={"userId": "u1"}, json={"highSpeedThreshold": -1}
        )

        assert response.status_code == 422

    async def test_speed_band(self, client):
        await client.put("/api/preferences", params={"userId": "u1"}, json={"highSpeedThreshold": 50})

        response = await client.get("/api/preferences/speed-band", params={"userId": "u1", "speed": 55})

        assert response.json() == {"speed": 55.0, "band": "HIGH"}
