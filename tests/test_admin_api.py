from unittest.mock import MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from advert_alerts.main import app


@pytest.mark.asyncio
async def test_health():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_status_without_scheduler():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/api/admin/status")
    assert resp.status_code == 200
    assert resp.json() == {"scheduler_running": False, "jobs": []}


@pytest.mark.asyncio
async def test_status_lists_jobs():
    job = MagicMock(next_run_time=None)
    job.id = "check_expiring_adverts"
    job.name = "Check Expiring Adverts"
    scheduler = MagicMock(running=True)
    scheduler.get_jobs.return_value = [job]

    with patch("advert_alerts.main.scheduler", scheduler):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            resp = await ac.get("/api/admin/status")

    data = resp.json()
    assert data["scheduler_running"] is True
    assert data["jobs"] == [
        {"id": "check_expiring_adverts", "name": "Check Expiring Adverts", "next_run": None}
    ]


@pytest.mark.asyncio
async def test_manual_run_calls_job():
    job = MagicMock(return_value={"updated": 3, "expired": 1})

    with patch.dict("advert_alerts.main.JOBS", {"update_remaining_days": job}):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            resp = await ac.post("/api/admin/jobs/update_remaining_days/run")

    assert resp.status_code == 200
    assert resp.json() == {
        "job": "update_remaining_days",
        "success": True,
        "result": {"updated": 3, "expired": 1},
    }
    job.assert_called_once_with()


@pytest.mark.asyncio
async def test_manual_run_unknown_job():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.post("/api/admin/jobs/nope/run")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_manual_run_failure_returns_500():
    job = MagicMock(side_effect=RuntimeError("boom"))

    with patch.dict("advert_alerts.main.JOBS", {"update_remaining_days": job}):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            resp = await ac.post("/api/admin/jobs/update_remaining_days/run")

    assert resp.status_code == 500
    assert "boom" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_admin_key_required_in_production():
    settings = MagicMock(is_production=True, admin_api_key="secret")

    with patch("advert_alerts.main.settings", settings):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            missing = await ac.get("/api/admin/status")
            wrong = await ac.get("/api/admin/status", headers={"X-Admin-Key": "nope"})
            ok = await ac.get("/api/admin/status", headers={"X-Admin-Key": "secret"})

    assert missing.status_code == 401
    assert wrong.status_code == 401
    assert ok.status_code == 200


@pytest.mark.asyncio
async def test_admin_api_unconfigured_in_production():
    settings = MagicMock(is_production=True, admin_api_key="")

    with patch("advert_alerts.main.settings", settings):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            resp = await ac.post("/api/admin/jobs/check_expiring_adverts/run")

    assert resp.status_code == 503
