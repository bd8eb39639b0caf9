from __future__ import annotations

import pytest

from src.payroll_calendar.payroll_calendar.container import Container
from src.payroll_calendar.payroll_calendar.main import create_app
from src.payroll_calendar.payroll_calendar.schedules.service import ScheduleService


@pytest.fixture
def client(monkeypatch, calendar_service, schedules_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = Container(calendar_service=calendar_service, schedule_service=ScheduleService(schedules_repo))
    app = create_app(container=container)
    return app.test_client()


@pytest.fixture
def admin_client(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["role"] = "admin"
    return client


MONTHLY = {"payGroupId": 1, "frequency": "monthly", "year": 2025, "cycleStartDate": "2025-01-01"}


def test_requires_login(client):
    resp = client.post("/api/payroll/calendar/preview", json=MONTHLY)
    assert resp.status_code == 401


def test_staff_is_forbidden(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 2
        sess["role"] = "staff"

    resp = client.post("/api/payroll/calendar/preview", json=MONTHLY)
    assert resp.status_code == 403


def test_preview_returns_periods(admin_client):
    resp = admin_client.post(
        "/api/payroll/calendar/preview",
        json={"payGroupId": 2, "frequency": "weekly", "year": 2025, "cycleStartDate": "2025-01-06", "payDayOffsetDays": 0},
    )

    assert resp.status_code == 200
    first = resp.get_json()["periods"][0]
    assert first == {
        "period_number": 1,
        "period_start": "2025-01-06",
        "period_end": "2025-01-12",
        "pay_date": "2025-01-10",
        "monday_count": 1,
    }


def test_preview_bad_offset_is_400(admin_client):
    resp = admin_client.post("/api/payroll/calendar/preview", json={**MONTHLY, "payDayOffsetDays": "abc"})
    assert resp.status_code == 400
    assert "payDayOffsetDays" in resp.get_json()["error"]


def test_preview_malformed_offset_text_is_400(admin_client):
    resp = admin_client.post("/api/payroll/calendar/preview", json={**MONTHLY, "payDayOffsetDays": "+-3"})
    assert resp.status_code == 400
    assert "payDayOffsetDays" in resp.get_json()["error"]


@pytest.mark.parametrize(
    "path",
    [
        "/api/payroll/pay-groups/1/next-cycle?year=0",
        "/api/payroll/pay-groups/1/next-cycle?year=9999",
        "/api/payroll/pay-groups/1/periods?year=0",
    ],
)
def test_out_of_range_year_is_400(admin_client, path):
    resp = admin_client.get(path)
    assert resp.status_code == 400
    assert "year" in resp.get_json()["error"]


def test_preview_unknown_pay_group_is_404(admin_client):
    resp = admin_client.post("/api/payroll/calendar/preview", json={**MONTHLY, "payGroupId": 42})
    assert resp.status_code == 404


def test_save_conflict_then_confirm(admin_client):
    first = admin_client.post("/api/payroll/calendar/save", json=MONTHLY)
    assert first.status_code == 201
    assert first.get_json()["insertedCount"] == 12

    conflict = admin_client.post("/api/payroll/calendar/save", json=MONTHLY)
    assert conflict.status_code == 409
    body = conflict.get_json()
    assert body["requiresConfirmation"] is True
    assert len(body["conflicts"]) == 12

    confirmed = admin_client.post("/api/payroll/calendar/save", json={**MONTHLY, "confirmReplace": True})
    assert confirmed.status_code == 201
    assert confirmed.get_json()["replacedCount"] == 12


def test_next_cycle_and_list_periods(admin_client):
    admin_client.post("/api/payroll/calendar/save", json=MONTHLY)

    nxt = admin_client.get("/api/payroll/pay-groups/1/next-cycle?year=2025")
    assert nxt.get_json() == {"year": 2026, "cycle": 1, "startDate": "2026-01-01", "rolledOver": True}

    periods = admin_client.get("/api/payroll/pay-groups/1/periods?year=2025&status=open").get_json()["periods"]
    assert len(periods) == 12
    assert periods[0]["period_number"] == "2025-01"


def test_update_status_endpoint(admin_client):
    admin_client.post("/api/payroll/calendar/save", json=MONTHLY)
    period_id = admin_client.get("/api/payroll/pay-groups/1/periods?year=2025").get_json()["periods"][0]["id"]

    resp = admin_client.post(f"/api/payroll/periods/{period_id}/status", json={"status": "approved"})
    assert resp.status_code == 200

    bad = admin_client.post(f"/api/payroll/periods/{period_id}/status", json={"status": "done"})
    assert bad.status_code == 400


def test_schedules_endpoints(admin_client):
    admin_client.post("/api/payroll/calendar/save", json=MONTHLY)

    schedules = admin_client.get("/api/payroll/schedules?companyId=10").get_json()["schedules"]
    assert len(schedules) == 1
    assert schedules[0]["frequency"] == "monthly"

    resp = admin_client.post(f"/api/payroll/schedules/{schedules[0]['id']}/active", json={"isActive": False})
    assert resp.status_code == 200
    assert admin_client.get("/api/payroll/schedules?companyId=10").get_json()["schedules"][0]["is_active"] is False


def test_store_failure_is_500(admin_client, periods_repo):
    periods_repo.fail_on_insert = True

    resp = admin_client.post("/api/payroll/calendar/save", json=MONTHLY)

    assert resp.status_code == 500
    assert resp.get_json() == {"error": "save failed"}
