"""End-to-end API tests through FastAPI's TestClient."""

from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient

from src.cycle.correlation import EMPTY_STATE_MESSAGE
from src.services.store import JsonRecordStore
from src.tests.conftest import API, TEST_TODAY


def post_period(client: TestClient, start: str, end: str | None = None) -> dict:
    body = {"start_date": start}
    if end:
        body["end_date"] = end
    resp = client.post(f"{API}/periods", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()


def seed_regular_periods(client: TestClient) -> list[dict]:
    return [
        post_period(client, "2026-01-01", "2026-01-05"),
        post_period(client, "2026-01-29", "2026-02-02"),
        post_period(client, "2026-02-26"),
    ]


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["store"] == "available"
        assert body["version"] == "0.1.0"

    def test_openapi_uses_configured_title(self, client: TestClient) -> None:
        info = client.get("/openapi.json").json()["info"]
        assert info["title"] == "Cycle Insights API"
        assert info["version"] == "0.1.0"


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------


class TestPeriods:
    def test_create_and_list(self, client: TestClient) -> None:
        first = post_period(client, "2026-01-01", "2026-01-05")
        second = post_period(client, "2026-01-29")
        assert first["id"] != second["id"]
        assert first["end_date"] == "2026-01-05"

        listed = client.get(f"{API}/periods").json()
        assert [p["id"] for p in listed] == [second["id"], first["id"]]

    def test_inverted_range_rejected(self, client: TestClient) -> None:
        resp = client.post(
            f"{API}/periods", json={"start_date": "2026-02-10", "end_date": "2026-02-01"}
        )
        assert resp.status_code == 422
        assert client.get(f"{API}/periods").json() == []

    def test_malformed_date_rejected(self, client: TestClient) -> None:
        resp = client.post(f"{API}/periods", json={"start_date": "2026-13-45"})
        assert resp.status_code == 422

    def test_get_update_delete(self, client: TestClient) -> None:
        period = post_period(client, "2026-02-01")
        pid = period["id"]

        assert client.get(f"{API}/periods/{pid}").json()["start_date"] == "2026-02-01"

        resp = client.patch(f"{API}/periods/{pid}", json={"end_date": "2026-02-05", "notes": "light"})
        assert resp.status_code == 200
        assert resp.json()["end_date"] == "2026-02-05"
        assert resp.json()["notes"] == "light"

        assert client.delete(f"{API}/periods/{pid}").status_code == 204
        assert client.get(f"{API}/periods/{pid}").status_code == 404

    def test_update_cannot_invert_range(self, client: TestClient) -> None:
        pid = post_period(client, "2026-02-01", "2026-02-05")["id"]
        resp = client.patch(f"{API}/periods/{pid}", json={"start_date": "2026-02-09"})
        assert resp.status_code == 422
        assert client.get(f"{API}/periods/{pid}").json()["start_date"] == "2026-02-01"

    def test_empty_update(self, client: TestClient) -> None:
        pid = post_period(client, "2026-02-01")["id"]
        assert client.patch(f"{API}/periods/{pid}", json={}).status_code == 400

    def test_unknown_period(self, client: TestClient) -> None:
        assert client.get(f"{API}/periods/nope").status_code == 404
        assert client.patch(f"{API}/periods/nope", json={"notes": "x"}).status_code == 404
        assert client.delete(f"{API}/periods/nope").status_code == 404


# ---------------------------------------------------------------------------
# Symptoms, moods, fertility records
# ---------------------------------------------------------------------------


class TestRecords:
    def test_predefined_symptoms(self, client: TestClient) -> None:
        resp = client.get(f"{API}/symptoms/predefined")
        assert resp.status_code == 200
        symptoms = resp.json()
        assert len(symptoms) == 16
        assert {s["category"] for s in symptoms} == {"physical", "emotional"}

    def test_symptom_log_and_filter(self, client: TestClient) -> None:
        for day in ("2026-02-01", "2026-02-10", "2026-02-20"):
            resp = client.post(
                f"{API}/symptoms",
                json={"symptom_id": "cramps", "symptom_name": "Cramps", "intensity": "mild", "date": day},
            )
            assert resp.status_code == 201
        filtered = client.get(
            f"{API}/symptoms", params={"start_date": "2026-02-05", "end_date": "2026-02-15"}
        ).json()
        assert [s["date"] for s in filtered] == ["2026-02-10"]

    def test_unknown_symptom_intensity(self, client: TestClient) -> None:
        resp = client.post(
            f"{API}/symptoms",
            json={"symptom_id": "cramps", "symptom_name": "Cramps", "intensity": "extreme", "date": "2026-02-01"},
        )
        assert resp.status_code == 422

    def test_mood_intensity_range(self, client: TestClient) -> None:
        ok = client.post(f"{API}/moods", json={"mood": "calm", "intensity": 5, "date": "2026-02-01"})
        bad = client.post(f"{API}/moods", json={"mood": "calm", "intensity": 6, "date": "2026-02-01"})
        assert ok.status_code == 201
        assert bad.status_code == 422
        assert client.delete(f"{API}/moods/{ok.json()['id']}").status_code == 204
        assert client.delete(f"{API}/moods/{ok.json()['id']}").status_code == 404

    def test_bbt_and_mucus(self, client: TestClient) -> None:
        bbt = client.post(f"{API}/fertility/bbt", json={"date": "2026-02-01", "temperature": 36.5})
        assert bbt.status_code == 201
        assert bbt.json()["time_of_measurement"] == "07:00"
        assert client.post(
            f"{API}/fertility/bbt", json={"date": "2026-02-01", "temperature": 55.0}
        ).status_code == 422

        mucus = client.post(
            f"{API}/fertility/cervical-mucus",
            json={"date": "2026-02-01", "consistency": "egg-white", "amount": "heavy"},
        )
        assert mucus.status_code == 201
        assert client.get(f"{API}/fertility/cervical-mucus").json()[0]["consistency"] == "egg-white"


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------


class TestInsights:
    def test_stats_empty(self, client: TestClient) -> None:
        body = client.get(f"{API}/insights/cycle-stats").json()
        assert body == {
            "average_cycle_length": 28,
            "total_periods": 0,
            "next_predicted_period": None,
            "cycle_lengths": [],
        }

    def test_stats_round_trip(self, client: TestClient) -> None:
        seed_regular_periods(client)
        body = client.get(f"{API}/insights/cycle-stats").json()
        assert body["average_cycle_length"] == 28
        assert body["total_periods"] == 3
        assert body["next_predicted_period"] == "2026-03-26"

    def test_days_until_next_period(self, client: TestClient) -> None:
        assert client.get(f"{API}/insights/days-until-next-period").json() == {
            "next_predicted_period": None,
            "days_until": None,
        }
        seed_regular_periods(client)
        body = client.get(f"{API}/insights/days-until-next-period").json()
        assert body["days_until"] == (date(2026, 3, 26) - TEST_TODAY).days

    def test_fertile_window(self, client: TestClient) -> None:
        assert client.get(f"{API}/insights/fertile-window").status_code == 404
        seed_regular_periods(client)
        body = client.get(f"{API}/insights/fertile-window").json()
        assert body == {"ovulation_date": "2026-03-12", "start": "2026-03-07", "end": "2026-03-13"}

    def test_phase(self, client: TestClient) -> None:
        seed_regular_periods(client)
        today = client.get(f"{API}/insights/phase").json()
        assert today == {"date": "2026-02-23", "phase": "luteal", "days_since_period_start": 25}

        on_day = client.get(f"{API}/insights/phase", params={"on": "2026-02-28"}).json()
        assert on_day["phase"] == "menstrual"
        assert on_day["days_since_period_start"] == 2

        before = client.get(f"{API}/insights/phase", params={"on": "2025-12-01"}).json()
        assert before["phase"] == "none"
        assert before["days_since_period_start"] is None

    def test_forecast(self, client: TestClient) -> None:
        assert client.get(f"{API}/insights/forecast").json() == []
        seed_regular_periods(client)
        forecasts = client.get(f"{API}/insights/forecast", params={"cycles": 2}).json()
        assert [f["period_start"] for f in forecasts] == ["2026-03-26", "2026-04-23"]
        assert client.get(f"{API}/insights/forecast", params={"cycles": 13}).status_code == 422
        assert client.get(f"{API}/insights/forecast", params={"cycles": 0}).status_code == 422

    def test_correlations_empty_state(self, client: TestClient) -> None:
        body = client.get(f"{API}/insights/correlations").json()
        assert body["status"] == "empty"
        assert body["message"] == EMPTY_STATE_MESSAGE
        assert body["top_symptoms"] == []

    def test_correlations_populated(self, client: TestClient) -> None:
        seed_regular_periods(client)
        for day in ("2026-01-29", "2026-01-30", "2026-02-15"):
            client.post(
                f"{API}/symptoms",
                json={"symptom_id": "cramps", "symptom_name": "Cramps", "intensity": "moderate", "date": day},
            )
        client.post(f"{API}/moods", json={"mood": "irritable", "intensity": 3, "date": "2026-02-20"})

        body = client.get(f"{API}/insights/correlations").json()
        assert body["status"] == "populated"
        assert body["top_symptoms"] == [{"name": "Cramps", "count": 3}]
        assert body["top_moods"] == [{"mood": "irritable", "count": 1}]
        assert body["dominant_phase"] == "menstrual"
        assert body["dominant_phase_insight"] == "Most symptoms occur during menstrual phase"

    def test_fertility_signals(self, client: TestClient) -> None:
        for day, temp in (("2026-02-21", 36.3), ("2026-02-22", 36.4), ("2026-02-23", 36.7)):
            client.post(f"{API}/fertility/bbt", json={"date": day, "temperature": temp})
        client.post(
            f"{API}/fertility/cervical-mucus",
            json={"date": "2026-02-23", "consistency": "egg-white", "amount": "heavy"},
        )
        body = client.get(f"{API}/insights/fertility-signals").json()
        assert body["date"] == "2026-02-23"
        assert body["bbt_trend"] == "rising"
        assert body["fertility_score"] == 90
        assert body["fertility_level"] == "high"
        assert body["ovulation_signal"] == "insufficient_data"

    def test_corrupt_store_surfaces_error(
        self, client: TestClient, app_store: JsonRecordStore
    ) -> None:
        app_store.add("periods", {"id": "bad", "start_date": "yesterday"})
        resp = client.get(f"{API}/insights/cycle-stats")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Record store error"}
