"""Shared fixtures and record builders for cycle engine tests."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from src.cycle.config_loader import CycleConfig, load_cycle_config
from src.cycle.records import (
    BBTEntry,
    CervicalMucusEntry,
    LoggedMood,
    LoggedSymptom,
    MoodType,
    MucusAmount,
    MucusConsistency,
    Period,
    SymptomIntensity,
)

# Fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_DATE = date(2026, 2, 23)


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def make_period(start: date, end: date | None = None, pid: str | None = None) -> Period:
    return Period(id=pid or f"period-{start.isoformat()}", start_date=start, end_date=end)


def make_symptom(name: str, day: date, intensity: SymptomIntensity = SymptomIntensity.mild) -> LoggedSymptom:
    return LoggedSymptom(
        id=f"{name}-{day.isoformat()}",
        symptom_id=name.lower().replace(" ", "_"),
        symptom_name=name,
        intensity=intensity,
        date=day,
    )


def make_mood(mood: MoodType, day: date, intensity: int = 3) -> LoggedMood:
    return LoggedMood(id=f"{mood.value}-{day.isoformat()}", mood=mood, intensity=intensity, date=day)


def make_bbt(day: date, temperature: float) -> BBTEntry:
    return BBTEntry(id=f"bbt-{day.isoformat()}", date=day, temperature=temperature)


def make_mucus(
    day: date,
    consistency: MucusConsistency,
    amount: MucusAmount = MucusAmount.moderate,
) -> CervicalMucusEntry:
    return CervicalMucusEntry(
        id=f"cm-{day.isoformat()}", date=day, consistency=consistency, amount=amount
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cycle_config() -> CycleConfig:
    """Load the real bundled cycle config for tests."""
    return load_cycle_config()


@pytest.fixture
def period_history() -> list[Period]:
    raw = json.loads((FIXTURES_DIR / "period_history.json").read_text())
    return [
        Period(
            id=p["id"],
            start_date=date.fromisoformat(p["start_date"]),
            end_date=date.fromisoformat(p["end_date"]) if p["end_date"] else None,
            notes=p.get("notes"),
        )
        for p in raw["periods"]
    ]
