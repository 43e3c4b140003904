"""Core record types consumed by the cycle engine.

These are plain, immutable dataclasses.  Validation (date parsing, range
checks, enum membership) happens at the boundary in ``src.models``; the
engine assumes the values it receives are already well-formed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


# ---------------------------------------------------------------------------
# Closed vocabularies
# ---------------------------------------------------------------------------


class CyclePhase(str, Enum):
    menstrual = "menstrual"
    follicular = "follicular"
    ovulation = "ovulation"
    luteal = "luteal"
    none = "none"  # no period starts on or before the date


# Phases that can hold correlated symptoms, in tie-break order
ACTIVE_PHASES: tuple[CyclePhase, ...] = (
    CyclePhase.menstrual,
    CyclePhase.follicular,
    CyclePhase.ovulation,
    CyclePhase.luteal,
)


class SymptomIntensity(str, Enum):
    mild = "mild"
    moderate = "moderate"
    severe = "severe"


class SymptomCategory(str, Enum):
    physical = "physical"
    emotional = "emotional"


class MoodType(str, Enum):
    happy = "happy"
    sad = "sad"
    anxious = "anxious"
    energetic = "energetic"
    irritable = "irritable"
    calm = "calm"
    stressed = "stressed"
    excited = "excited"


class MucusConsistency(str, Enum):
    dry = "dry"
    sticky = "sticky"
    creamy = "creamy"
    watery = "watery"
    egg_white = "egg-white"


class MucusAmount(str, Enum):
    none = "none"
    light = "light"
    moderate = "moderate"
    heavy = "heavy"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Period:
    """A single tracked menstrual period.

    Attributes:
        id:         Stable identifier assigned at creation.
        start_date: First day of the period.
        end_date:   Last day of the period.  None means single-day or ongoing.
        notes:      Optional free text.
    """

    id: str
    start_date: date
    end_date: date | None = None
    notes: str | None = None


@dataclass(frozen=True)
class LoggedSymptom:
    """A dated occurrence of a named physical or emotional symptom."""

    id: str
    symptom_id: str
    symptom_name: str
    intensity: SymptomIntensity
    date: date
    is_custom: bool = False
    notes: str | None = None


@dataclass(frozen=True)
class LoggedMood:
    """A dated mood occurrence with a 1-5 intensity."""

    id: str
    mood: MoodType
    intensity: int
    date: date
    notes: str | None = None


@dataclass(frozen=True)
class BBTEntry:
    """Basal body temperature reading (°C)."""

    id: str
    date: date
    temperature: float
    time_of_measurement: str = "07:00"
    notes: str | None = None


@dataclass(frozen=True)
class CervicalMucusEntry:
    id: str
    date: date
    consistency: MucusConsistency
    amount: MucusAmount
    notes: str | None = None


@dataclass(frozen=True)
class PredefinedSymptom:
    id: str
    name: str
    category: SymptomCategory


PREDEFINED_SYMPTOMS: tuple[PredefinedSymptom, ...] = (
    # Physical
    PredefinedSymptom("cramps", "Cramps", SymptomCategory.physical),
    PredefinedSymptom("headache", "Headache", SymptomCategory.physical),
    PredefinedSymptom("fatigue", "Fatigue", SymptomCategory.physical),
    PredefinedSymptom("bloating", "Bloating", SymptomCategory.physical),
    PredefinedSymptom("acne", "Acne", SymptomCategory.physical),
    PredefinedSymptom("breast_tenderness", "Breast Tenderness", SymptomCategory.physical),
    PredefinedSymptom("back_pain", "Back Pain", SymptomCategory.physical),
    PredefinedSymptom("nausea", "Nausea", SymptomCategory.physical),
    PredefinedSymptom("hot_flashes", "Hot Flashes", SymptomCategory.physical),
    PredefinedSymptom("food_cravings", "Food Cravings", SymptomCategory.physical),
    # Emotional
    PredefinedSymptom("mood_swings", "Mood Swings", SymptomCategory.emotional),
    PredefinedSymptom("anxiety", "Anxiety", SymptomCategory.emotional),
    PredefinedSymptom("depression", "Depression", SymptomCategory.emotional),
    PredefinedSymptom("irritability", "Irritability", SymptomCategory.emotional),
    PredefinedSymptom("emotional_sensitivity", "Emotional Sensitivity", SymptomCategory.emotional),
    PredefinedSymptom("difficulty_concentrating", "Difficulty Concentrating", SymptomCategory.emotional),
)
