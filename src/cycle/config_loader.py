"""Load, validate, and hot-reload the cycle heuristic configuration.

The config lives in ``cycle_config.yaml`` alongside this module.  At startup
it is loaded once and cached.  Call ``reload_cycle_config()`` to re-read from
disk after an edit.  No restart required.

Usage::

    from src.cycle.config_loader import get_cycle_config

    config = get_cycle_config()
    config.cycle.default_days            # 28
    config.phases.follicular_max_day     # 13
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger("cycle_insights.cycle.config")

# Path to the YAML file sitting next to this module
_CONFIG_PATH = Path(__file__).parent / "cycle_config.yaml"


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass
class CycleLengthConfig:
    default_days: int = 28


@dataclass
class FertilityConfig:
    """Calendar-method ovulation and fertile window offsets."""

    luteal_phase_days: int = 14
    fertile_days_before_ovulation: int = 5
    fertile_days_after_ovulation: int = 1


@dataclass
class PhaseThresholds:
    """Inclusive upper bounds on days since the most recent period start."""

    menstrual_max_day: int = 5
    follicular_max_day: int = 13
    ovulation_max_day: int = 16


@dataclass
class CorrelationConfig:
    window_days: int = 30
    top_n: int = 3


@dataclass
class SignalsConfig:
    """BBT and cervical mucus fertility signal settings."""

    bbt_trend_days: int = 3
    bbt_trend_threshold_c: float = 0.1
    bbt_shift_threshold_c: float = 0.2
    min_bbt_entries: int = 7
    min_mucus_entries: int = 3
    recent_entries: int = 30
    recent_mucus_entries: int = 5


@dataclass
class CycleConfig:
    """Complete, validated heuristic configuration.

    This is the single in-memory representation of cycle_config.yaml.
    Every engine function reads its constants from this object.

    Attributes:
        version:     Config schema version string.
        cycle:       Default cycle length.
        fertility:   Ovulation and fertile window offsets.
        phases:      Phase classification thresholds.
        correlation: Symptom/mood aggregation window.
        signals:     BBT / mucus signal thresholds.
    """

    version: str = "1.0"
    cycle: CycleLengthConfig = field(default_factory=CycleLengthConfig)
    fertility: FertilityConfig = field(default_factory=FertilityConfig)
    phases: PhaseThresholds = field(default_factory=PhaseThresholds)
    correlation: CorrelationConfig = field(default_factory=CorrelationConfig)
    signals: SignalsConfig = field(default_factory=SignalsConfig)
    _raw: dict = field(default_factory=dict, repr=False)


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when cycle_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Cycle config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            return yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc


def _validate_and_build(raw: dict) -> CycleConfig:
    """Validate the raw YAML dict and construct a CycleConfig.

    Missing keys fall back to the built-in defaults.  All problems are
    collected and reported together.

    Raises:
        ConfigValidationError: If any value is invalid.
    """
    errors: list[str] = []

    def _int(section: dict, key: str, default: int, path: str, minimum: int = 1) -> int:
        value = section.get(key, default)
        try:
            number = int(value)
        except (TypeError, ValueError):
            errors.append(f"{path}.{key} must be an integer, got {value!r}")
            return default
        if number < minimum:
            errors.append(f"{path}.{key} = {number} must be >= {minimum}")
        return number

    def _float(section: dict, key: str, default: float, path: str) -> float:
        value = section.get(key, default)
        try:
            number = float(value)
        except (TypeError, ValueError):
            errors.append(f"{path}.{key} must be a number, got {value!r}")
            return default
        if number < 0:
            errors.append(f"{path}.{key} = {number} must not be negative")
        return number

    def _section(name: str) -> dict[str, Any]:
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            errors.append(f"'{name}' must be a mapping")
            return {}
        return section

    version = str(raw.get("version", "1.0"))

    # ── Cycle length ──
    cl_raw = _section("cycle_length")
    cycle = CycleLengthConfig(
        default_days=_int(cl_raw, "default_days", 28, "cycle_length"),
    )

    # ── Fertility ──
    fw_raw = _section("fertility")
    fertility = FertilityConfig(
        luteal_phase_days=_int(fw_raw, "luteal_phase_days", 14, "fertility"),
        fertile_days_before_ovulation=_int(
            fw_raw, "fertile_days_before_ovulation", 5, "fertility", minimum=0
        ),
        fertile_days_after_ovulation=_int(
            fw_raw, "fertile_days_after_ovulation", 1, "fertility", minimum=0
        ),
    )

    # ── Phase thresholds ──
    ph_raw = _section("phases")
    phases = PhaseThresholds(
        menstrual_max_day=_int(ph_raw, "menstrual_max_day", 5, "phases", minimum=0),
        follicular_max_day=_int(ph_raw, "follicular_max_day", 13, "phases"),
        ovulation_max_day=_int(ph_raw, "ovulation_max_day", 16, "phases"),
    )
    if not (phases.menstrual_max_day < phases.follicular_max_day < phases.ovulation_max_day):
        errors.append(
            "phases thresholds must be strictly increasing: "
            f"{phases.menstrual_max_day} < {phases.follicular_max_day} < "
            f"{phases.ovulation_max_day}"
        )

    # ── Correlation ──
    co_raw = _section("correlation")
    correlation = CorrelationConfig(
        window_days=_int(co_raw, "window_days", 30, "correlation"),
        top_n=_int(co_raw, "top_n", 3, "correlation"),
    )

    # ── Signals ──
    sg_raw = _section("signals")
    signals = SignalsConfig(
        bbt_trend_days=_int(sg_raw, "bbt_trend_days", 3, "signals", minimum=2),
        bbt_trend_threshold_c=_float(sg_raw, "bbt_trend_threshold_c", 0.1, "signals"),
        bbt_shift_threshold_c=_float(sg_raw, "bbt_shift_threshold_c", 0.2, "signals"),
        min_bbt_entries=_int(sg_raw, "min_bbt_entries", 7, "signals", minimum=4),
        min_mucus_entries=_int(sg_raw, "min_mucus_entries", 3, "signals"),
        recent_entries=_int(sg_raw, "recent_entries", 30, "signals"),
        recent_mucus_entries=_int(sg_raw, "recent_mucus_entries", 5, "signals"),
    )

    if errors:
        raise ConfigValidationError(
            f"cycle_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return CycleConfig(
        version=version,
        cycle=cycle,
        fertility=fertility,
        phases=phases,
        correlation=correlation,
        signals=signals,
        _raw=raw,
    )


def load_cycle_config(path: Path | None = None) -> CycleConfig:
    """Load and validate the cycle config from disk.

    Args:
        path: Override path to YAML. Uses the bundled cycle_config.yaml by default.
    """
    target = path or _CONFIG_PATH
    raw = _load_yaml(target)
    config = _validate_and_build(raw)
    logger.info("Loaded cycle config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: CycleConfig | None = None
_config_lock = threading.Lock()


def get_cycle_config() -> CycleConfig:
    """Return the global CycleConfig singleton, loading it on first call.

    Thread-safe.  Use ``reload_cycle_config()`` to refresh after YAML changes.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_cycle_config()
    return _config


def reload_cycle_config(path: Path | None = None) -> CycleConfig:
    """Reload the cycle config from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_cycle_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info("Reloaded cycle config: %s → %s", old_version, new_config.version)
    return new_config
