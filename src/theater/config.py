from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

_MIN_VALUES: Dict[str, int] = {"comedy_extra_volume_factor": 1}


@dataclass(frozen=True)
class PricingConfig:
    """Pricing and volume credit constants. Amounts are in cents."""

    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1000
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, bool) or not isinstance(value, int):
                actual = type(value).__name__
                raise ValueError(f"Pricing constant '{item.name}' must be an int, got {actual}")
            minimum = _MIN_VALUES.get(item.name, 0)
            if value < minimum:
                raise ValueError(f"Pricing constant '{item.name}' must be >= {minimum}, got {value}")

    def as_dict(self) -> Dict[str, int]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


DEFAULT_PRICING = PricingConfig()

_ENV_PREFIX = "THEATER_"


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    return tomllib.loads(path.read_text(encoding="utf-8"))


def _to_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _from_sources(raw: Dict[str, Any]) -> PricingConfig:
    values: Dict[str, int] = {}
    for item in fields(PricingConfig):
        default = getattr(DEFAULT_PRICING, item.name)
        value = _to_int(os.getenv(f"{_ENV_PREFIX}{item.name.upper()}", raw.get(item.name, default)), default)
        values[item.name] = max(_MIN_VALUES.get(item.name, 0), value)
    return PricingConfig(**values)


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> PricingConfig:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    theater = tool.get("theater", {}) if isinstance(tool, dict) else {}
    pricing = theater.get("pricing", {}) if isinstance(theater, dict) else {}
    return _from_sources(pricing if isinstance(pricing, dict) else {})


def get_config() -> PricingConfig:
    return load_config(os.getcwd())


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> PricingConfig:
    load_config.cache_clear()
    return load_config(start_dir)
