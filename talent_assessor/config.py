"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local overrides (gitignored)
  4. Environment variables        — ``TALENT_ASSESSOR_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The assessment engine itself never reads configuration; the CLI loads an
``AppConfig`` and passes the relevant values (rating years, recommendation
caps, search limit) down as plain arguments.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class IngestionConfig(BaseModel):
    """Roster file decoding and rating-period layout."""

    model_config = ConfigDict(frozen=True)

    encoding: str = "cp1252"
    rating_years: list[int] = [2021, 2022, 2023]

    @field_validator("rating_years")
    @classmethod
    def validate_rating_years(cls, v: list[int]) -> list[int]:
        if len(v) != 3:
            raise ValueError(f"rating_years must list exactly 3 years, got {len(v)}.")
        if any(b - a != 1 for a, b in zip(v, v[1:])):
            raise ValueError(f"rating_years must be consecutive and ascending, got {v}.")
        return v


class RecommendationConfig(BaseModel):
    """Output caps for the recommendation engine."""

    model_config = ConfigDict(frozen=True)

    cap_without_skill: int = 3
    cap_with_skill: int = 4

    @field_validator("cap_without_skill", "cap_with_skill")
    @classmethod
    def validate_cap(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Recommendation caps must be >= 1, got {v}.")
        return v


class SearchConfig(BaseModel):
    """Roster search settings."""

    model_config = ConfigDict(frozen=True)

    max_results: int = 5


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration, the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    ingestion: IngestionConfig = IngestionConfig()
    recommendations: RecommendationConfig = RecommendationConfig()
    search: SearchConfig = SearchConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config explicitly."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply TALENT_ASSESSOR_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply TALENT_ASSESSOR_* env vars to the raw config dict.

    Supported overrides:
      TALENT_ASSESSOR_ENCODING   → raw["ingestion"]["encoding"]
      TALENT_ASSESSOR_LOG_LEVEL  → raw["logging"]["level"]
      TALENT_ASSESSOR_DEBUG      → raw["debug"]
    """
    if encoding := os.environ.get("TALENT_ASSESSOR_ENCODING"):
        raw.setdefault("ingestion", {})["encoding"] = encoding

    if log_level := os.environ.get("TALENT_ASSESSOR_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("TALENT_ASSESSOR_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        ingestion=IngestionConfig(**raw.get("ingestion", {})),
        recommendations=RecommendationConfig(**raw.get("recommendations", {})),
        search=SearchConfig(**raw.get("search", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
