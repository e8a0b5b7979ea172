"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, TypeAdapter, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bus_countdown.domain.models.refinement import REFINEMENT_MODES

_FLOAT = TypeAdapter(float)
_INT = TypeAdapter(int)
_STR = TypeAdapter(str)


def _check_threshold(v: float) -> float:
    if not 0.0 <= v <= 1.0:
        raise ValueError("match_threshold must be between 0 and 1")
    return v


def _check_refinement_mode(v: str) -> str:
    if v.lower() not in REFINEMENT_MODES:
        raise ValueError("refinement_mode must be either 'fixed_point' or 'single_pass'")
    return v.lower()


def _toml_section(toml_data: dict[str, Any], name: str) -> dict[str, Any]:
    section = toml_data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a TOML table")
    return section


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Static catalog files
    routes_json: str = Field(
        default="static_data/routes.json", description="Path to the routes JSON file"
    )
    stops_json: str = Field(
        default="static_data/stops.json", description="Path to the stops JSON file"
    )

    # Request resolution
    match_threshold: float = Field(
        default=0.7,
        description="Minimum Jaro-Winkler similarity (inclusive) for a stop description to match",
    )
    refinement_mode: str = Field(
        default="fixed_point",
        description="Refinement strategy: 'fixed_point' (exact) or 'single_pass' (approximation)",
    )
    max_result_choices: int = Field(
        default=5,
        ge=1,
        description="Offer the result list directly once at most this many results remain",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML config file overriding the settings above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [catalog] and [matching] sections",
    )

    @field_validator("match_threshold")
    @classmethod
    def validate_match_threshold(cls, v: float) -> float:
        """Validate the threshold is a similarity in [0, 1]."""
        return _check_threshold(v)

    @field_validator("refinement_mode")
    @classmethod
    def validate_refinement_mode(cls, v: str) -> str:
        """Validate refinement mode is either 'fixed_point' or 'single_pass'."""
        return _check_refinement_mode(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file, updating catalog and matching settings.

        Does nothing when no config_file is set.

        Returns:
            The parsed TOML data.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        catalog = _toml_section(toml_data, "catalog")
        if "routes_json" in catalog:
            self.routes_json = _STR.validate_python(catalog["routes_json"])
        if "stops_json" in catalog:
            self.stops_json = _STR.validate_python(catalog["stops_json"])

        matching = _toml_section(toml_data, "matching")
        if "threshold" in matching:
            self.match_threshold = _check_threshold(_FLOAT.validate_python(matching["threshold"]))
        if "refinement_mode" in matching:
            self.refinement_mode = _check_refinement_mode(
                _STR.validate_python(matching["refinement_mode"])
            )
        if "max_result_choices" in matching:
            max_result_choices = _INT.validate_python(matching["max_result_choices"])
            if max_result_choices < 1:
                raise ValueError("max_result_choices must be at least 1")
            self.max_result_choices = max_result_choices

        return toml_data
