"""
Application settings, loaded from an optional JSON file.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import ConfigurationError


class Settings(BaseModel):
    app_name: str = "Registrar"
    log_level: str = Field("WARNING", pattern=r'^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$')
    rest_host: str = "127.0.0.1"
    rest_port: int = Field(8000, ge=1, le=65535)
    high_gpa_threshold: float = Field(8.0, ge=0)
    seed_sample_data: bool = False


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from a JSON file, or return defaults when no path is given."""
    if path is None:
        return Settings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

    try:
        return Settings.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {path}: {e}",
                                 details={"errors": e.errors()})


def apply_overrides(settings: Settings, overrides: Dict[str, Any]) -> Settings:
    """Return a copy of ``settings`` with ``overrides`` applied and re-validated."""
    try:
        return Settings.model_validate({**settings.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid setting override: {e}",
                                 details={"errors": e.errors()})
