"""Configuration loading from harlog.yaml, env vars, .env file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Output settings resolved from .env + env vars + harlog.yaml."""

    indent: bool = True
    emit_entry_time: bool = False
    log_level: str = "WARNING"

    @classmethod
    def load(cls, config_yaml: Path | str = "harlog.yaml") -> Settings:
        """Load settings from harlog.yaml, then let .env/env vars override them."""
        # Load .env file (does not override existing env vars)
        load_dotenv()

        values = load_settings_file(Path(config_yaml))

        indent = os.environ.get("HARLOG_INDENT")
        if indent is not None:
            values["indent"] = _parse_bool(indent)
        emit_time = os.environ.get("HARLOG_EMIT_ENTRY_TIME")
        if emit_time is not None:
            values["emit_entry_time"] = _parse_bool(emit_time)
        log_level = os.environ.get("HARLOG_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level

        try:
            settings = cls(**values)
        except ValidationError as e:
            logger.warning("Invalid harlog settings: %s; using defaults", e)
            return cls()
        settings.log_level = settings.log_level.upper()
        return settings

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.WARNING),
            format="%(levelname)s %(name)s: %(message)s",
        )


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in _TRUE_VALUES


def load_settings_file(path: Path) -> dict[str, Any]:
    """Parse harlog.yaml into a dict of known settings."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Failed to parse %s: %s; using defaults", path, e)
        return {}

    if not raw:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring %s: expected a mapping at the top level", path)
        return {}

    known = set(Settings.model_fields)
    for key in raw.keys() - known:
        logger.warning("Skipping unknown setting '%s' in %s", key, path)
    return {key: value for key, value in raw.items() if key in known}
