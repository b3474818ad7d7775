"""Load .reviewrc.json, validate each key, and merge environment overrides."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from commitreview.config.defaults import CONFIG_FILENAME
from commitreview.config.schema import FILE_KEYS, ReviewConfig
from commitreview.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_API_KEY = "REVIEW_API_KEY"
ENV_API_ENDPOINT = "REVIEW_API_ENDPOINT"


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _read_json(path: Path) -> Dict[str, Any]:
    """Return the parsed file, or an empty dict when it cannot be used."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Could not parse %s, using default configuration: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("%s must contain a JSON object, using default configuration", path)
        return {}
    return data


def _validate(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop invalid values with a warning so the dataclass default applies."""
    valid: Dict[str, Any] = {}
    for key, value in values.items():
        if key == "max_diff_lines":
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                logger.warning("Invalid maxDiffLines %r, using the default", value)
                continue
        elif key == "ignore_files":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                logger.warning("Invalid ignoreFiles %r, using the default", value)
                continue
            value = tuple(v for v in value if v)
        elif key in ("api_endpoint", "model"):
            if not isinstance(value, str) or not value.strip():
                logger.warning("Invalid %s %r, using the default", key, value)
                continue
        elif key == "api_key":
            if not isinstance(value, str):
                logger.warning("Invalid apiKey in config file, ignoring it")
                continue
        valid[key] = value
    return valid


def _merge_env_overrides(values: Dict[str, Any], environ: Mapping[str, str]) -> None:
    """Environment wins over the file, but only when set to a non-empty value."""
    if val := environ.get(ENV_API_KEY):
        values["api_key"] = val
    if val := environ.get(ENV_API_ENDPOINT):
        values["api_endpoint"] = val


def load_config(
    base_dir: Optional[Path] = None,
    config_override: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ReviewConfig:
    """Load, validate, and return a ReviewConfig.

    Raises ConfigError when no API key is available from either source.
    """
    base_dir = base_dir or Path.cwd()
    environ = os.environ if environ is None else environ
    config_path = find_config_file(base_dir, config_override)

    raw: Dict[str, Any] = {} if config_path is None else _read_json(config_path)
    values = {FILE_KEYS[k]: v for k, v in raw.items() if k in FILE_KEYS}
    values = _validate(values)
    _merge_env_overrides(values, environ)

    values.setdefault("api_key", "")
    return ReviewConfig(**values)
