# Ridekick Research
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

Two sources of configuration exist:

- Connection credentials for the hosted data store and the LLM endpoint are
  read from the process environment (optionally populated from a `.env` file).
- Plugin settings (default project, record limits) can be overridden in an
  optional `ridekick.yaml` file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


DEFAULT_PROJECT = "ridekick"
DEFAULT_RECORD_LIMIT = 200
DEFAULT_MAX_AI_SOURCES = 30


class ConfigError(RuntimeError):
    """
    Raised when required configuration is missing or the settings file cannot
    be parsed.
    """

    pass


@dataclass(frozen=True)
class DataStoreConfig:
    """
    Connection details for the hosted data store REST interface.

    Attributes:
        url:
            Base URL of the data store (without the `/rest/v1` suffix).
        key:
            Access key sent as `apikey` header and bearer token.
    """

    url: str
    key: str

    @property
    def rest_url(self) -> str:
        return self.url.rstrip("/") + "/rest/v1"


@dataclass(frozen=True)
class Settings:
    """
    Plugin settings.

    Attributes:
        default_project:
            Project used when a tool call does not name one.
        record_limit:
            Maximum number of records fetched per tool call.
        max_ai_sources:
            Default number of records passed to the LLM by the AI analysis tool.
    """

    default_project: str = DEFAULT_PROJECT
    record_limit: int = DEFAULT_RECORD_LIMIT
    max_ai_sources: int = DEFAULT_MAX_AI_SOURCES


def load_datastore_config() -> DataStoreConfig:
    """
    Read the data store credentials from the environment.

    Returns:
        A DataStoreConfig instance.

    Raises:
        ConfigError:
            If `SUPABASE_URL` or `SUPABASE_ANON_KEY` is missing or empty.
    """

    url = os.environ.get("SUPABASE_URL")
    key = os.environ.get("SUPABASE_ANON_KEY")

    if not url or not key:
        raise ConfigError("SUPABASE_URL and SUPABASE_ANON_KEY must be set")

    return DataStoreConfig(url=url, key=key)


def datastore_configured() -> bool:
    """Return True if both data store variables are present."""

    return bool(os.environ.get("SUPABASE_URL")) and bool(os.environ.get("SUPABASE_ANON_KEY"))


def llm_configured() -> bool:
    """Return True if an API key for the completion endpoint is present."""

    return bool(os.environ.get("LLM_OPENAI_API_KEY"))


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML settings file to use.

    Args:
        cli_path:
            Optional settings path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "ridekick.yaml"


def load_settings(path: Path | None, *, required: bool = False) -> Settings:
    """
    Load and validate the optional settings file.

    Args:
        path:
            Path to the YAML file. `None` returns the defaults.
        required:
            If true, a missing file is an error (used when the path was given
            explicitly on the command line).

    Returns:
        A validated Settings instance.

    Raises:
        ConfigError:
            If the file cannot be read or parsed, or contains invalid values.
    """

    if path is None:
        return Settings()

    if not path.exists():
        if required:
            raise ConfigError(f"Settings file not found: {path}")
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Settings path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML settings: {path}: {exc}") from exc

    if raw is None:
        return Settings()

    if not isinstance(raw, dict):
        raise ConfigError("Settings YAML must contain a mapping at the top level")

    return _parse_settings(raw)


def _parse_settings(raw: dict[str, Any]) -> Settings:
    """
    Validate the settings mapping.

    Args:
        raw:
            Parsed YAML mapping.

    Returns:
        A Settings instance with defaults for missing keys.

    Raises:
        ConfigError:
            If a key has the wrong type or an out-of-range value.
    """

    unknown = sorted(k for k in raw if k not in {"default_project", "record_limit", "max_ai_sources"})
    if unknown:
        raise ConfigError(f"Unknown settings key(s): {', '.join(str(k) for k in unknown)}")

    default_project = raw.get("default_project", Settings.default_project)
    if not isinstance(default_project, str) or not default_project.strip():
        raise ConfigError("'default_project' must be a non-empty string")

    record_limit = raw.get("record_limit", Settings.record_limit)
    if not isinstance(record_limit, int) or isinstance(record_limit, bool):
        raise ConfigError("'record_limit' must be an integer")
    if record_limit <= 0:
        raise ConfigError("'record_limit' must be > 0")

    max_ai_sources = raw.get("max_ai_sources", Settings.max_ai_sources)
    if not isinstance(max_ai_sources, int) or isinstance(max_ai_sources, bool):
        raise ConfigError("'max_ai_sources' must be an integer")
    if max_ai_sources <= 0:
        raise ConfigError("'max_ai_sources' must be > 0")

    return Settings(
        default_project=default_project.strip(),
        record_limit=record_limit,
        max_ai_sources=max_ai_sources,
    )
