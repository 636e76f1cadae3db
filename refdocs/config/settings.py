"""Settings for the docs site.

Reads an optional dotenv-style settings file (``KEY=VALUE``, ``#`` comments,
blank lines allowed).

Resolution order: environment variables > settings file > defaults.
"""

from __future__ import annotations

import os
from enum import StrEnum, unique
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

# ── Types ───────────────────────────────────────────────────────────


@unique
class SettingSource(StrEnum):
    ENV = "env"
    FILE = "file"
    DEFAULT = "default"


class SettingEntry(NamedTuple):
    key: str
    value: str
    source: SettingSource


class DocsSettings(BaseModel):
    """Where the docs come from and which branch serves "latest"."""

    model_config = ConfigDict(frozen=True)

    repo: str
    latest_branch: str
    docs_path: str

    @property
    def latest_branch_ref(self) -> str:
        """The latest branch as a full ref, whether configured bare or full."""
        if self.latest_branch.startswith("refs/"):
            return self.latest_branch
        return f"refs/heads/{self.latest_branch}"


# ── Setting keys ───────────────────────────────────────────────────

DEFAULT_SETTINGS_PATH = Path(".env")

# Map from internal key to setting key (env var name and file key share the same names)
_SETTING_KEYS: dict[str, str] = {
    "repo": "REPO",
    "latest_branch": "REPO_LATEST_BRANCH",
    "docs_path": "REPO_DOCS_PATH",
}

_DEFAULTS: dict[str, str] = {
    "repo": "",
    "latest_branch": "main",
    "docs_path": "/docs",
}

VALID_KEYS: list[str] = list(_SETTING_KEYS.keys())


# ── Dotenv parser ──────────────────────────────────────────────────


def _parse_dotenv(content: str) -> dict[str, str]:
    """Parse a dotenv-style string into a dict."""
    result: dict[str, str] = {}
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_index = trimmed.find("=")
        if eq_index == -1:
            continue
        key = trimmed[:eq_index].strip()
        value = trimmed[eq_index + 1 :].strip().strip("\"'")
        result[key] = value
    return result


def _read_settings_file(settings_path: Path | None) -> dict[str, str]:
    path = settings_path or DEFAULT_SETTINGS_PATH
    if not path.is_file():
        return {}
    try:
        return _parse_dotenv(path.read_text(encoding="utf-8"))
    except OSError:
        return {}


# ── Public API ─────────────────────────────────────────────────────


def get_setting_value(key: str, settings_path: Path | None = None) -> SettingEntry:
    """Get a single setting value with its source.

    Args:
        key: Internal key (e.g. "latest_branch").
        settings_path: Settings file to read, defaults to ``.env`` in the working directory.

    Returns:
        A SettingEntry with the value and its source.

    Raises:
        KeyError: If the key is not a known setting.
    """
    setting_key = _SETTING_KEYS[key]

    env_val = os.environ.get(setting_key)
    if env_val is not None:
        return SettingEntry(key=key, value=env_val, source=SettingSource.ENV)

    file_entries = _read_settings_file(settings_path)
    if setting_key in file_entries:
        return SettingEntry(key=key, value=file_entries[setting_key], source=SettingSource.FILE)

    return SettingEntry(key=key, value=_DEFAULTS[key], source=SettingSource.DEFAULT)


def list_settings(settings_path: Path | None = None) -> list[SettingEntry]:
    """List all setting values with their sources."""
    return [get_setting_value(key, settings_path) for key in VALID_KEYS]


def load_settings(settings_path: Path | None = None) -> DocsSettings:
    """Load all settings with resolution: env > file > defaults.

    Args:
        settings_path: Settings file to read, defaults to ``.env`` in the working directory.

    Returns:
        The resolved DocsSettings.
    """
    file_entries = _read_settings_file(settings_path)
    merged = dict(_DEFAULTS)

    for internal_key, setting_key in _SETTING_KEYS.items():
        if setting_key in file_entries:
            merged[internal_key] = file_entries[setting_key]

    # Env vars take precedence
    for internal_key, env_name in _SETTING_KEYS.items():
        env_val = os.environ.get(env_name)
        if env_val is not None:
            merged[internal_key] = env_val

    return DocsSettings(**merged)
