"""Tests for refdocs.config.settings: loading, lookup and resolution order."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from refdocs.config.settings import (
    VALID_KEYS,
    DocsSettings,
    SettingSource,
    get_setting_value,
    list_settings,
    load_settings,
)

_ENV_NAMES = ("REPO", "REPO_LATEST_BRANCH", "REPO_DOCS_PATH")


def _write_settings(tmp_path: Path, content: str) -> Path:
    settings_path = tmp_path / ".env"
    settings_path.write_text(content, encoding="utf-8")
    return settings_path


class TestSettings:
    """Tests for the settings module public API."""

    @pytest.fixture(autouse=True)
    def _isolate_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture) -> None:
        """Clear settings env vars and point the default settings file into tmp_path."""
        for name in _ENV_NAMES:
            monkeypatch.delenv(name, raising=False)
        mocker.patch("refdocs.config.settings.DEFAULT_SETTINGS_PATH", tmp_path / "default.env")

    # --- load_settings ---

    def test_load_settings_reads_default_path(self, tmp_path: Path):
        (tmp_path / "default.env").write_text("REPO=org/from-default\n", encoding="utf-8")
        settings = load_settings()
        assert settings.repo == "org/from-default"

    def test_load_settings_defaults(self, tmp_path: Path):
        settings = load_settings(tmp_path / "missing.env")
        assert settings == DocsSettings(repo="", latest_branch="main", docs_path="/docs")
        assert settings.latest_branch_ref == "refs/heads/main"

    def test_load_settings_from_file(self, tmp_path: Path):
        settings_path = _write_settings(
            tmp_path,
            "# docs site\n\nREPO=remix-run/react-router\nREPO_LATEST_BRANCH = dev\nnot a setting\nREPO_DOCS_PATH=\"/docs/en\"\n",
        )
        settings = load_settings(settings_path)
        assert settings.repo == "remix-run/react-router"
        assert settings.latest_branch == "dev"
        assert settings.docs_path == "/docs/en"

    def test_load_settings_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        settings_path = _write_settings(tmp_path, "REPO_LATEST_BRANCH=dev\nREPO=from/file\n")
        monkeypatch.setenv("REPO_LATEST_BRANCH", "refs/heads/main")
        settings = load_settings(settings_path)
        assert settings.latest_branch == "refs/heads/main"
        assert settings.repo == "from/file"

    def test_load_settings_directory_path_is_ignored(self, tmp_path: Path):
        settings = load_settings(tmp_path)
        assert settings.latest_branch == "main"

    # --- latest_branch_ref ---

    @pytest.mark.parametrize(
        ("latest_branch", "expected"),
        [
            ("main", "refs/heads/main"),
            ("release/next", "refs/heads/release/next"),
            ("refs/heads/dev", "refs/heads/dev"),
        ],
    )
    def test_latest_branch_ref(self, latest_branch: str, expected: str):
        settings = DocsSettings(repo="org/repo", latest_branch=latest_branch, docs_path="/docs")
        assert settings.latest_branch_ref == expected

    # --- get_setting_value ---

    def test_get_setting_value_default(self, tmp_path: Path):
        entry = get_setting_value("docs_path", tmp_path / "missing.env")
        assert entry.value == "/docs"
        assert entry.source == SettingSource.DEFAULT

    def test_get_setting_value_file(self, tmp_path: Path):
        settings_path = _write_settings(tmp_path, "REPO=org/repo\n")
        entry = get_setting_value("repo", settings_path)
        assert entry.value == "org/repo"
        assert entry.source == SettingSource.FILE

    def test_get_setting_value_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        settings_path = _write_settings(tmp_path, "REPO=org/repo\n")
        monkeypatch.setenv("REPO", "org/other")
        entry = get_setting_value("repo", settings_path)
        assert entry.value == "org/other"
        assert entry.source == SettingSource.ENV

    def test_get_setting_value_unknown_key(self, tmp_path: Path):
        with pytest.raises(KeyError):
            get_setting_value("api_key", tmp_path / "missing.env")

    # --- list_settings ---

    def test_list_settings(self, tmp_path: Path):
        settings_path = _write_settings(tmp_path, "REPO=org/repo\n")
        entries = list_settings(settings_path)
        assert [entry.key for entry in entries] == VALID_KEYS
        sources = {entry.key: entry.source for entry in entries}
        assert sources == {
            "repo": SettingSource.FILE,
            "latest_branch": SettingSource.DEFAULT,
            "docs_path": SettingSource.DEFAULT,
        }
