"""Tests for app/core/config.py and app/core/path_manager.py"""

from pathlib import Path

import pytest

from app.core.config import settings
from app.core.path_manager import path_manager


@pytest.fixture
def clean_settings(monkeypatch):
    """Reset the directory settings so each test controls them."""
    monkeypatch.setattr(settings, "LOGS_DIR", None)
    monkeypatch.setattr(settings, "_APP_ROOT", None)
    monkeypatch.delenv("APP_ROOT", raising=False)
    return settings


class TestLogsDirectory:
    def test_default_under_app_root(self, clean_settings, monkeypatch, tmp_path):
        monkeypatch.setenv("APP_ROOT", str(tmp_path))

        assert path_manager.get_logs_dir() == tmp_path / "storage" / "logs"

    def test_default_app_root_is_repository(self, clean_settings):
        repo_root = Path(__file__).resolve().parent.parent
        assert path_manager.get_app_root() == repo_root

    def test_logs_dir_override(self, clean_settings, tmp_path):
        path_manager.set_logs_dir(tmp_path / "custom")

        assert path_manager.get_logs_dir() == tmp_path / "custom"

    def test_get_logs_dir_does_not_create(self, clean_settings, tmp_path):
        path_manager.set_logs_dir(tmp_path / "lazy")

        path_manager.get_logs_dir()

        assert not (tmp_path / "lazy").exists()


class TestSetAppRoot:
    def test_rejects_missing_path(self, clean_settings, tmp_path):
        with pytest.raises(FileNotFoundError):
            path_manager.set_app_root(tmp_path / "missing")

    def test_rejects_file(self, clean_settings, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(NotADirectoryError):
            path_manager.set_app_root(target)

    def test_accepts_directory(self, clean_settings, tmp_path):
        path_manager.set_app_root(str(tmp_path))
        assert path_manager.get_app_root() == tmp_path


class TestIsSafePath:
    def test_inside(self, tmp_path):
        (tmp_path / "a.log").write_text("x")
        assert path_manager.is_safe_path(tmp_path / "a.log", tmp_path) is True

    def test_root_itself_is_not_inside(self, tmp_path):
        assert path_manager.is_safe_path(tmp_path, tmp_path) is False

    def test_missing_path(self, tmp_path):
        assert path_manager.is_safe_path(tmp_path / "nope.log", tmp_path) is False

    def test_missing_root(self, tmp_path):
        (tmp_path / "a.log").write_text("x")
        assert path_manager.is_safe_path(tmp_path / "a.log", tmp_path / "gone") is False


def test_ensure_directory_exists(tmp_path):
    target = tmp_path / "x" / "y"
    assert path_manager.ensure_directory_exists(str(target)) == target
    assert target.is_dir()
