"""Shared fixtures for the logs viewer tests."""

import os
import tempfile

# 导入 app 之前指定日志目录，避免测试在仓库中创建 storage/logs
os.environ.setdefault("LOGS_DIR", tempfile.mkdtemp(prefix="logs-viewer-tests-"))

from pathlib import Path

import pytest

from app.services.logs_service import LogsService


@pytest.fixture
def sample_log() -> str:
    """Two entries: a request line and a multi-line error."""
    return (
        "[2025-01-01 10:00:00] INFO: boot | IP: 10.0.0.1 | GET /health\n"
        "[2025-01-01 10:00:01] ERROR: fail\n"
        "stack line 2"
    )


@pytest.fixture
def make_entries():
    """Build `count` single-line entries, one second apart."""

    def _make(count: int, level: str = "INFO") -> str:
        return "\n".join(
            f"[2025-01-01 10:00:{i:02d}] {level}: message {i}" for i in range(count)
        )

    return _make


@pytest.fixture
def logs_dir(tmp_path) -> Path:
    """Empty logs directory inside a temp root."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def service(logs_dir) -> LogsService:
    return LogsService(logs_dir)


@pytest.fixture
def write_log(logs_dir):
    """Write a file into the logs directory, optionally with a fixed mtime."""

    def _write(name: str, content: str = "", mtime: float | None = None) -> Path:
        path = logs_dir / name
        path.write_text(content, encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write
