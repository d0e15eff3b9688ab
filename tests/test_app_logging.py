"""Tests for the app.log handler configured in app/main.py"""

import logging

import pytest

from app.core.config import settings
from app.main import create_app_log_handler


@pytest.fixture
def app_logger(logs_dir):
    """Logger writing to <logs_dir>/app.log in the service's own format."""
    handler = create_app_log_handler(logs_dir)
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT, settings.LOG_DATE_FORMAT))
    logger = logging.getLogger("tests.app_log")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    yield logger
    logger.removeHandler(handler)
    handler.close()


async def test_app_log_recreated_after_delete_all(service, logs_dir, app_logger):
    app_logger.info("before delete")
    assert (logs_dir / "app.log").exists()

    result = await service.delete_log_file("all")
    assert result.deleted == 1
    assert not (logs_dir / "app.log").exists()

    app_logger.info("after delete")

    content = (logs_dir / "app.log").read_text(encoding="utf-8")
    assert "after delete" in content
    assert "before delete" not in content


async def test_app_log_recreated_after_single_delete(service, logs_dir, app_logger):
    app_logger.info("first")
    await service.delete_log_file("app.log")

    app_logger.info("second")

    assert (logs_dir / "app.log").exists()


async def test_app_log_readable_by_viewer(service, app_logger):
    app_logger.warning("disk almost full")

    result = await service.get_log_content("app.log")

    assert result.total_lines == 1
    entry = result.entries[0]
    assert entry.level == "WARNING"
    assert entry.message == "disk almost full"
    assert entry.context == {"logger": "tests.app_log"}
