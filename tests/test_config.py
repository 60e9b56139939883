"""Unit tests for pagerkit.config and pagerkit.logging."""

import logging

import pytest
import structlog
from pydantic import ValidationError
from structlog.testing import capture_logs

from pagerkit import logging as pagerkit_logging
from pagerkit.config import Settings
from pagerkit.sequences import sequence_length
from pagerkit.state import PaginationState


@pytest.fixture
def restore_logging():
    """Undo global structlog and root logger changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_defaults(monkeypatch):
    for name in [
        "DEFAULT_ITEMS_PER_PAGE",
        "INNER_WINDOW",
        "OUTER_WINDOW",
        "GAP_MARKER",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ]:
        monkeypatch.delenv(f"PAGERKIT_{name}", raising=False)
    settings = Settings(_env_file=None)
    assert settings.default_items_per_page == 10
    assert settings.inner_window == 2
    assert settings.outer_window == 1
    assert settings.gap_marker == "…"
    assert settings.log_level == "WARNING"
    assert settings.log_format == "console"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PAGERKIT_DEFAULT_ITEMS_PER_PAGE", "25")
    monkeypatch.setenv("PAGERKIT_INNER_WINDOW", "0")
    monkeypatch.setenv("PAGERKIT_LOG_FORMAT", "json")
    settings = Settings(_env_file=None)
    assert settings.default_items_per_page == 25
    assert settings.inner_window == 0
    assert settings.log_format == "json"


def test_invalid_page_size_rejected(monkeypatch):
    monkeypatch.setenv("PAGERKIT_DEFAULT_ITEMS_PER_PAGE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_go_to_logs_clamped_page(ten_pages):
    with capture_logs() as logs:
        state = ten_pages.go_to(99)
    assert state.current_page == 10
    assert logs == [
        {
            "event": "page_clamped",
            "log_level": "debug",
            "requested": 99,
            "page": 10,
            "total_pages": 10,
        }
    ]


def test_go_to_in_range_does_not_log(ten_pages):
    with capture_logs() as logs:
        ten_pages.go_to(4)
    assert logs == []


def test_transform_logs_rebuild(ten_pages):
    with capture_logs() as logs:
        ten_pages.go_to(9).transform(sequence_length, lambda items: items[:6])
    rebuilt = [entry for entry in logs if entry["event"] == "pagination_rebuilt"]
    assert rebuilt == [
        {
            "event": "pagination_rebuilt",
            "log_level": "debug",
            "reason": "transform",
            "total_pages": 3,
            "previous_page": 9,
        }
    ]
    # Page 9 no longer exists after the collection shrank
    assert [entry["event"] for entry in logs] == ["pagination_rebuilt", "page_clamped"]


def test_change_items_per_page_logs_rebuild(ten_pages):
    with capture_logs() as logs:
        ten_pages.go_to(5).change_items_per_page(sequence_length, 5)
    assert logs[0] == {
        "event": "pagination_rebuilt",
        "log_level": "debug",
        "reason": "items_per_page",
        "items_per_page": 5,
        "total_pages": 4,
        "previous_page": 5,
    }
    assert logs[1]["event"] == "page_clamped"
    assert logs[1]["requested"] == 5
    assert logs[1]["page"] == 4


def test_create_logs_coerced_page_size():
    with capture_logs() as logs:
        state = PaginationState.create(sequence_length, 0, [1, 2, 3])
    assert state.items_per_page == 1
    assert logs == [
        {"event": "items_per_page_coerced", "log_level": "debug", "requested": 0}
    ]


@pytest.mark.parametrize(
    "log_format,renderer",
    [("json", structlog.processors.JSONRenderer), ("console", structlog.dev.ConsoleRenderer)],
)
def test_setup_logging_selects_renderer(monkeypatch, restore_logging, log_format, renderer):
    monkeypatch.setattr(pagerkit_logging.settings, "log_format", log_format)
    monkeypatch.setattr(pagerkit_logging.settings, "log_level", "DEBUG")
    pagerkit_logging.setup_logging()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)
    assert structlog.processors.add_log_level in processors


def test_get_logger_routes_through_stdlib(caplog):
    logger = pagerkit_logging.get_logger("pagerkit.tests")
    with caplog.at_level(logging.DEBUG, logger="pagerkit.tests"):
        logger.warning("window_changed", inner_window=3)
    assert len(caplog.records) == 1
    assert caplog.records[0].name == "pagerkit.tests"
    assert "window_changed" in caplog.records[0].getMessage()
