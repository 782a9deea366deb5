"""Unit tests for the loguru logger adaptor."""

import pytest
from loguru import logger

from azure_blob_transfer.observability import logger_adaptor
from azure_blob_transfer.observability.logger_adaptor import (
    LoggerAdapter,
    get_logger,
    set_log_level,
)


@pytest.fixture
def captured():
    """Collect formatted log lines through an extra loguru sink."""
    messages = []
    sink_id = logger.add(
        lambda message: messages.append(str(message).rstrip("\n")),
        format="{level} {extra[logger_name]} - {message}",
        level="DEBUG",
    )
    yield messages
    logger.remove(sink_id)


@pytest.fixture(autouse=True)
def restore_level():
    yield
    set_log_level("INFO")


def test_get_logger_is_cached():
    assert get_logger("azure_blob_transfer.test") is get_logger(
        "azure_blob_transfer.test"
    )


def test_get_logger_default_name():
    assert get_logger().name == "azure_blob_transfer"


def test_adapter_binds_logger_name(captured):
    get_logger("azure_blob_transfer.test").info("Uploading 4 bytes to a.txt")

    assert "INFO azure_blob_transfer.test - Uploading 4 bytes to a.txt" in captured


@pytest.mark.parametrize("method", ["debug", "info", "warning", "error", "critical"])
def test_adapter_levels(captured, method):
    adapter = LoggerAdapter("azure_blob_transfer.levels")

    getattr(adapter, method)("message")

    assert captured == [f"{method.upper()} azure_blob_transfer.levels - message"]


def test_exception_includes_traceback(captured):
    adapter = LoggerAdapter("azure_blob_transfer.exc")
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        adapter.exception("Unexpected error: boom")

    assert captured[0].startswith("ERROR azure_blob_transfer.exc - Unexpected error")
    assert "RuntimeError: boom" in captured[0]


def test_set_log_level_replaces_sink():
    set_log_level("debug")
    first = logger_adaptor._sink_id

    set_log_level("warning")

    assert logger_adaptor._sink_id != first


def test_set_log_level_rejects_unknown_level():
    current = logger_adaptor._sink_id

    with pytest.raises(ValueError):
        set_log_level("chatty")

    assert logger_adaptor._sink_id == current


def test_unknown_env_level_falls_back_to_info(monkeypatch, capsys):
    monkeypatch.setattr(logger_adaptor, "LOG_LEVEL", "CHATTY")
    logger_adaptor._sink_id = None

    get_logger("azure_blob_transfer.startup").debug("hidden")
    get_logger("azure_blob_transfer.startup").info("shown")

    err = capsys.readouterr().err
    assert logger_adaptor._sink_id is not None
    assert "Unknown LOG_LEVEL 'CHATTY', using INFO" in err
    assert "shown" in err
    assert "hidden" not in err
