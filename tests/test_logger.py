import io
import logging

from primkit.logger.logger import get_logger, logger, setup_logger


def test_project_logger_configured_once():
    assert logger.name == "primkit"
    assert len(logger.handlers) == 1
    assert logger.propagate is False

    again = setup_logger()
    assert again is logger
    assert len(again.handlers) == 1


def test_get_logger_returns_children():
    assert get_logger("primkit.functional.text").name == "primkit.functional.text"
    assert get_logger("primkit").name == "primkit"
    assert get_logger("custom").name == "primkit.custom"


def test_setup_logger_level():
    custom = setup_logger("primkit-test-level", level="debug")
    assert custom.level == logging.DEBUG


def test_setup_logger_stream_and_format():
    buffer = io.StringIO()
    custom = setup_logger(
        "primkit-test-stream",
        level="info",
        format_string="%(levelname)s|%(message)s",
        stream=buffer,
    )

    custom.debug("hidden")
    custom.info("shown")
    assert buffer.getvalue() == "INFO|shown\n"


def test_setup_logger_default_format():
    buffer = io.StringIO()
    custom = setup_logger("primkit-test-default-format", stream=buffer, level="info")
    custom.warning("careful")
    assert "primkit-test-default-format - WARNING - careful" in buffer.getvalue()
