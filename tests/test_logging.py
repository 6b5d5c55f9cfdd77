import logging

import pytest

from duorank.core.logging import get_logger, log_timing, setup_logging


def test_get_logger_namespaces():
    assert get_logger("engine").name == "duorank.engine"
    assert get_logger("duorank.ingest.results").name == "duorank.ingest.results"
    assert get_logger("duorank").name == "duorank"


@pytest.mark.parametrize("style", ["simple", "detailed", "json", "unknown"])
def test_setup_logging(style, tmp_path):
    log_file = tmp_path / "run.log"
    logger = setup_logging(level="debug", log_file=log_file, format_style=style)
    assert logger.name == "duorank"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert logger.propagate is False

    get_logger("engine").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text()
    for handler in logger.handlers:
        handler.close()


def test_log_timing(caplog):
    caplog.set_level(logging.INFO)
    logger = get_logger("timing")
    with log_timing(logger, "ranking"):
        pass
    assert caplog.messages[0] == "Starting ranking"
    assert caplog.messages[1].startswith("Completed ranking in ")


def test_log_timing_reraises(caplog):
    caplog.set_level(logging.INFO)
    logger = get_logger("timing")
    with pytest.raises(KeyError):
        with log_timing(logger, "ranking"):
            raise KeyError("boom")
    assert any(m.startswith("Failed ranking after") for m in caplog.messages)
