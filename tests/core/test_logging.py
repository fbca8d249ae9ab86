import logging

import pytest

from bigo_cli.core.logging import (
    BigOLogFormatter,
    configure_logging,
    get_logger,
    log_context,
    log_info,
    logged_operation,
    reset_logger,
)


def test_configure_logging_levels():
    configure_logging(debug=True)
    handler = get_logger().handlers[0]
    assert handler.level == logging.DEBUG

    configure_logging(verbose=True)
    assert get_logger().handlers[0].level == logging.INFO

    configure_logging()
    assert get_logger().handlers[0].level == logging.WARNING
    reset_logger()


def test_log_file_includes_context(tmp_path):
    log_file = tmp_path / "bigo.log"
    configure_logging(log_file=str(log_file))

    with log_context(source="sort.py"):
        log_info("classified", function="merge")
    reset_logger()

    text = log_file.read_text()
    assert "[source=sort.py, function=merge]" in text
    assert "classified" in text


def test_formatter_without_context():
    record = logging.LogRecord("bigo_cli", logging.INFO, __file__, 1, "plain", None, None)
    assert BigOLogFormatter("%(message)s").format(record) == "plain"


def test_log_context_restores_outer_values(tmp_path):
    log_file = tmp_path / "bigo.log"
    configure_logging(log_file=str(log_file))

    with log_context(source="outer.py"):
        with log_context(source="inner.py"):
            log_info("first")
        log_info("second")
    reset_logger()

    lines = log_file.read_text().splitlines()
    assert lines[0].startswith("[source=inner.py]")
    assert lines[1].startswith("[source=outer.py]")


def test_logged_operation_tags_source_and_reraises(tmp_path):
    log_file = tmp_path / "bigo.log"
    configure_logging(log_file=str(log_file))

    class Job:
        source_name = "job.py"

        @logged_operation("run")
        def run(self):
            raise ValueError("boom")

    with pytest.raises(ValueError):
        Job().run()
    reset_logger()

    text = log_file.read_text()
    assert "[source=job.py] " in text
    assert "run: started" in text
    assert "run: failed after" in text
    assert "boom" in text
