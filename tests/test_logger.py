import json

from userservice.shared.logger import StructuredLogger


def read_records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


def test_file_sink_writes_json(tmp_path):
    log_file = tmp_path / "service.log"
    logger = StructuredLogger(name="test_file_sink", log_file=str(log_file))

    logger.info("User created", user_id=7)

    [record] = read_records(log_file)
    assert record["event"] == "User created"
    assert record["user_id"] == 7
    assert record["level"] == "info"
    assert record["logger"] == "test_file_sink"
    assert record["function"] == "test_file_sink_writes_json"


def test_exception_includes_traceback(tmp_path):
    log_file = tmp_path / "errors.log"
    logger = StructuredLogger(name="test_exception", log_file=str(log_file))

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("Unexpected failure")

    [record] = read_records(log_file)
    assert record["level"] == "error"
    assert "RuntimeError: boom" in record["exception"]


def test_loggers_are_cached_by_name(tmp_path):
    first = StructuredLogger(name="test_cached", log_file=str(tmp_path / "a.log"))
    second = StructuredLogger(name="test_cached", log_file=str(tmp_path / "b.log"))

    assert second.console_logger is first.console_logger
    assert second.file_logger is first.file_logger


def test_console_only_logger(tmp_path):
    logger = StructuredLogger(name="test_console_only", log_file="")
    assert logger.file_logger is None
    logger.warning("No file sink", reason="disabled")
    assert list(tmp_path.iterdir()) == []


def test_context_may_use_any_field_name(tmp_path):
    log_file = tmp_path / "fields.log"
    logger = StructuredLogger(name="test_field_names", log_file=str(log_file))

    logger.warning("Handled error", method="GET", level_method="x", path="/api/users/1")

    [record] = read_records(log_file)
    assert record["method"] == "GET"
    assert record["level_method"] == "x"
    assert record["level"] == "warning"


def test_console_line_has_level_tag_fields_and_caller(capsys):
    logger = StructuredLogger(name="test_console_format", log_file="")

    logger.warning("Slow request", duration_ms=12.5)

    line = capsys.readouterr().err.strip()
    assert "[test_console_format]" in line
    assert "\033[1;33mWARNING\033[0m: Slow request" in line
    assert "duration_ms=12.5" in line
    assert "test_console_line_has_level_tag_fields_and_caller" in line


def test_console_exception_appends_traceback(capsys):
    logger = StructuredLogger(name="test_console_exception", log_file="")

    try:
        raise ValueError("bad value")
    except ValueError:
        logger.exception("Failed")

    err = capsys.readouterr().err
    assert "ERROR" in err
    assert "ValueError: bad value" in err
