import json
import logging

import numpy as np
import pytest

from strided_blas.level1.vector_copy import dcopy
from strided_blas.logging.logging import (
    PACKAGED_CONFIG,
    RotatingFileHandlerWithDir,
    StridedBlasJSONFormatter,
    setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "strided_blas.test", logging.DEBUG, __file__, 1, "n=%d", (3,), None
    )
    record.__dict__.update(extra)
    return record


def _file_config(log_file) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "strided_blas.logging.logging.StridedBlasJSONFormatter",
                "fmt_keys": {"level": "levelname", "logger": "name"},
            }
        },
        "handlers": {
            "file": {
                "()": "strided_blas.logging.logging.RotatingFileHandlerWithDir",
                "formatter": "json",
                "level": "DEBUG",
                "filename": str(log_file),
            }
        },
        "loggers": {
            "strided_blas": {"level": "DEBUG", "handlers": ["file"], "propagate": False}
        },
    }


@pytest.fixture
def restore_strided_blas_logger():
    logger = logging.getLogger("strided_blas")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]


def _read_lines(logger, log_file) -> list:
    for handler in logger.handlers:
        handler.flush()
    return [json.loads(line) for line in log_file.read_text().splitlines()]


def test_json_formatter_maps_keys():
    formatter = StridedBlasJSONFormatter(fmt_keys={"level": "levelname", "logger": "name"})
    payload = json.loads(formatter.format(_record()))
    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "strided_blas.test"
    assert payload["message"] == "n=3"
    assert "timestamp" in payload
    assert "stride" not in payload


def test_json_formatter_keeps_stride_context():
    formatter = StridedBlasJSONFormatter()
    stride = {"view": "y", "n": 4, "inc": -2, "length": 3, "required": 7}
    payload = json.loads(formatter.format(_record(stride=stride)))
    assert payload["stride"] == stride


def test_rotating_handler_creates_directory(tmp_path):
    target = tmp_path / "nested" / "logs" / "out.jsonl"
    handler = RotatingFileHandlerWithDir(filename=str(target), maxBytes=100, backupCount=1)
    try:
        assert target.parent.is_dir()
    finally:
        handler.close()


def test_setup_logging_defaults_to_packaged_config(tmp_path, monkeypatch, restore_strided_blas_logger):
    monkeypatch.chdir(tmp_path)
    assert setup_logging() == PACKAGED_CONFIG
    assert (tmp_path / "logs").is_dir()


def test_setup_logging_prefers_user_config(tmp_path, monkeypatch, restore_strided_blas_logger):
    log_file = tmp_path / "logs" / "user.jsonl"
    (tmp_path / "logging_config.json").write_text(json.dumps(_file_config(log_file)))
    monkeypatch.chdir(tmp_path)

    assert setup_logging().name == "logging_config.json"
    assert not dcopy(3, np.zeros(1), 1, np.zeros(3), 1)

    lines = _read_lines(restore_strided_blas_logger, log_file)
    failures = [line for line in lines if "stride" in line]
    assert len(failures) == 1
    assert failures[0]["stride"] == {
        "view": "x",
        "n": 3,
        "inc": 1,
        "length": 1,
        "required": 3,
    }
    assert all(line["logger"].startswith("strided_blas") for line in lines)


def test_setup_logging_explicit_file_wins(tmp_path, monkeypatch, restore_strided_blas_logger):
    log_file = tmp_path / "explicit.jsonl"
    explicit = tmp_path / "explicit.json"
    explicit.write_text(json.dumps(_file_config(log_file)))
    (tmp_path / "logging_config.json").write_text("not json")
    monkeypatch.chdir(tmp_path)

    assert setup_logging(explicit) == explicit
    logging.getLogger("strided_blas.test").debug("hello")
    lines = _read_lines(restore_strided_blas_logger, log_file)
    assert lines[-1]["message"] == "hello"
