import json
import logging
from logging.handlers import QueueHandler
from pathlib import Path

import battleship.game.infra.logging as logging_module
from battleship.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_level_and_format(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BATTLESHIP_LOG_DIR", raising=False)
    monkeypatch.delenv("BATTLESHIP_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    config = build_logging_config()

    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path / "appdata" / "logs"))


def test_configure_logging_sets_root_level_and_handlers() -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    configure_logging(LoggingConfig(level_name="INFO", console_format="json"))
    assert root.level == logging.INFO


def test_run_log_is_written_as_json_lines(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BATTLESHIP_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    configure_logging(build_logging_config())

    logging.getLogger("test.logging.file").info("hello")
    shutdown_logging()

    files = list((tmp_path / "appdata" / "logs").glob("battleship_run_*.jsonl"))
    assert files
    lines = files[0].read_text(encoding="utf-8").splitlines()
    assert any(json.loads(line)["msg"] == "hello" for line in lines)


def _queue_handlers() -> list[QueueHandler]:
    return [handler for handler in logging.getLogger().handlers if isinstance(handler, QueueHandler)]


def test_shutdown_logging_detaches_queue_and_closes_file(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BATTLESHIP_LOG_DIR", raising=False)
    configure_logging(build_logging_config())
    assert len(_queue_handlers()) == 1
    listener = logging_module._QUEUE_LISTENER
    assert listener is not None
    file_handler = next(h for h in listener.handlers if isinstance(h, logging.FileHandler))

    logging.getLogger("test.logging.shutdown").warning("bye")
    shutdown_logging()

    assert logging_module._QUEUE_LISTENER is None
    assert _queue_handlers() == []
    assert file_handler.stream is None
    assert "bye" in Path(file_handler.baseFilename).read_text(encoding="utf-8")


def test_reconfigure_closes_previous_file_handler(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLESHIP_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("BATTLESHIP_LOG_DIR", raising=False)
    configure_logging(build_logging_config())
    listener = logging_module._QUEUE_LISTENER
    assert listener is not None
    logging.getLogger("test.logging.reconfigure").warning("first")

    configure_logging(LoggingConfig(level_name="INFO", console_format="text"))

    assert all(handler.stream is None for handler in listener.handlers if isinstance(handler, logging.FileHandler))
    assert _queue_handlers() == []
    assert logging_module._QUEUE_LISTENER is None
