import json
import logging

import logging_config
from logging_config import JsonFormatter, configure_logging


def test_json_formatter_includes_extras():
    record = logging.makeLogRecord(
        {
            "name": "services.reservation_service",
            "levelname": "ERROR",
            "levelno": logging.ERROR,
            "msg": "%s failed",
            "args": ("delete_reservation",),
            "operation": "delete_reservation",
            "params": [object()],
        }
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "delete_reservation failed"
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "services.reservation_service"
    assert payload["operation"] == "delete_reservation"
    assert isinstance(payload["params"], str)


def test_configure_logging_sets_level_once(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    configure_logging("WARNING")
    assert root.level == logging.WARNING
    configure_logging("DEBUG")
    assert root.level == logging.WARNING


def json_handlers(logger):
    return [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]


def test_json_handler_added_next_to_existing_handlers(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(root, "handlers", [existing])

    configure_logging("INFO")

    assert existing in root.handlers
    assert len(json_handlers(root)) == 1


def test_json_handler_is_not_duplicated(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(root, "handlers", [])

    configure_logging("INFO")
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    configure_logging("INFO")

    assert len(json_handlers(root)) == 1
