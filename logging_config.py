"""
Logging setup for the data-access layer.

Modules log through ``logging.getLogger(__name__)``; applications call
``configure_logging()`` once at startup to get JSON lines on stderr.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_CONFIGURED = False

_RESERVED = {
     "name",
     "msg",
     "args",
     "levelname",
     "levelno",
     "pathname",
     "filename",
     "module",
     "exc_info",
     "exc_text",
     "stack_info",
     "lineno",
     "funcName",
     "created",
     "msecs",
     "relativeCreated",
     "thread",
     "threadName",
     "processName",
     "process",
     "taskName",
}


def _safe_value(value: Any) -> Any:
     try:
          json.dumps(value)
          return value
     except (TypeError, ValueError):
          return str(value)


class JsonFormatter(logging.Formatter):
     def format(self, record: logging.LogRecord) -> str:
          payload: Dict[str, Any] = {
               "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
               "level": record.levelname,
               "logger": record.name,
               "message": record.getMessage(),
          }
          # Anything passed through `extra=` ends up on the record
          for key, value in record.__dict__.items():
               if key in _RESERVED or key.startswith("_"):
                    continue
               payload[key] = _safe_value(value)
          if record.exc_info:
               payload["exc_info"] = self.formatException(record.exc_info)
          return json.dumps(payload, ensure_ascii=True)


def configure_logging(level: Optional[str] = None) -> None:
     """Attach a JSON stream handler to the root logger (idempotent)."""
     global _CONFIGURED
     if _CONFIGURED:
          return
     if level is None:
          from config import get_config
          level = get_config().log_level
     root = logging.getLogger()
     if not any(isinstance(h.formatter, JsonFormatter) for h in root.handlers):
          if root.handlers:
               logger.debug("Root logger already has %d handler(s); adding JSON handler alongside", len(root.handlers))
          handler = logging.StreamHandler()
          handler.setFormatter(JsonFormatter())
          root.addHandler(handler)
     root.setLevel(getattr(logging, level.upper(), logging.INFO))
     _CONFIGURED = True
