"""
Logging configuration with optional JSON output.

Logs always go to stderr: stdout carries the MCP stdio protocol.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
            "service": "ticktock-mcp",
        }

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def configure_logging(level: Optional[int] = None) -> None:
    """
    Configure root logging.

    Set LOG_JSON=true in env to enable JSON logging and LOG_LEVEL to change
    the level (default INFO).
    """
    use_json = os.getenv("LOG_JSON", "").lower() in ("true", "1", "yes")
    if level is None:
        level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)

    if use_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
