"""
Logging configuration with optional JSON output.
The library only logs through module loggers; call configure_logging()
from an application or script to get output.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from clockify_api.config import Settings

EXTRA_FIELDS = ("method", "url", "status", "duration_ms")


class JSONFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }

        # Request extras set by the transport
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_obj[key] = getattr(record, key)

        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(log_obj)


def configure_logging(level: int = logging.INFO, use_json: Optional[bool] = None) -> None:
    """
    Configure logging with optional JSON format.
    When use_json is not given, LOG_JSON from the environment (or .env) decides.
    """
    if use_json is None:
        use_json = Settings().LOG_JSON

    handler = logging.StreamHandler(sys.stdout)

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
