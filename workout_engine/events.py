"""Structured event logging."""

import json
import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger("workout_engine.events")


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Log a structured event as a single JSON line."""
    record = {
        "event": event,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    record.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(record, default=str))
