"""Package logger with bound context fields.

Usage:
    from poolmetrics.core.logging import logger

    pool_logger = logger.with_context(pool_name="orders-db")
    pool_logger.info("Registered connection pool metrics")
"""

import logging
from typing import Any

from poolmetrics.core.config import settings


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter that prefixes every message with its bound fields."""

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None) -> None:
        super().__init__(logger, context or {})

    def with_context(self, **fields: Any) -> "ContextualLogger":
        """Return a child logger carrying ``fields`` in addition to the current ones."""
        return ContextualLogger(self.logger, {**self.extra, **fields})

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        if not self.extra:
            return msg, kwargs
        bound = " ".join(f"{k}={v}" for k, v in self.extra.items())
        return f"[{bound}] {msg}", kwargs


def _build_logger() -> ContextualLogger:
    base = logging.getLogger("poolmetrics")
    base.setLevel(settings.LOG_LEVEL.upper())
    base.addHandler(logging.NullHandler())
    return ContextualLogger(base)


logger = _build_logger()
