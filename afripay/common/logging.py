"""Structured JSON logging with checkout context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter


provider_ctx: ContextVar[str] = ContextVar("provider", default="")
client_reference_ctx: ContextVar[str] = ContextVar("client_reference", default="")


class ContextFilter(logging.Filter):
    """Inject provider and correlation reference into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.provider = provider_ctx.get()
        record.client_reference = client_reference_ctx.get()
        return True


def configure_logging(level: str = "INFO") -> None:
    """Configure root logger once per process (entrypoints only)."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(provider)s %(client_reference)s %(message)s"
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    root.addFilter(context_filter)


logger = logging.getLogger("afripay")
