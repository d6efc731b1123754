"""Startup-time helpers for safe config logging."""

from collections.abc import Iterable

from afripay.common.config import AfripaySettings
from afripay.common.logging import logger


SECRET_MARKERS = ("key", "secret", "token", "client_id")


def redacted_settings(settings: AfripaySettings, fields: Iterable[str] | None = None) -> dict[str, str]:
    """Map env var names to loggable values; secrets are masked, blanks marked unset."""

    snapshot = {}
    for name in fields if fields is not None else type(settings).model_fields:
        value = getattr(settings, name)
        if not value:
            snapshot[name.upper()] = "<unset>"
        elif any(marker in name for marker in SECRET_MARKERS):
            snapshot[name.upper()] = "<redacted>"
        else:
            snapshot[name.upper()] = str(value)
    return snapshot


def log_startup_config(
    entrypoint: str,
    settings: AfripaySettings,
    fields: Iterable[str] | None = None,
) -> None:
    """Log the settings an entrypoint runs with, for quick troubleshooting."""

    logger.info("startup_config=%s", {"entrypoint": entrypoint, **redacted_settings(settings, fields)})
