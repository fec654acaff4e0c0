"""Log levels for the registry server and console client.

Each category in Settings (sql, http, uvicorn, requests, sync) drives the
level of a fixed set of loggers. Both entry points call setup_logging():
the FastAPI lifespan in main.py and the Typer commands in cli.py.
"""

import logging
import sys

from people_registry.config import get_settings


# Settings field -> loggers whose level it sets
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
        "people_registry.infrastructure.http",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_requests": [
        "people_registry.presentation.middleware",
    ],
    "log_level_sync": [
        "people_registry.application.services.sync_client",
    ],
}


def setup_logging() -> None:
    """Apply the root and per-category levels; safe to call more than once."""
    settings = get_settings()
    root_level = _parse_level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(root_level)

    # uvicorn installs its own handlers; tests and the CLI do not
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    for category, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, category, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s, sql=%s, http=%s, uvicorn=%s, requests=%s, sync=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_requests,
        settings.log_level_sync,
    )


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
