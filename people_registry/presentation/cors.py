"""CORS policy — the single place allowed origins become middleware options."""

from typing import Any

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def cors_middleware_options(origins: list[str]) -> dict[str, Any]:
    """Build CORSMiddleware keyword arguments from the configured origins.

    Blank entries and trailing slashes are dropped. Browsers refuse
    credentials alongside a wildcard origin, so ``"*"`` turns them off.
    """
    cleaned = sorted({o.strip().rstrip("/") for o in origins if o and o.strip()})
    wildcard = "*" in cleaned
    return {
        "allow_origins": ["*"] if wildcard else cleaned,
        "allow_credentials": not wildcard,
        "allow_methods": ALLOWED_METHODS,
        "allow_headers": ALLOWED_HEADERS,
    }
