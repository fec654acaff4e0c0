"""Base URL resolution for the sync client.

One strategy for every deployment: an explicit URL always wins, a client
running on a local host talks to the local server, and anything else talks
to the public deployment.
"""

from people_registry.config import Settings

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})


def resolve_api_base_url(
    explicit: str | None,
    host: str | None,
    local_base: str,
    public_base: str | None,
) -> str:
    """Pick the API base URL; the result never ends with a slash."""
    if explicit and explicit.strip():
        return explicit.strip().rstrip("/")

    normalized_host = (host or "").strip().lower().strip("[]")
    if not public_base or not public_base.strip() or normalized_host in LOCAL_HOSTS or not normalized_host:
        return local_base.strip().rstrip("/")
    return public_base.strip().rstrip("/")


def api_base_url_from_settings(settings: Settings) -> str:
    return resolve_api_base_url(
        settings.api_base_url,
        settings.client_host,
        settings.api_local_base_url,
        settings.api_public_base_url,
    )
