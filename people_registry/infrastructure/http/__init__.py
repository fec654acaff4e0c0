"""HTTP client infrastructure package."""

from .base_url import api_base_url_from_settings, resolve_api_base_url
from .people_api_client import PeopleApiClient

__all__ = ["PeopleApiClient", "api_base_url_from_settings", "resolve_api_base_url"]
