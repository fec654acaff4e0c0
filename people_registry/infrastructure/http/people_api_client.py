"""People API client — implements the PeopleStore interface over HTTP.

Talks JSON to the ``/api/people`` resource using httpx. Transport failures,
non-JSON bodies, malformed payloads and unexpected statuses all surface as
``TransportError``. A 404 on a single record maps to not-found and a 400
on a create or update body maps to invalid input; any other 400 is a
transport fault.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from people_registry.application.interfaces.people_store import PeopleStore
from people_registry.application.schemas.person import PersonResponse, PersonWrite
from people_registry.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    TransportError,
)

logger = logging.getLogger(__name__)

PEOPLE_PATH = "/api/people"


class PeopleApiClient(PeopleStore):
    """Infrastructure adapter that connects to the people REST API.

    An injected ``http_client`` is reused and left open; otherwise a
    short-lived client is created per call.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    @property
    def resource_url(self) -> str:
        return f"{self._base_url}{PEOPLE_PATH}"

    def _get_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        payload: PersonWrite | None = None,
        person_id: int | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body of a 2xx response."""
        client = await self._get_client()
        should_close = self._http_client is None
        body = payload.model_dump() if payload is not None else None

        try:
            response = await client.request(
                method, url, headers=self._get_headers(), json=body
            )
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"Could not reach {self._base_url}: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            snippet = response.text[:120]
            raise TransportError(
                f"Unexpected non-JSON response ({snippet})",
                status_code=response.status_code,
            )

        if response.status_code == 404 and person_id is not None:
            raise EntityNotFoundError("Person", person_id)
        if response.status_code == 400 and payload is not None:
            raise InvalidInputError(self._error_message(response))
        if not response.is_success:
            raise TransportError(
                self._error_message(response), status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull a readable message out of a FastAPI error body."""
        try:
            data = response.json()
        except ValueError:
            return response.text
        detail = data.get("detail") if isinstance(data, dict) else None
        if isinstance(detail, list):
            return "; ".join(str(item.get("msg", item)) if isinstance(item, dict) else str(item) for item in detail)
        if detail:
            return str(detail)
        return response.text

    @staticmethod
    def _parse_person(data: Any) -> PersonResponse:
        try:
            return PersonResponse.model_validate(data)
        except ValidationError as exc:
            raise TransportError(f"Malformed person record: {exc.error_count()} error(s)") from exc

    async def list_people(self) -> list[PersonResponse]:
        data = await self._request("GET", self.resource_url)
        if not isinstance(data, list):
            raise TransportError("Expected a JSON array of people")
        return [self._parse_person(item) for item in data]

    async def get_person(self, person_id: int) -> PersonResponse:
        data = await self._request(
            "GET", f"{self.resource_url}/{person_id}", person_id=person_id
        )
        return self._parse_person(data)

    async def create_person(self, payload: PersonWrite) -> PersonResponse:
        data = await self._request("POST", self.resource_url, payload=payload)
        return self._parse_person(data)

    async def update_person(self, person_id: int, payload: PersonWrite) -> PersonResponse:
        data = await self._request(
            "PUT", f"{self.resource_url}/{person_id}", payload=payload, person_id=person_id
        )
        return self._parse_person(data)

    async def delete_person(self, person_id: int) -> int:
        data = await self._request("DELETE", f"{self.resource_url}/{person_id}")
        deleted = data.get("deleted") if isinstance(data, dict) else None
        if not isinstance(deleted, int):
            raise TransportError("Delete response is missing the 'deleted' count")
        return deleted
