"""Unit tests for the PeopleApiClient HTTP adapter."""

import json

import httpx
import pytest

from people_registry.application.schemas import PersonResponse, PersonWrite
from people_registry.application.services import ClientState, SyncClient
from people_registry.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    TransportError,
)
from people_registry.infrastructure.http import PeopleApiClient


# ── Helpers ──


ANA = {"id": 1, "name": "Ana", "email": None, "age": None, "notes": None}


def _make_mock_transport(
    response_data: object = None,
    status_code: int = 200,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed JSON response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=response_data)

    return httpx.MockTransport(handler)


def _client(transport: httpx.MockTransport, base_url: str = "http://api.test/") -> PeopleApiClient:
    return PeopleApiClient(
        base_url=base_url,
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_list_people_parses_records():
    seen: list[httpx.Request] = []
    client = _client(_make_mock_transport([ANA, {**ANA, "id": 2, "name": "Bob"}], seen=seen))

    people = await client.list_people()

    assert [p.name for p in people] == ["Ana", "Bob"]
    assert str(seen[0].url) == "http://api.test/api/people"
    assert seen[0].method == "GET"


@pytest.mark.asyncio
async def test_create_sends_json_body():
    seen: list[httpx.Request] = []
    client = _client(_make_mock_transport(ANA, status_code=201, seen=seen))

    person = await client.create_person(PersonWrite(name="Ana"))

    assert person.id == 1
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {"name": "Ana", "email": None, "age": None, "notes": None}


@pytest.mark.asyncio
async def test_update_targets_the_record_url():
    seen: list[httpx.Request] = []
    client = _client(_make_mock_transport({**ANA, "age": 31}, seen=seen))

    person = await client.update_person(1, PersonWrite(name="Ana", age=31))

    assert person.age == 31
    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/api/people/1"


@pytest.mark.asyncio
async def test_delete_returns_count():
    client = _client(_make_mock_transport({"ok": True, "deleted": 0}))
    assert await client.delete_person(5) == 0


@pytest.mark.asyncio
async def test_get_404_raises_not_found():
    client = _client(_make_mock_transport({"detail": "not found"}, status_code=404))
    with pytest.raises(EntityNotFoundError) as exc_info:
        await client.get_person(9)
    assert exc_info.value.entity_id == 9


@pytest.mark.asyncio
async def test_400_raises_invalid_input_with_detail():
    client = _client(_make_mock_transport({"detail": "name required"}, status_code=400))
    with pytest.raises(InvalidInputError) as exc_info:
        await client.create_person(PersonWrite(name=""))
    assert exc_info.value.message == "name required"


@pytest.mark.asyncio
async def test_validation_detail_list_is_flattened():
    detail = [{"loc": ["body", "age"], "msg": "Input should be a valid integer"}]
    client = _client(_make_mock_transport({"detail": detail}, status_code=400))
    with pytest.raises(InvalidInputError) as exc_info:
        await client.create_person(PersonWrite(name="Ana"))
    assert exc_info.value.message == "Input should be a valid integer"


@pytest.mark.asyncio
async def test_500_raises_transport_error():
    client = _client(_make_mock_transport({"detail": "db error"}, status_code=500))
    with pytest.raises(TransportError) as exc_info:
        await client.list_people()
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "db error"


@pytest.mark.asyncio
async def test_non_json_response_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>Not the API</html>")

    client = _client(httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc_info:
        await client.list_people()
    assert "non-JSON" in exc_info.value.message


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(httpx.MockTransport(handler))
    with pytest.raises(TransportError) as exc_info:
        await client.list_people()
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_malformed_records_raise_transport_error():
    client = _client(_make_mock_transport([{"id": "x"}]))
    with pytest.raises(TransportError):
        await client.list_people()


@pytest.mark.asyncio
async def test_list_rejects_non_array_body():
    client = _client(_make_mock_transport({"people": []}))
    with pytest.raises(TransportError):
        await client.list_people()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "call",
    [
        lambda c: c.list_people(),
        lambda c: c.get_person(1),
        lambda c: c.delete_person(1),
    ],
    ids=["list", "get", "delete"],
)
async def test_400_without_a_body_is_a_transport_error(call):
    client = _client(_make_mock_transport({"detail": "bad"}, status_code=400))
    with pytest.raises(TransportError) as exc_info:
        await call(client)
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_reload_after_400_on_list_shows_an_empty_cache(view):
    store = _client(_make_mock_transport({"detail": "bad"}, status_code=400))
    stale = PersonResponse(id=1, name="Ana")
    sync = SyncClient(store, view, state=ClientState(cache=[stale]))

    assert await sync.reload() is False

    assert sync.state.cache == []
    assert view.renders == [[]]
    assert view.errors == ["Could not load records: bad"]
