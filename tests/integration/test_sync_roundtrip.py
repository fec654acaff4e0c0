"""End-to-end: SyncClient → PeopleApiClient → FastAPI → SQLite and back."""

import pytest

from people_registry.application.services import FormInput, SyncClient
from people_registry.infrastructure.http import PeopleApiClient


@pytest.fixture
def sync_client(api_client, view) -> SyncClient:
    store = PeopleApiClient(base_url="http://test", http_client=api_client)
    return SyncClient(store, view)


@pytest.mark.asyncio
async def test_create_edit_delete_through_the_api(sync_client, view):
    created = await sync_client.submit(FormInput(name="  Ana  ", age="30"))
    assert created is not None
    assert created.name == "Ana"
    assert [p.name for p in sync_client.state.cache] == ["Ana"]

    loaded = await sync_client.begin_edit(created.id)
    assert loaded == created
    assert sync_client.state.edit_buffer == created.id

    saved = await sync_client.submit(FormInput(name="Ana B", email="ana@example.com"))
    assert saved.id == created.id
    assert saved.age is None
    assert sync_client.state.edit_buffer is None
    assert sync_client.state.cache == [saved]

    deleted = await sync_client.delete_record(created.id)
    assert deleted == 1
    assert sync_client.state.cache == []
    assert view.errors == []


@pytest.mark.asyncio
async def test_cache_always_matches_the_server_after_mutations(sync_client, api_client):
    await sync_client.submit(FormInput(name="Ana"))
    # A change made behind the client's back shows up on the next reload
    await api_client.post("/api/people", json={"name": "Bob"})
    await sync_client.submit(FormInput(name="Cid"))

    server_view = (await api_client.get("/api/people")).json()
    assert [p.model_dump() for p in sync_client.state.cache] == server_view


@pytest.mark.asyncio
async def test_edit_of_missing_record_reports_not_found(sync_client, view):
    assert await sync_client.begin_edit(404) is None
    assert sync_client.state.edit_buffer is None
    assert view.errors == ["Record 404 not found"]


@pytest.mark.asyncio
async def test_delete_of_missing_record_still_reloads(sync_client, view):
    await sync_client.submit(FormInput(name="Ana"))
    renders_before = len(view.renders)

    assert await sync_client.delete_record(999) == 0
    assert len(view.renders) == renders_before + 1
    assert [p.name for p in sync_client.state.cache] == ["Ana"]
