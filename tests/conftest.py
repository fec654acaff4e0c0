"""Shared fixtures: a throwaway SQLite database wired into the FastAPI app, plus port fakes."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from people_registry.application.interfaces import PeopleStore, SyncView
from people_registry.application.schemas.person import PersonResponse, PersonWrite
from people_registry.domain.exceptions import EntityNotFoundError
from people_registry.infrastructure.database import Base, get_db_session
from people_registry.main import app


@pytest_asyncio.fixture
async def db_engine(tmp_path) -> AsyncIterator[AsyncEngine]:
    """File-backed SQLite engine with the schema created; disposed afterwards."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'people.sqlite'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def api_client(session_factory) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app, with requests using the temp database."""

    async def _session_override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _session_override
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


class RecordingView(SyncView):
    """SyncView fake that records every call for assertions."""

    def __init__(self, confirm_answer: bool = True):
        self.confirm_answer = confirm_answer
        self.renders: list[list[PersonResponse]] = []
        self.errors: list[str] = []
        self.prompts: list[str] = []
        self.form: PersonResponse | None = None
        self.cleared = 0

    def render(self, records: list[PersonResponse]) -> None:
        self.renders.append(list(records))

    def notify_error(self, message: str) -> None:
        self.errors.append(message)

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self.confirm_answer

    def fill_form(self, record: PersonResponse) -> None:
        self.form = record

    def clear_form(self) -> None:
        self.form = None
        self.cleared += 1


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


class FakePeopleStore(PeopleStore):
    """In-memory record store speaking the PeopleStore port.

    Set ``fail_with`` to an exception to make every call raise it.
    """

    def __init__(self):
        self._rows: dict[int, PersonResponse] = {}
        self._next_id = 1
        self.fail_with: Exception | None = None
        self.calls: list[str] = []

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, *names: str) -> list[PersonResponse]:
        return [self._insert(PersonWrite(name=name)) for name in names]

    def _insert(self, payload: PersonWrite) -> PersonResponse:
        record = PersonResponse(id=self._next_id, **payload.model_dump())
        self._rows[record.id] = record
        self._next_id += 1
        return record

    async def list_people(self) -> list[PersonResponse]:
        self._enter("list")
        return sorted(self._rows.values(), key=lambda r: r.id, reverse=True)

    async def get_person(self, person_id: int) -> PersonResponse:
        self._enter("get")
        if person_id not in self._rows:
            raise EntityNotFoundError("Person", person_id)
        return self._rows[person_id]

    async def create_person(self, payload: PersonWrite) -> PersonResponse:
        self._enter("create")
        return self._insert(payload)

    async def update_person(self, person_id: int, payload: PersonWrite) -> PersonResponse:
        self._enter("update")
        if person_id not in self._rows:
            raise EntityNotFoundError("Person", person_id)
        record = PersonResponse(id=person_id, **payload.model_dump())
        self._rows[person_id] = record
        return record

    async def delete_person(self, person_id: int) -> int:
        self._enter("delete")
        return 1 if self._rows.pop(person_id, None) is not None else 0


@pytest.fixture
def store() -> FakePeopleStore:
    return FakePeopleStore()
