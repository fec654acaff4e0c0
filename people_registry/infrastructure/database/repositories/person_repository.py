"""Concrete repository implementation for Person backed by SQLAlchemy."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.application.interfaces import PersonRepository
from people_registry.domain.entities import Person
from people_registry.domain.exceptions import EntityNotFoundError, StorageError
from people_registry.infrastructure.database.models import PersonModel

logger = logging.getLogger(__name__)


@contextmanager
def _storage_guard(operation: str, **context: object) -> Iterator[None]:
    """Log an engine failure with its operation context and re-raise it as StorageError."""
    try:
        yield
    except SQLAlchemyError as exc:
        details = " ".join(f"{k}={v}" for k, v in context.items())
        logger.exception("Storage fault during %s %s", operation, details)
        raise StorageError(operation) from exc


class SQLAlchemyPersonRepository(PersonRepository):
    """Implements the PersonRepository port using SQLAlchemy async sessions.

    Every write flushes and then refreshes the row, so callers see what the
    table actually holds (defaults and coercions included).
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PersonModel) -> Person:
        """Map ORM model → domain entity."""
        return Person(
            id=model.id,
            name=model.name,
            email=model.email,
            age=model.age,
            notes=model.notes,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Person) -> PersonModel:
        """Map domain entity → ORM model (for creation; id is left to the table)."""
        return PersonModel(
            name=entity.name,
            email=entity.email,
            age=entity.age,
            notes=entity.notes,
            created_at=entity.created_at,
        )

    async def get_by_id(self, person_id: int) -> Person | None:
        with _storage_guard("get", person_id=person_id):
            result = await self._session.get(PersonModel, person_id)
        return self._to_entity(result) if result else None

    async def get_all(self, *, limit: int) -> list[Person]:
        stmt = select(PersonModel).order_by(PersonModel.id.desc()).limit(limit)
        with _storage_guard("list", limit=limit):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(row) for row in rows]

    async def create(self, person: Person) -> Person:
        model = self._to_model(person)
        with _storage_guard("create"):
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, person: Person) -> Person:
        with _storage_guard("update", person_id=person.id):
            model = await self._session.get(PersonModel, person.id)
            if model is None:
                raise EntityNotFoundError("Person", person.id)
            model.name = person.name
            model.email = person.email
            model.age = person.age
            model.notes = person.notes
            await self._session.flush()
            await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, person_id: int) -> int:
        stmt = delete(PersonModel).where(PersonModel.id == person_id)
        with _storage_guard("delete", person_id=person_id):
            result = await self._session.execute(stmt)
            await self._session.flush()
        return result.rowcount or 0
