"""Application service (use case) for Person operations — the record store."""

import logging

from people_registry.application.interfaces import PersonRepository
from people_registry.application.schemas.person import PersonWrite
from people_registry.domain.entities import Person, normalize_person_fields
from people_registry.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 1000


class PersonService:
    """Orchestrates person CRUD rules. Depends on the repository port (DI).

    Writes always return the row as re-read by the repository, never the
    caller's input.
    """

    def __init__(self, repository: PersonRepository, list_limit: int = DEFAULT_LIST_LIMIT):
        self._repository = repository
        self._list_limit = min(list_limit, DEFAULT_LIST_LIMIT)

    async def list_people(self) -> list[Person]:
        return await self._repository.get_all(limit=self._list_limit)

    async def get_person(self, person_id: int) -> Person:
        person = await self._repository.get_by_id(person_id)
        if person is None:
            raise EntityNotFoundError("Person", person_id)
        return person

    async def create_person(self, data: PersonWrite) -> Person:
        fields = normalize_person_fields(data.name, data.email, data.age, data.notes)
        person = await self._repository.create(Person(**fields))
        logger.info("Created person %s", person.id)
        return person

    async def update_person(self, person_id: int, data: PersonWrite) -> Person:
        fields = normalize_person_fields(data.name, data.email, data.age, data.notes)
        person = await self.get_person(person_id)

        # Full replace: optionals missing from the request become None
        person.replace_fields(**fields)
        updated = await self._repository.update(person)
        logger.info("Updated person %s", person_id)
        return updated

    async def delete_person(self, person_id: int) -> int:
        deleted = await self._repository.delete(person_id)
        if deleted:
            logger.info("Deleted person %s", person_id)
        else:
            logger.debug("Delete of person %s was a no-op", person_id)
        return deleted
