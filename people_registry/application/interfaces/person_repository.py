"""Abstract repository interface (port) for Person persistence."""

from abc import ABC, abstractmethod

from people_registry.domain.entities import Person


class PersonRepository(ABC):
    """Port for person persistence, implemented in the infrastructure layer.

    Implementations signal engine failures with ``StorageError``.
    """

    @abstractmethod
    async def get_by_id(self, person_id: int) -> Person | None:
        """Retrieve a single person by id."""
        ...

    @abstractmethod
    async def get_all(self, *, limit: int) -> list[Person]:
        """Retrieve up to ``limit`` people, newest id first."""
        ...

    @abstractmethod
    async def create(self, person: Person) -> Person:
        """Insert a new row and return it as re-read from the table."""
        ...

    @abstractmethod
    async def update(self, person: Person) -> Person:
        """Replace the mutable fields of an existing row and return it re-read."""
        ...

    @abstractmethod
    async def delete(self, person_id: int) -> int:
        """Delete a row. Returns the number of rows removed (0 or 1)."""
        ...
