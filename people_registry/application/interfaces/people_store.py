"""Abstract record-store interface — port the sync client talks through.

The HTTP adapter lives in the infrastructure layer; tests substitute an
in-memory fake.
"""

from abc import ABC, abstractmethod

from people_registry.application.schemas.person import PersonResponse, PersonWrite


class PeopleStore(ABC):
    """Port: what the sync client needs from the record store."""

    @abstractmethod
    async def list_people(self) -> list[PersonResponse]:
        """Fetch every record the store returns, newest id first.

        Raises:
            TransportError: If the call fails or the response is unusable.
        """
        ...

    @abstractmethod
    async def get_person(self, person_id: int) -> PersonResponse:
        """Fetch one record.

        Raises:
            EntityNotFoundError: If the store has no record with that id.
            TransportError: If the call fails or the response is unusable.
        """
        ...

    @abstractmethod
    async def create_person(self, payload: PersonWrite) -> PersonResponse:
        """Create a record and return the store's canonical copy.

        Raises:
            InvalidInputError: If the store rejects the payload.
            TransportError: If the call fails or the response is unusable.
        """
        ...

    @abstractmethod
    async def update_person(self, person_id: int, payload: PersonWrite) -> PersonResponse:
        """Replace a record and return the store's canonical copy.

        Raises:
            EntityNotFoundError: If the store has no record with that id.
            InvalidInputError: If the store rejects the payload.
            TransportError: If the call fails or the response is unusable.
        """
        ...

    @abstractmethod
    async def delete_person(self, person_id: int) -> int:
        """Delete a record; returns how many rows were removed (0 or 1).

        Raises:
            TransportError: If the call fails or the response is unusable.
        """
        ...
