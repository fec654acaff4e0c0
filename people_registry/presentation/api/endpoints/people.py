"""Person CRUD endpoints — the record store's HTTP surface."""

from fastapi import APIRouter, Depends, HTTPException, status

from people_registry.application.schemas.person import (
    DeleteResponse,
    PersonResponse,
    PersonWrite,
)
from people_registry.application.services import PersonService
from people_registry.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    StorageError,
)
from people_registry.infrastructure.dependencies import get_person_service

router = APIRouter(prefix="/people", tags=["People"])


def _storage_fault() -> HTTPException:
    """Generic 500; the repository has already logged the underlying fault."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="db error"
    )


@router.get("", response_model=list[PersonResponse])
async def list_people(
    service: PersonService = Depends(get_person_service),
) -> list[PersonResponse]:
    """Retrieve every person, newest id first, capped at 1000 rows."""
    try:
        people = await service.list_people()
    except StorageError:
        raise _storage_fault()
    return [PersonResponse.model_validate(p, from_attributes=True) for p in people]


@router.get("/{person_id}", response_model=PersonResponse)
async def get_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Retrieve a single person by id."""
    try:
        person = await service.get_person(person_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError:
        raise _storage_fault()
    return PersonResponse.model_validate(person, from_attributes=True)


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
async def create_person(
    data: PersonWrite,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Create a new person."""
    try:
        person = await service.create_person(data)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StorageError:
        raise _storage_fault()
    return PersonResponse.model_validate(person, from_attributes=True)


@router.put("/{person_id}", response_model=PersonResponse)
async def update_person(
    person_id: int,
    data: PersonWrite,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    """Replace every field of an existing person."""
    try:
        person = await service.update_person(person_id, data)
    except InvalidInputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageError:
        raise _storage_fault()
    return PersonResponse.model_validate(person, from_attributes=True)


@router.delete("/{person_id}", response_model=DeleteResponse)
async def delete_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> DeleteResponse:
    """Delete a person; deleting a missing id succeeds with ``deleted: 0``."""
    try:
        deleted = await service.delete_person(person_id)
    except StorageError:
        raise _storage_fault()
    return DeleteResponse(ok=True, deleted=deleted)
