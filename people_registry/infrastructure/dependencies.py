"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from people_registry.config import get_settings
from people_registry.application.services import PersonService
from people_registry.infrastructure.database.session import get_db_session
from people_registry.infrastructure.database.repositories import SQLAlchemyPersonRepository


async def get_person_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[PersonService, None]:
    """Provides a PersonService instance with its repository wired up."""
    repository = SQLAlchemyPersonRepository(session)
    yield PersonService(repository, list_limit=get_settings().people_list_limit)
