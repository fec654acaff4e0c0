from .base import Base
from .session import async_session_factory, engine, ensure_sqlite_directory, get_db_session
from .models import PersonModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "ensure_sqlite_directory",
    "get_db_session",
    "PersonModel",
]
