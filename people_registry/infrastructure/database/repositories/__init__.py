from .person_repository import SQLAlchemyPersonRepository

__all__ = [
    "SQLAlchemyPersonRepository",
]
