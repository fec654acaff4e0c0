from .person_repository import PersonRepository
from .people_store import PeopleStore
from .sync_view import SyncView

__all__ = [
    "PersonRepository",
    "PeopleStore",
    "SyncView",
]
