from .person_service import PersonService
from .sync_client import ClientState, FormInput, SyncClient, filter_records

__all__ = [
    "ClientState",
    "FormInput",
    "PersonService",
    "SyncClient",
    "filter_records",
]
