from .person import DeleteResponse, PersonResponse, PersonWrite

__all__ = [
    "DeleteResponse",
    "PersonResponse",
    "PersonWrite",
]
