from .person import PersonModel

__all__ = [
    "PersonModel",
]
