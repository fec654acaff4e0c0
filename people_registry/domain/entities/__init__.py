from .person import Person, normalize_person_fields

__all__ = [
    "Person",
    "normalize_person_fields",
]
