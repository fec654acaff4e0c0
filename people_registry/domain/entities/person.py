"""Domain entity — a person row owned by the record store."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from people_registry.domain.exceptions import InvalidInputError

# SQLite INTEGER is a signed 64-bit value
AGE_MIN = -(2**63)
AGE_MAX = 2**63 - 1


def normalize_person_fields(
    name: Any,
    email: str | None = None,
    age: int | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """Apply the store's field rules and return the canonical field dict.

    Rules, per field:

    * ``name``: required; must be a string with at least one non-whitespace
      character. Stored exactly as given.
    * ``email``: ``None`` and ``""`` both become ``None``.
    * ``age``: ``None`` stays ``None``; any integer (``0`` included) that fits
      a 64-bit column is kept.
    * ``notes``: ``None`` and ``""`` both become ``None``.

    Raises:
        InvalidInputError: If ``name`` is missing or blank, or ``age`` is
            out of range.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidInputError("name required", field="name")
    if age is not None and not AGE_MIN <= age <= AGE_MAX:
        raise InvalidInputError("age out of range", field="age")
    return {
        "name": name,
        "email": email or None,
        "age": age,
        "notes": notes or None,
    }


@dataclass
class Person:
    """Core domain entity for a person record.

    ``id`` and ``created_at`` are assigned by the store; every other field
    is replaced wholesale on update.
    """

    name: str
    email: str | None = None
    age: int | None = None
    notes: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_fields(
        self,
        *,
        name: str,
        email: str | None,
        age: int | None,
        notes: str | None,
    ) -> None:
        """Overwrite every mutable field; omitted optionals arrive as None."""
        self.name = name
        self.email = email
        self.age = age
        self.notes = notes
