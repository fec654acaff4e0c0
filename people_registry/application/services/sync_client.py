"""Sync client — keeps a disposable local mirror of the record store.

The mirror (``ClientState.cache``) is only ever replaced wholesale by a
fresh ``list`` fetch; mutations go to the store and are followed by a
reload. The store and the UI are injected ports, so the same client runs
against the HTTP API, a console, or in-memory fakes.
"""

import csv
import io
import logging
from dataclasses import dataclass, field

from people_registry.application.interfaces import PeopleStore, SyncView
from people_registry.application.schemas.person import PersonResponse, PersonWrite
from people_registry.domain.exceptions import (
    EntityNotFoundError,
    InvalidInputError,
    TransportError,
)

logger = logging.getLogger(__name__)

CSV_HEADER = ("id", "name", "email", "age", "notes")


@dataclass
class FormInput:
    """Raw values as typed into the edit form."""

    name: str = ""
    email: str | None = ""
    age: str | int | None = ""
    notes: str | None = ""

    @classmethod
    def from_record(cls, record: PersonResponse) -> "FormInput":
        return cls(
            name=record.name,
            email=record.email or "",
            age="" if record.age is None else str(record.age),
            notes=record.notes or "",
        )

    def to_payload(self) -> PersonWrite:
        """Validate and coerce the form into a request body.

        This is a fast-fail convenience; the store re-validates everything.

        Raises:
            InvalidInputError: If the name is blank or the age is not a
                whole number.
        """
        name = (self.name or "").strip()
        if not name:
            raise InvalidInputError("Name is required", field="name")
        return PersonWrite(
            name=name,
            email=_blank_to_none(self.email),
            age=_coerce_age(self.age),
            notes=_blank_to_none(self.notes),
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _coerce_age(value: str | int | None) -> int | None:
    if value is None or isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise InvalidInputError(f"Age must be a whole number, got '{text}'", field="age") from None


def filter_records(records: list[PersonResponse], query: str) -> list[PersonResponse]:
    """Case-insensitive substring match on ``name``; a blank query keeps everything."""
    needle = query.strip().lower()
    if not needle:
        return list(records)
    return [r for r in records if needle in (r.name or "").lower()]


@dataclass
class ClientState:
    """Everything the sync client remembers between operations."""

    cache: list[PersonResponse] = field(default_factory=list)
    edit_buffer: int | None = None


class SyncClient:
    """Drives the store and the view; owns the cache and the edit buffer."""

    def __init__(
        self,
        store: PeopleStore,
        view: SyncView,
        state: ClientState | None = None,
    ):
        self._store = store
        self._view = view
        self.state = state if state is not None else ClientState()

    async def reload(self) -> bool:
        """Replace the cache with a fresh list; on failure show it empty."""
        try:
            records = await self._store.list_people()
        except TransportError as exc:
            logger.error("Reload failed: %s", exc)
            self.state.cache = []
            self._view.render([])
            self._view.notify_error(f"Could not load records: {exc.message}")
            return False

        self.state.cache = list(records)
        self._view.render(self.state.cache)
        return True

    async def submit(self, form: FormInput) -> PersonResponse | None:
        """Create or update depending on the edit buffer, then reload.

        On any failure the form is left as-is so the user can retry.
        """
        try:
            payload = form.to_payload()
        except InvalidInputError as exc:
            self._view.notify_error(exc.message)
            return None

        editing = self.state.edit_buffer
        try:
            if editing is not None:
                record = await self._store.update_person(editing, payload)
            else:
                record = await self._store.create_person(payload)
        except (TransportError, InvalidInputError, EntityNotFoundError) as exc:
            logger.error("Save failed (edit_buffer=%s): %s", editing, exc)
            self._view.notify_error(f"Could not save record: {exc}")
            return None

        self.reset_form()
        await self.reload()
        return record

    async def begin_edit(self, person_id: int) -> PersonResponse | None:
        """Load one record into the edit buffer and the form."""
        try:
            record = await self._store.get_person(person_id)
        except EntityNotFoundError as exc:
            logger.warning("Edit of missing record: %s", exc)
            self._view.notify_error(f"Record {person_id} not found")
            return None
        except TransportError as exc:
            logger.error("Could not load record %s: %s", person_id, exc)
            self._view.notify_error(f"Could not load record {person_id}: {exc.message}")
            return None

        self.state.edit_buffer = record.id
        self._view.fill_form(record)
        return record

    async def delete_record(self, person_id: int) -> int | None:
        """Delete after confirmation; reloads even when nothing was deleted."""
        if not self._view.confirm(f"Delete record {person_id}?"):
            return None
        try:
            deleted = await self._store.delete_person(person_id)
        except TransportError as exc:
            logger.error("Delete of %s failed: %s", person_id, exc)
            self._view.notify_error(f"Could not delete record {person_id}: {exc.message}")
            return None

        await self.reload()
        return deleted

    def filter(self, query: str) -> list[PersonResponse]:
        return filter_records(self.state.cache, query)

    def search(self, query: str) -> list[PersonResponse]:
        """Render the filtered cache without touching the cache itself."""
        matches = self.filter(query)
        self._view.render(matches)
        return matches

    def reset_form(self) -> None:
        self.state.edit_buffer = None
        self._view.clear_form()

    def export_csv(self) -> str | None:
        """Serialize the cache as CSV, every cell quoted."""
        if not self.state.cache:
            self._view.notify_error("No records to export")
            return None

        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for record in self.state.cache:
            notes = (record.notes or "").replace("\r\n", " ").replace("\n", " ")
            writer.writerow([
                record.id,
                record.name,
                record.email or "",
                "" if record.age is None else record.age,
                notes,
            ])
        return buffer.getvalue()
