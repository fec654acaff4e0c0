"""Abstract view interface — the UI surface the sync client drives."""

from abc import ABC, abstractmethod

from people_registry.application.schemas.person import PersonResponse


class SyncView(ABC):
    """Port for rendering records and talking to the user."""

    @abstractmethod
    def render(self, records: list[PersonResponse]) -> None:
        """Show ``records``; an empty list means "no records"."""
        ...

    @abstractmethod
    def notify_error(self, message: str) -> None:
        """Surface a single user-visible error notification."""
        ...

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask the user to confirm a destructive action."""
        ...

    @abstractmethod
    def fill_form(self, record: PersonResponse) -> None:
        """Populate the edit form with a full record."""
        ...

    @abstractmethod
    def clear_form(self) -> None:
        """Reset the edit form to its blank state."""
        ...
