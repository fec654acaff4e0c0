"""Console implementation of the SyncView port."""

import typer

from people_registry.application.interfaces import SyncView
from people_registry.application.schemas.person import PersonResponse
from people_registry.application.services import FormInput

_COLUMNS = (("id", 6), ("name", 24), ("email", 28), ("age", 5), ("notes", 30))


def _cell(value: object, width: int) -> str:
    text = "" if value is None else str(value).replace("\n", " ")
    if len(text) > width:
        text = text[: width - 1] + "…"
    return text.ljust(width)


class ConsoleSyncView(SyncView):
    """Renders records as a plain table and prompts on the terminal.

    The edit form is held in ``form`` so a command can load a record,
    change some fields and submit the result.
    """

    def __init__(self, assume_yes: bool = False, show_renders: bool = True):
        self.assume_yes = assume_yes
        self.show_renders = show_renders
        self.form = FormInput()
        self.errors: list[str] = []

    def render(self, records: list[PersonResponse]) -> None:
        if not self.show_renders:
            return
        if not records:
            typer.echo("No records")
            return
        typer.echo(" ".join(_cell(name, width) for name, width in _COLUMNS))
        for record in records:
            typer.echo(
                " ".join(
                    _cell(getattr(record, name), width) for name, width in _COLUMNS
                )
            )

    def notify_error(self, message: str) -> None:
        self.errors.append(message)
        typer.secho(message, err=True, fg=typer.colors.RED)

    def confirm(self, prompt: str) -> bool:
        if self.assume_yes:
            return True
        return typer.confirm(prompt, default=False)

    def fill_form(self, record: PersonResponse) -> None:
        self.form = FormInput.from_record(record)

    def clear_form(self) -> None:
        self.form = FormInput()
