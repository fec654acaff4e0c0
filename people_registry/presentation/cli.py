from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from people_registry.application.services import FormInput, SyncClient
from people_registry.config import get_settings
from people_registry.infrastructure.http import PeopleApiClient, api_base_url_from_settings
from people_registry.infrastructure.logging.log_config import setup_logging
from people_registry.presentation.console import ConsoleSyncView

app = typer.Typer(help="People registry console client.")


def _build_client(view: ConsoleSyncView) -> SyncClient:
    settings = get_settings()
    setup_logging()
    store = PeopleApiClient(
        api_base_url_from_settings(settings),
        timeout=settings.client_timeout,
    )
    return SyncClient(store, view)


@app.command()
def info() -> None:
    """
    Show which server the client talks to.
    """
    settings = get_settings()
    typer.echo(
        f"API={api_base_url_from_settings(settings)} | "
        f"client_host={settings.client_host} timeout={settings.client_timeout}s"
    )


@app.command("list")
def list_people(
    query: Optional[str] = typer.Option(
        None,
        "--filter",
        "-f",
        help="Only show people whose name contains this text (case-insensitive).",
    ),
) -> None:
    """
    Reload the list from the server and print it.
    """
    view = ConsoleSyncView(show_renders=not query)
    client = _build_client(view)
    if not asyncio.run(client.reload()):
        raise typer.Exit(code=1)
    if query:
        view.show_renders = True
        client.search(query)


@app.command()
def add(
    name: str = typer.Argument(..., help="Full name (required)."),
    email: str = typer.Option("", "--email", "-e"),
    age: str = typer.Option("", "--age", "-a", help="Whole number; leave empty for none."),
    notes: str = typer.Option("", "--notes", "-n"),
) -> None:
    """
    Create a person, then print the refreshed list.
    """
    client = _build_client(ConsoleSyncView())
    form = FormInput(name=name, email=email, age=age, notes=notes)
    if asyncio.run(client.submit(form)) is None:
        raise typer.Exit(code=1)


@app.command()
def edit(
    person_id: int = typer.Argument(..., help="Id of the person to edit."),
    name: Optional[str] = typer.Option(None, "--name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help='Pass "" to clear.'),
    age: Optional[str] = typer.Option(None, "--age", "-a", help='Pass "" to clear.'),
    notes: Optional[str] = typer.Option(None, "--notes", "-n", help='Pass "" to clear.'),
) -> None:
    """
    Load a person into the form, change the given fields and save.

    Fields that are not passed keep the values loaded from the server.
    """
    view = ConsoleSyncView()
    client = _build_client(view)

    async def _edit():
        if await client.begin_edit(person_id) is None:
            return None
        form = view.form
        if name is not None:
            form.name = name
        if email is not None:
            form.email = email
        if age is not None:
            form.age = age
        if notes is not None:
            form.notes = notes
        return await client.submit(form)

    if asyncio.run(_edit()) is None:
        raise typer.Exit(code=1)


@app.command()
def delete(
    person_id: int = typer.Argument(..., help="Id of the person to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """
    Delete a person after confirmation, then print the refreshed list.
    """
    client = _build_client(ConsoleSyncView(assume_yes=yes))
    deleted = asyncio.run(client.delete_record(person_id))
    if deleted is None:
        raise typer.Exit(code=1)
    if deleted == 0:
        typer.echo(f"Person {person_id} was already gone.")


@app.command()
def export(
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the CSV here instead of stdout.",
    ),
) -> None:
    """
    Export the current list as CSV.
    """
    view = ConsoleSyncView(show_renders=False)
    client = _build_client(view)
    if not asyncio.run(client.reload()):
        raise typer.Exit(code=1)
    csv_text = client.export_csv()
    if csv_text is None:
        raise typer.Exit(code=1)
    if output is None:
        typer.echo(csv_text, nl=False)
        return
    output.write_text(csv_text, encoding="utf-8")
    typer.echo(f"Wrote {len(client.state.cache)} record(s) to {output}")


@app.command()
def serve() -> None:
    """
    Run the API server with uvicorn.
    """
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "people_registry.main:app",
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    app()
