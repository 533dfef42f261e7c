"""Main entry point for tasg."""

from typing import Annotated

import typer

from tasg import __version__
from tasg.commands.add_command import add_command
from tasg.commands.complete_command import complete_command
from tasg.commands.delete_command import delete_command
from tasg.commands.edit_command import edit_command
from tasg.commands.list_command import list_command
from tasg.commands.nuke_command import nuke_command
from tasg.commands.path_command import path_command
from tasg.ui.formatters import console
from tasg.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="tasg",
    cls=SuggestingGroup,
    help="A simple command-line task tracker",
    no_args_is_help=True,
)

app.command("add")(add_command)
app.command("list")(list_command)
app.command("complete")(complete_command)
app.command("delete")(delete_command)
app.command("edit")(edit_command)
app.command("nuke")(nuke_command)
app.command("path")(path_command)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"tasg {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """Add, list, complete, edit and delete tasks stored in a JSON file."""


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
