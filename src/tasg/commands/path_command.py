"""Command 'path' of tasg"""

import typer

from tasg.config import load_settings
from tasg.ui.formatters import console

from .decorators import command_wrapper

app = typer.Typer()


@app.command("path")
@command_wrapper
def path_command() -> None:
    """Show the absolute path to the tasks file."""
    console.print(str(load_settings().tasks_file.resolve()), soft_wrap=True, markup=False, highlight=False)
