"""Command 'add' of tasg"""

from typing import Annotated

import typer

from tasg.services.task_service import get_task_service
from tasg.ui.formatters import console, format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("add")
@command_wrapper
def add_command(
    description: Annotated[str, typer.Argument(help="Description of the task to add")],
) -> None:
    """Add a new task to the task list."""
    task = get_task_service().add_task(description)
    format_success("Task added successfully")
    console.print(f"[dim]ID: {task.id}[/dim]")
