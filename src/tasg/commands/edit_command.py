"""Command 'edit' of tasg - change a task's description."""

from typing import Annotated

import typer

from tasg.services.task_service import get_task_service
from tasg.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("edit")
@command_wrapper
def edit_command(
    task_id: Annotated[int, typer.Argument(min=1, help="ID of the task to edit")],
    description: Annotated[
        str | None,
        typer.Argument(help="New description (omit to only touch updated_at)"),
    ] = None,
) -> None:
    """Edit a task's description."""
    get_task_service().edit_task(task_id, description)
    format_success("Task updated successfully")
