"""Command 'delete' of tasg"""

from typing import Annotated

import typer

from tasg.services.task_service import get_task_service
from tasg.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("delete")
@command_wrapper
def delete_command(
    task_id: Annotated[int, typer.Argument(min=1, help="ID of the task to delete")],
) -> None:
    """Delete a task."""
    get_task_service().delete_task(task_id)
    format_success("Task deleted successfully")
