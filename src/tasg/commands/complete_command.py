"""Command 'complete' of tasg"""

from typing import Annotated

import typer

from tasg.services.task_service import get_task_service
from tasg.ui.formatters import format_success

from .decorators import command_wrapper

app = typer.Typer()


@app.command("complete")
@command_wrapper
def complete_command(
    task_id: Annotated[int, typer.Argument(min=1, help="ID of the task to complete")],
) -> None:
    """Mark a task as complete."""
    get_task_service().complete_task(task_id)
    format_success("Task marked as complete")
