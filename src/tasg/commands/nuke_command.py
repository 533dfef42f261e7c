"""Command 'nuke' of tasg - delete every task after confirmation."""

import typer

from tasg.services.task_service import get_task_service
from tasg.ui.formatters import format_info, format_success

from .decorators import command_wrapper

app = typer.Typer()

PROMPT = "Are you sure you want to delete all tasks? This action cannot be undone. (y/N)"


def _confirmed() -> bool:
    """Only a bare 'y' or 'Y' confirms; anything else, including EOF, declines."""
    try:
        answer = typer.prompt(PROMPT, default="", show_default=False)
    except typer.Abort:
        return False
    return answer.strip().lower() == "y"


@app.command("nuke")
@command_wrapper
def nuke_command() -> None:
    """Delete all tasks."""
    service = get_task_service()
    if not _confirmed():
        format_info("Operation cancelled.")
        return
    service.nuke()
    format_success("All tasks have been deleted.")
