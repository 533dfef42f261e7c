"""Command 'list' of tasg"""

from typing import Annotated

import typer

from tasg.exceptions import InvalidInputError
from tasg.services.task_service import get_task_service
from tasg.ui.formatters import format_tasks

from .decorators import command_wrapper

app = typer.Typer()

OUTPUT_FORMATS = ("table", "json", "yaml")


@app.command("list")
@command_wrapper
def list_command(
    all_tasks: Annotated[
        bool, typer.Option("--all", "-a", help="Include completed tasks")
    ] = False,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format (table, json, yaml)")
    ] = "table",
    json_opt: Annotated[
        bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
    ] = False,
) -> None:
    """List open tasks, or every task with --all."""
    if json_opt:
        output = "json"
    if output not in OUTPUT_FORMATS:
        raise InvalidInputError(
            f"Unknown output format '{output}' (choose from {', '.join(OUTPUT_FORMATS)})"
        )

    tasks = get_task_service().list_tasks(show_all=all_tasks)
    format_tasks(tasks, output, show_all=all_tasks)
