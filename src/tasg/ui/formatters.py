"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tasg.models import Task

console = Console()
err_console = Console(stderr=True)

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_output(data: Any, output_format: str = "table") -> None:
    """Print plain data as json or yaml."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))
    else:
        console.print(data)


def format_task_table(tasks: list[Task], show_all: bool = False) -> None:
    """Print tasks as a table; the Completed column only appears with ``show_all``."""
    if not tasks:
        console.print("No tasks found")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Description")
    table.add_column("Created At", no_wrap=True)
    if show_all:
        table.add_column("Completed")

    for task in tasks:
        row = [
            str(task.id),
            escape(task.description),
            task.created_at.strftime(_TIMESTAMP_FORMAT),
        ]
        if show_all:
            row.append("Yes" if task.completed else "No")
        table.add_row(*row)

    console.print(table)


def format_tasks(tasks: list[Task], output_format: str = "table", show_all: bool = False) -> None:
    """Display tasks in the requested output format."""
    if output_format in ("json", "yaml"):
        format_output([t.model_dump(mode="json") for t in tasks], output_format)
    else:
        format_task_table(tasks, show_all=show_all)


def format_error(message: str) -> None:
    """Format and display an error message on stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(escape(message))
