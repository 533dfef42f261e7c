"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from tasg.ui.formatters import err_console

# Exit code for command-line usage errors
USAGE_ERROR_EXIT_CODE = 2


class SuggestingGroup(TyperGroup):
    """Typer group that answers an unknown subcommand with close matches.

    ``tasg compleet 1`` prints "Did you mean this? complete" before exiting
    with the usage error code.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            if args:
                attempted = args[0]
                suggestions = get_close_matches(
                    attempted, list(self.commands), n=3, cutoff=0.6
                )
                if suggestions:
                    err_console.print(
                        f'[red]Error:[/red] unknown command "{attempted}" for "{ctx.info_name}"'
                    )
                    err_console.print()
                    if len(suggestions) == 1:
                        err_console.print("[yellow]Did you mean this?[/yellow]")
                    else:
                        err_console.print("[yellow]Did you mean one of these?[/yellow]")
                    for suggestion in suggestions:
                        err_console.print(f"        {suggestion}")
                    raise typer.Exit(
                        getattr(e, "exit_code", USAGE_ERROR_EXIT_CODE)
                    ) from e
            raise
