"""CLI commands for tasg, one module per subcommand."""
