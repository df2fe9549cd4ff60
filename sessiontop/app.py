# ==============================================================================
# sessiontop CLI
# ==============================================================================
"""
Command-line interface for per-user session reports over access logs.

Usage:
    sessiontop --help
    sessiontop report path/to/logs
    sessiontop report a.log b.log --top 10 --seconds
    sessiontop report logs/ --strategy interval --json
    sessiontop config show
"""

import os

import typer

# Set consistent terminal width for help output formatting
if "COLUMNS" not in os.environ:
    os.environ["COLUMNS"] = "115"

app = typer.Typer(
    name="sessiontop",
    help="Top users and session lengths from access logs",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Report command is imported from sessiontop.cli.report
from sessiontop.cli.report import report

app.command("report")(report)

config_app = typer.Typer(
    help="Configuration management",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

# Register config commands from cli.config module
from sessiontop.cli.config import config_show

config_app.command("show")(config_show)


# ==============================================================================
# Entry Point
# ==============================================================================


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
