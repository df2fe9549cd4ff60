# ==============================================================================
# Report Command
# ==============================================================================
"""
Report command for the sessiontop CLI.

Reads access logs, reconstructs per-user sessions, and prints the busiest
users with their session counts and session-length extremes.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from sessiontop.cli.formatting import summary_to_json, summary_to_text
from sessiontop.cli.shared import (
    EXIT_NO_DATA,
    EXIT_ORDERING_VIOLATION,
    configure_logging,
    print_error,
)
from sessiontop.core.errors import OrderingViolation, SourceNotFoundError
from sessiontop.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def report(
    paths: Annotated[
        list[Path], typer.Argument(help="Log files and/or directories of log files")
    ],
    top: Annotated[
        Optional[int], typer.Option("--top", "-n", min=1, help="Number of top users to show")
    ] = None,
    threshold: Annotated[
        Optional[int],
        typer.Option("--threshold", "-t", min=1, help="Session inactivity threshold in seconds"),
    ] = None,
    strategy: Annotated[
        Optional[str],
        typer.Option(
            "--strategy",
            "-s",
            help="Aggregation strategy: streaming (ordered files) or interval (any order)",
        ),
    ] = None,
    seconds: Annotated[
        bool, typer.Option("--seconds", help="Show session lengths as minutes:seconds")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output as JSON for scripting")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log skipped lines and file order")
    ] = False,
) -> None:
    """Show the top users by page views, with session counts and lengths.

    Files are examined to find their chronological order, so they can be
    given in any order. Use --strategy interval for logs written concurrently
    by several servers.

    Examples:
        sessiontop report logs/                  # All files in a directory
        sessiontop report a.log b.log -n 10      # Top 10 users
        sessiontop report logs/ --json           # JSON output for scripting
    """
    from sessiontop.pipeline import build_report

    updates: dict[str, object] = {}
    if top is not None:
        updates["top_n"] = top
    if threshold is not None:
        updates["session_threshold_seconds"] = threshold
    if strategy is not None:
        if strategy not in ("streaming", "interval"):
            raise typer.BadParameter(
                f"'{strategy}' is not one of: streaming, interval", param_hint="--strategy"
            )
        updates["strategy"] = strategy
    if seconds:
        updates["include_seconds"] = True
    settings = get_settings().model_copy(update=updates)

    configure_logging(settings.log_level, verbose)

    try:
        result = build_report(paths, settings)
    except SourceNotFoundError as e:
        _fail(str(e), EXIT_NO_DATA, json_output)
    except OrderingViolation as e:
        _fail(
            f"Events out of order for user {e.user_id}: {e.timestamp} is before "
            f"session start {e.session_start}. Try --strategy interval.",
            EXIT_ORDERING_VIOLATION,
            json_output,
        )

    if result.event_count == 0:
        _fail("Didn't find any user requests at all", EXIT_NO_DATA, json_output)

    if json_output:
        print(summary_to_json(result.summary))
        return

    print(summary_to_text(result.summary, settings.include_seconds), end="")


def _fail(message: str, code: int, json_output: bool) -> None:
    if json_output:
        print(json.dumps({"error": message}))
    else:
        print_error(message)
    raise typer.Exit(code)
