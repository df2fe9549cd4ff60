# ==============================================================================
# Config Commands
# ==============================================================================
"""
Configuration commands for the sessiontop CLI.
"""

import json
from typing import Annotated

import typer

from sessiontop.cli.shared import C
from sessiontop.utils.config import get_settings


# ==============================================================================
# Commands
# ==============================================================================


def config_show(
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output configuration as JSON")
    ] = False,
) -> None:
    """Display current configuration."""
    settings = get_settings()

    if json_output:
        print(json.dumps(settings.model_dump(), indent=2))
        return

    print()
    print(f"{C.BOLD}Configuration{C.RESET}")
    print()
    print(f"{C.CYAN}Sessions{C.RESET}")
    print(f"  Strategy:   {C.WHITE}{settings.strategy}{C.RESET}")
    print(f"  Threshold:  {C.WHITE}{settings.session_threshold_seconds}s{C.RESET}")
    print()
    print(f"{C.CYAN}Output{C.RESET}")
    print(f"  Top users:  {C.WHITE}{settings.top_n}{C.RESET}")
    seconds = "minutes:seconds" if settings.include_seconds else "whole minutes"
    print(f"  Lengths:    {C.WHITE}{seconds}{C.RESET}")
    print(f"  Log level:  {C.WHITE}{settings.log_level}{C.RESET}")
    print()
