"""
Treasurehunt CLI entry point.

Usage:
  treasurehunt --add <hunt_id>                         — prompt for and append a treasure
  treasurehunt --list <hunt_id>                        — file metadata and all treasures
  treasurehunt --view <hunt_id> <treasure_id>          — one treasure in full
  treasurehunt --remove_treasure <hunt_id> <treasure_id>
  treasurehunt --remove_hunt <hunt_id>                 — delete the hunt, log and symlink
  treasurehunt --log <hunt_id> [--limit N]             — recent audit log entries

Exit status is 0 for any recognised operation, even one that reports a
missing hunt or treasure, and 1 for usage errors and hunt setup failures.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.markup import escape

from treasurehunt import __version__
from treasurehunt.core.config import HuntConfig, LoggingConfig
from treasurehunt.core.constants import DEFAULT_LOG_LIMIT, ExitCode
from treasurehunt.core.exceptions import HuntSetupError, TreasureHuntError

if TYPE_CHECKING:
    from treasurehunt.core.store import TreasureStore

console = Console(soft_wrap=True, emoji=False, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False, highlight=False)

OPERATIONS = ("add", "list", "view", "remove_treasure", "remove_hunt", "log")
NEEDS_TREASURE_ID = ("view", "remove_treasure")

USAGE = "Usage: treasurehunt --<operation> <hunt_id> [treasure_id]"


def _usage_error(message: str, show_usage: bool = False) -> NoReturn:
    err_console.print(escape(message))
    if show_usage:
        err_console.print(escape(USAGE))
        err_console.print(f"Operations: {', '.join(OPERATIONS)}")
    sys.exit(ExitCode.ERROR)


def _configure_logging(config: HuntConfig) -> None:
    # WARNING and above already reach stderr through logging.lastResort
    if config.logging.level in ("DEBUG", "INFO"):
        logging.basicConfig(
            level=config.logging.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )


# ---------------------------------------------------------------------------
# Root command
# ---------------------------------------------------------------------------


@click.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    }
)
@click.version_option(__version__, "--version", "-V", message="treasurehunt %(version)s")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--json", "as_json", is_flag=True, default=False, help="Machine-readable output")
@click.option("--limit", default=DEFAULT_LOG_LIMIT, help="Number of entries to show with --log")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Debug logging on stderr")
def cli(args: tuple[str, ...], as_json: bool, limit: int, verbose: bool) -> None:
    """Manage treasure hunts: --add, --list, --view, --remove_treasure, --remove_hunt, --log."""
    if len(args) < 2:
        _usage_error("Missing operation or hunt id.", show_usage=True)

    operation, hunt_id = args[0], args[1]
    if not operation.startswith("--"):
        _usage_error("Operation should start with '--'")

    operation = operation[2:]
    if operation not in OPERATIONS:
        _usage_error(f"Unknown operation: {operation}", show_usage=True)

    treasure_id = 0
    if operation in NEEDS_TREASURE_ID:
        if len(args) < 3:
            _usage_error(f"Missing treasure ID for {operation} operation")
        try:
            treasure_id = int(args[2])
        except ValueError:
            _usage_error(f"Treasure ID must be an integer, got: {args[2]}")

    from treasurehunt.core.store import TreasureStore

    config = HuntConfig(logging=LoggingConfig(level="DEBUG" if verbose else "WARNING"))
    _configure_logging(config)
    store = TreasureStore(config)

    try:
        _dispatch(store, operation, hunt_id, treasure_id, as_json=as_json, limit=limit)
    except HuntSetupError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(ExitCode.ERROR)
    except TreasureHuntError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")


def _dispatch(
    store: TreasureStore,
    operation: str,
    hunt_id: str,
    treasure_id: int,
    as_json: bool,
    limit: int,
) -> None:
    if operation == "add":
        from treasurehunt.cli._add import cmd_add

        cmd_add(store, hunt_id, console=console)
    elif operation == "list":
        from treasurehunt.cli._list import cmd_list

        cmd_list(store, hunt_id, as_json=as_json, console=console)
    elif operation == "view":
        from treasurehunt.cli._view import cmd_view

        cmd_view(store, hunt_id, treasure_id, as_json=as_json, console=console)
    elif operation == "remove_treasure":
        from treasurehunt.cli._remove import cmd_remove_treasure

        cmd_remove_treasure(store, hunt_id, treasure_id, console=console)
    elif operation == "remove_hunt":
        from treasurehunt.cli._remove import cmd_remove_hunt

        cmd_remove_hunt(store, hunt_id, console=console)
    elif operation == "log":
        from treasurehunt.cli._log import cmd_log

        cmd_log(store, hunt_id, limit=limit, as_json=as_json, console=console)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
