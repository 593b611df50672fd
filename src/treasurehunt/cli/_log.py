"""treasurehunt --log — show the tail of a hunt's audit log."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape

from treasurehunt.core.store import TreasureStore


def cmd_log(
    store: TreasureStore, hunt_id: str, limit: int, as_json: bool, console: Console
) -> None:
    store.hunts.require(hunt_id)
    entries = store.hunts.audit(hunt_id).tail(limit)

    if as_json:
        click.echo(json.dumps({"hunt": hunt_id, "entries": entries}, indent=2))
        return

    if not entries:
        console.print(f"No log entries for hunt {escape(hunt_id)}")
        return

    console.print(f"[bold]Audit log[/bold]: {escape(hunt_id)}\n")
    for line in entries:
        console.print(escape(line))
