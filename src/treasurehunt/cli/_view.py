"""treasurehunt --view — print one treasure in full."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape

from treasurehunt.cli._list import RULE
from treasurehunt.core.store import TreasureStore


def cmd_view(
    store: TreasureStore, hunt_id: str, treasure_id: int, as_json: bool, console: Console
) -> None:
    t = store.get(hunt_id, treasure_id)

    if as_json:
        click.echo(json.dumps(t.model_dump(), indent=2))
        return

    console.print("Treasure Details:")
    console.print(RULE)
    console.print(f"ID: {t.id}")
    console.print(f"User: {escape(t.username)}")
    # repr() gives the shortest string that round-trips the double
    console.print(f"Location: {t.latitude!r}, {t.longitude!r}")
    console.print(f"Clue: {escape(t.clue)}")
    console.print(f"Value: {t.value}")
    console.print(RULE)
