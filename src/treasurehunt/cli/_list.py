"""treasurehunt --list — hunt file metadata followed by every treasure."""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape

from treasurehunt.core.constants import TIMESTAMP_FORMAT
from treasurehunt.core.store import TreasureStore

RULE = "-" * 43


def cmd_list(store: TreasureStore, hunt_id: str, as_json: bool, console: Console) -> None:
    info = store.file_info(hunt_id)
    treasures = store.list_treasures(hunt_id)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "hunt": hunt_id,
                    "records_file": info is not None,
                    "size_bytes": info.size if info else 0,
                    "last_modified": info.modified.strftime(TIMESTAMP_FORMAT) if info else None,
                    "treasures": [t.summary() for t in treasures],
                },
                indent=2,
            )
        )
        return

    console.print(f"Hunt: {escape(hunt_id)}")
    if info is None:
        console.print(f"No treasures found in hunt {escape(hunt_id)}")
        return

    console.print(f"File Size: {info.size} bytes")
    console.print(f"Last Modified: {info.modified.strftime(TIMESTAMP_FORMAT)}\n")

    console.print("Treasures:")
    console.print(RULE)
    for t in treasures:
        console.print(f"ID: {t.id}, User: {escape(t.username)}, Value: {t.value}")

    if not treasures:
        console.print("No treasures found")
    else:
        console.print(RULE)
        console.print(f"Total treasures: {len(treasures)}")
