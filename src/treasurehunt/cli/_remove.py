"""treasurehunt --remove_treasure / --remove_hunt."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from treasurehunt.core.store import TreasureStore


def cmd_remove_treasure(
    store: TreasureStore, hunt_id: str, treasure_id: int, console: Console
) -> None:
    store.remove(hunt_id, treasure_id)
    console.print(f"Treasure {treasure_id} removed successfully from hunt {escape(hunt_id)}")


def cmd_remove_hunt(store: TreasureStore, hunt_id: str, console: Console) -> None:
    # Per-artifact failures are already logged by HuntManager.remove
    store.hunts.remove(hunt_id)
    console.print(f"Hunt {escape(hunt_id)} removed successfully")
