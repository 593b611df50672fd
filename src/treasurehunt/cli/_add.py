"""treasurehunt --add — interactively collect and append one treasure."""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.prompt import FloatPrompt, IntPrompt, Prompt

from treasurehunt.core.exceptions import InvalidInputError
from treasurehunt.core.records import Treasure
from treasurehunt.core.store import TreasureStore


class TextPrompt(Prompt):
    """Free-text prompt that keeps surrounding whitespace as typed."""

    def process_response(self, value: str) -> str:
        return value


def _prompt_treasure(console: Console) -> Treasure:
    username = TextPrompt.ask("Enter username", console=console)
    latitude = FloatPrompt.ask("Enter latitude", console=console)
    longitude = FloatPrompt.ask("Enter longitude", console=console)
    clue = TextPrompt.ask("Enter clue", console=console)
    value = IntPrompt.ask("Enter value", console=console)
    return Treasure(
        username=username,
        latitude=latitude,
        longitude=longitude,
        clue=clue,
        value=value,
    )


def cmd_add(store: TreasureStore, hunt_id: str, console: Console) -> None:
    if store.hunts.ensure(hunt_id):
        console.print(f"Created new hunt: {escape(hunt_id)}")

    try:
        treasure = _prompt_treasure(console)
    except EOFError as exc:
        raise InvalidInputError("Input ended before all treasure fields were entered") from exc
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise InvalidInputError(f"Invalid {field}: {first['msg']}") from exc

    saved = store.add(hunt_id, treasure)
    console.print(f"Treasure {saved.id} added successfully to hunt {escape(hunt_id)}")
