"""In-memory host adapter.

Implements the character repository and the character flag store over plain
dictionaries. Used by tests and by hosts that hand over a state dump.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from heirloom.domain.models import CharacterSnapshot


def _as_snapshot(data: CharacterSnapshot | Mapping[str, Any]) -> CharacterSnapshot:
    if isinstance(data, CharacterSnapshot):
        return data
    return CharacterSnapshot.model_validate(data)


class InMemoryWorld:
    """Game state held in memory.

    The current (player) character is looked up before the character table,
    the way the host keeps it outside the table.
    """

    def __init__(
        self,
        characters: Iterable[CharacterSnapshot | Mapping[str, Any]] = (),
        current: CharacterSnapshot | Mapping[str, Any] | None = None,
        flags: Mapping[str, Mapping[str, Any]] | None = None,
        wrap_flags: bool = False,
    ):
        self.characters: dict[str, CharacterSnapshot] = {}
        for data in characters:
            self.add_character(data)
        self.current = _as_snapshot(current) if current is not None else None
        self.flags: dict[str, dict[str, Any]] = {
            character_id: dict(values) for character_id, values in (flags or {}).items()
        }
        self.wrap_flags = wrap_flags

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> "InMemoryWorld":
        """Build from a host state dump: {"current": {...}, "characters": {id: {...}}}."""
        characters = state.get("characters") or {}
        return cls(
            characters=[c for c in characters.values() if c],
            current=state.get("current"),
        )

    def add_character(self, data: CharacterSnapshot | Mapping[str, Any]) -> CharacterSnapshot:
        snapshot = _as_snapshot(data)
        self.characters[snapshot.id] = snapshot
        return snapshot

    # --- CharacterRepository ---

    def get_character(self, character_id: str) -> CharacterSnapshot | None:
        if self.current is not None and self.current.id == character_id:
            return self.current
        return self.characters.get(character_id)

    def get_all_characters(self) -> list[CharacterSnapshot]:
        return list(self.characters.values())

    # --- FlagReader / FlagWriter ---

    def read_character_flag(self, character_id: str, flag_name: str) -> Any | None:
        payload = self.flags.get(character_id, {}).get(flag_name)
        if payload is None:
            return None
        payload = copy.deepcopy(payload)
        return {"data": payload} if self.wrap_flags else payload

    def write_character_flag(self, character_id: str, flag_name: str, payload: Any) -> None:
        self.flags.setdefault(character_id, {})[flag_name] = copy.deepcopy(payload)


class ReadOnlyFlags:
    """Flag reader without write capability."""

    def __init__(self, world: InMemoryWorld):
        self.world = world

    def read_character_flag(self, character_id: str, flag_name: str) -> Any | None:
        return self.world.read_character_flag(character_id, flag_name)
