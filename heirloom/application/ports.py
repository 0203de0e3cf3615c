"""Collaborator interfaces.

The host game owns character state, estate valuation and the character flag
store. Services depend on these protocols only.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from heirloom.domain.models import CharacterSnapshot, EstateValuation, ValuationOptions


class CharacterRepository(Protocol):
    def get_character(self, character_id: str) -> CharacterSnapshot | None: ...

    def get_all_characters(self) -> Sequence[CharacterSnapshot]:
        """Every known character, in no guaranteed order."""
        ...


class EstateValuator(Protocol):
    def get_estate_valuation(
        self, character_id: str, options: ValuationOptions | None = None
    ) -> EstateValuation: ...


class FlagReader(Protocol):
    def read_character_flag(self, character_id: str, flag_name: str) -> Any | None: ...


class FlagWriter(Protocol):
    def write_character_flag(self, character_id: str, flag_name: str, payload: Any) -> None: ...
