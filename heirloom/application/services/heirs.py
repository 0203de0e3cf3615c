"""Heir resolution service.

Collects the eligible heirs of a character from the designated heir and the
living children, designated heir first.
"""

from __future__ import annotations

from heirloom.application.ports import CharacterRepository
from heirloom.core.logging import get_logger
from heirloom.domain.models import CharacterSnapshot, HeirOptions, HeirSet

log = get_logger(__name__)


class HeirResolver:
    """Resolves eligible heirs from the character repository."""

    def __init__(self, characters: CharacterRepository):
        self.characters = characters

    def resolve_heirs(self, character_id: str, options: HeirOptions | None = None) -> HeirSet:
        """Resolve the ordered, deduplicated heirs of ``character_id``.

        A dead designated heir is still reported as ``designated_heir_id``
        but is neither eligible nor credited in the provenance tag.
        """
        options = options or HeirOptions()
        result = HeirSet(heirs=[] if options.include_characters else None)

        deceased = self.characters.get_character(character_id)
        if deceased is None:
            result.source = "no-character"
            return result

        # Insertion-ordered set
        collected: dict[str, None] = {}

        designated_id = deceased.designated_heir_id
        if options.include_designated and designated_id:
            result.designated_heir_id = designated_id
            designated = self.characters.get_character(designated_id)
            if designated is not None and not designated.is_dead:
                collected[designated_id] = None

        found_children = False
        if options.include_children:
            children = self._living_children(character_id)
            if children:
                found_children = True
                for child in children:
                    collected.setdefault(child.id, None)

        designated_eligible = (
            result.designated_heir_id is not None and result.designated_heir_id in collected
        )
        heir_ids = list(collected)
        if designated_eligible:
            heir_ids = [result.designated_heir_id] + [
                heir_id for heir_id in heir_ids if heir_id != result.designated_heir_id
            ]
        result.heir_ids = heir_ids

        if options.include_characters:
            resolved = (self.characters.get_character(heir_id) for heir_id in heir_ids)
            result.heirs = [heir for heir in resolved if heir is not None]

        parts = []
        if designated_eligible:
            parts.append("designated")
        if found_children:
            parts.append("children")
        result.source = f"collected:{'+'.join(parts)}" if parts else "none-found-v1"

        log.debug(
            "heirs_resolved",
            character_id=character_id,
            designated_heir_id=result.designated_heir_id,
            heir_count=len(heir_ids),
            source=result.source,
        )
        return result

    def _living_children(self, character_id: str) -> list[CharacterSnapshot]:
        """Living children with an id, oldest first (stable for equal ages)."""
        children = [
            c
            for c in self.characters.get_all_characters()
            if c is not None and c.is_child_of(character_id) and not c.is_dead and c.id
        ]
        return sorted(children, key=lambda c: c.age, reverse=True)
