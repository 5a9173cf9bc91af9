"""Content registry -- loads and serves spell, item and consumable definitions.

The bundled catalogs live as JSON files in ``tbc_sim/data/``.  Extra
definitions (e.g. test spells) can be registered directly with
:meth:`ContentRegistry.add_spell` / :meth:`ContentRegistry.add_item`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tbc_sim.ir.abilities import AbilityKey
from tbc_sim.ir.consumables import ConsumableDefinition
from tbc_sim.ir.items import ItemDefinition
from tbc_sim.ir.spells import SpellDefinition

_DATA_DIR = Path(__file__).resolve().parents[2] / "data"  # sim/content -> tbc_sim
_DEFAULT_SPELLS_PATH = _DATA_DIR / "spells.json"
_DEFAULT_ITEMS_PATH = _DATA_DIR / "items.json"
_DEFAULT_CONSUMABLES_PATH = _DATA_DIR / "consumables.json"


def _read_json_list(path: str | Path) -> list[dict[str, Any]]:
    with open(path) as f:
        return json.load(f)


class ContentRegistry:
    """Read-only lookup tables shared by every simulation.

    Usage::

        registry = ContentRegistry.default()

        bolt = registry.get_spell_by_name("LB12")
        gear = registry.get_equipment(["Icon of the Silver Crescent"])
    """

    def __init__(self) -> None:
        self.spells: dict[AbilityKey, SpellDefinition] = {}
        self.items: dict[str, ItemDefinition] = {}
        self.consumables: list[ConsumableDefinition] = []

    @classmethod
    def default(cls) -> ContentRegistry:
        """Return a registry with every bundled catalog loaded."""
        registry = cls()
        registry.load_spells()
        registry.load_items()
        registry.load_consumables()
        return registry

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_spells(self, path: str | Path | None = None) -> None:
        """Load spell definitions from a JSON file.

        Parameters
        ----------
        path:
            Path to the JSON file.  Defaults to the bundled ``spells.json``.
        """
        for raw in _read_json_list(path or _DEFAULT_SPELLS_PATH):
            self.add_spell(SpellDefinition.model_validate(raw))

    def load_items(self, path: str | Path | None = None) -> None:
        """Load item definitions from a JSON file (default: bundled ``items.json``)."""
        for raw in _read_json_list(path or _DEFAULT_ITEMS_PATH):
            self.add_item(ItemDefinition.model_validate(raw))

    def load_consumables(self, path: str | Path | None = None) -> None:
        """Load consumables in evaluation order (default: bundled ``consumables.json``)."""
        self.consumables = [
            ConsumableDefinition.model_validate(raw)
            for raw in _read_json_list(path or _DEFAULT_CONSUMABLES_PATH)
        ]

    def add_spell(self, spell: SpellDefinition) -> None:
        self.spells[spell.id] = spell

    def add_item(self, item: ItemDefinition) -> None:
        self.items[item.name] = item

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_spell(self, spell_id: AbilityKey) -> SpellDefinition:
        """Return the spell stored under *spell_id*.

        Raises
        ------
        KeyError
            If no such spell is registered.
        """
        return self.spells[spell_id]

    def get_spell_by_name(self, name: str) -> SpellDefinition | None:
        """Return the spell whose rotation name is *name*, or ``None``."""
        for spell in self.spells.values():
            if spell.name == name:
                return spell
        return None

    def get_item(self, name: str) -> ItemDefinition:
        """Return the item called *name*.

        Raises
        ------
        KeyError
            If the item is not in the catalog.
        """
        try:
            return self.items[name]
        except KeyError:
            raise KeyError(f"Unknown item: {name!r}") from None

    def get_equipment(self, names: list[str]) -> list[ItemDefinition]:
        """Resolve a list of item names into definitions, preserving order."""
        return [self.get_item(name) for name in names]

    def list_spell_names(self) -> list[str]:
        return sorted(spell.name for spell in self.spells.values())

    def __repr__(self) -> str:
        return (
            f"ContentRegistry(spells={len(self.spells)}, "
            f"items={len(self.items)}, "
            f"consumables={len(self.consumables)})"
        )
