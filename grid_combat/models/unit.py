"""Unit and faction data models."""

from dataclasses import dataclass
from enum import Enum

from .cell import Cell


class Faction(Enum):
    """The two opposing sides of a battle."""

    ELF = "E"
    GOBLIN = "G"

    @property
    def symbol(self) -> str:
        """Map character used for units of this faction."""
        return self.value

    @property
    def enemy(self) -> "Faction":
        """The opposing faction."""
        return Faction.GOBLIN if self is Faction.ELF else Faction.ELF

    @classmethod
    def from_symbol(cls, symbol: str) -> "Faction":
        """Look up a faction by its map character.

        Raises:
            ValueError: If the character is not a unit symbol
        """
        for faction in cls:
            if faction.value == symbol:
                return faction
        raise ValueError(f"Invalid faction symbol: {symbol!r}")


@dataclass
class Unit:
    """A living combatant bound to one grid cell.

    The position is owned by the UnitRegistry; code outside the registry
    should relocate units through UnitRegistry.move only.
    """

    position: Cell
    faction: Faction
    hit_points: int
    attack_power: int

    def __post_init__(self):
        """Validate unit data after initialization."""
        if not isinstance(self.faction, Faction):
            raise ValueError(f"Invalid faction: {self.faction!r}")
        if self.hit_points <= 0:
            raise ValueError(f"Invalid hit_points: {self.hit_points} (must be > 0)")
        if self.attack_power <= 0:
            raise ValueError(f"Invalid attack_power: {self.attack_power} (must be > 0)")

    def is_enemy_of(self, other: "Unit") -> bool:
        return self.faction is not other.faction
