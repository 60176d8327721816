"""Battle configuration schema."""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from ..models.unit import Faction
from ..utils.constants import DEFAULT_ATTACK_POWER, INITIAL_HIT_POINTS

_POWER_FIELDS = {
    Faction.ELF: "elf_attack_power",
    Faction.GOBLIN: "goblin_attack_power",
}


class BattleConfig(BaseModel):
    """Combat constants applied when a map is loaded."""

    initial_hit_points: int = Field(
        default=INITIAL_HIT_POINTS, gt=0, description="Starting hit points of every unit"
    )
    elf_attack_power: int = Field(
        default=DEFAULT_ATTACK_POWER, gt=0, description="Damage dealt per elf attack"
    )
    goblin_attack_power: int = Field(
        default=DEFAULT_ATTACK_POWER, gt=0, description="Damage dealt per goblin attack"
    )
    max_attack_power: Optional[int] = Field(
        default=None,
        gt=0,
        description="Highest attack power tried by the flawless-victory search "
        "(defaults to initial_hit_points)",
    )

    @model_validator(mode="after")
    def _default_max_attack_power(self) -> "BattleConfig":
        # A power equal to the starting hit points kills in one hit
        if self.max_attack_power is None:
            self.max_attack_power = self.initial_hit_points
        return self

    def attack_power(self, faction: Faction) -> int:
        return getattr(self, _POWER_FIELDS[faction])

    def with_attack_power(self, faction: Faction, power: int) -> "BattleConfig":
        """Return a validated copy with one faction's attack power replaced."""
        return BattleConfig(**{**self.model_dump(), _POWER_FIELDS[faction]: power})
