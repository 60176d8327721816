"""Pydantic report schema for finished battles."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.battle import BattleOutcome


class BattleReport(BaseModel):
    """Serializable summary of a battle outcome."""

    completed_rounds: int = Field(ge=0, description="Rounds completed before the end")
    remaining_hit_points: int = Field(ge=0, description="Hit points left on the winning side")
    outcome: int = Field(ge=0, description="completed_rounds * remaining_hit_points")
    winner: str = Field(description="Winning faction: 'elf' or 'goblin'")
    attack_power: Optional[int] = Field(
        default=None, description="Attack power found by the flawless-victory search"
    )

    @classmethod
    def from_outcome(
        cls, outcome: BattleOutcome, attack_power: Optional[int] = None
    ) -> "BattleReport":
        return cls(
            completed_rounds=outcome.completed_rounds,
            remaining_hit_points=outcome.remaining_hit_points,
            outcome=outcome.score,
            winner=outcome.winner.name.lower(),
            attack_power=attack_power,
        )
