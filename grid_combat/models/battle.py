"""Battle state container."""

from dataclasses import dataclass, field
from typing import Optional

from .grid import Grid
from .registry import UnitRegistry
from .unit import Faction


@dataclass(frozen=True)
class BattleOutcome:
    """Externally observable result of a finished battle.

    Attributes:
        completed_rounds: Rounds that finished without early termination
        remaining_hit_points: Total hit points of the surviving faction
        winner: Faction left standing
    """

    completed_rounds: int
    remaining_hit_points: int
    winner: Faction

    @property
    def score(self) -> int:
        """Conventional puzzle outcome: rounds times remaining hit points."""
        return self.completed_rounds * self.remaining_hit_points


@dataclass
class Battle:
    """Main battle state: static grid, mutable registry, round counter.

    All engine phases operate on this state. The grid and the starting
    units are owned by one Battle for its whole duration.
    """

    grid: Grid
    units: UnitRegistry
    completed_rounds: int = 0
    winner: Optional[Faction] = None
    initial_counts: dict[Faction, int] = field(default_factory=dict)

    def __post_init__(self):
        """Validate state and record starting unit counts."""
        if self.units.grid is not self.grid:
            raise ValueError("Unit registry must be built on the battle's grid")
        if self.completed_rounds < 0:
            raise ValueError(
                f"Invalid completed_rounds: {self.completed_rounds} (must be >= 0)"
            )
        if not self.initial_counts:
            self.initial_counts = {
                faction: self.units.living_by_faction(faction) for faction in Faction
            }

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def casualties(self, faction: Faction) -> int:
        """Units of a faction lost since the battle was loaded."""
        return self.initial_counts.get(faction, 0) - self.units.living_by_faction(faction)

    def outcome(self) -> BattleOutcome:
        """Build the result of a finished battle.

        Raises:
            ValueError: If the battle has not ended yet
        """
        if self.winner is None:
            raise ValueError("Battle is still in progress")
        return BattleOutcome(
            completed_rounds=self.completed_rounds,
            remaining_hit_points=self.units.total_hit_points(self.winner),
            winner=self.winner,
        )
