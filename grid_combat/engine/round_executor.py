"""Main round execution orchestrator.

Each round visits the units alive at the start of the round in reading
order. For every unit still alive when its turn comes:
1. Victory check: if no enemy is left, the battle ends mid-round
2. Movement: if not next to an enemy, take one step along the best route
3. Attack: hit the weakest adjacent enemy, if any

A round that ends through the victory check does not count as completed.

Architecture:
Each phase is an independent method. Orchestration methods compose them
in the correct order, which keeps the phases testable on their own.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..errors import StalemateError
from ..interface.renderer import MapRenderer
from ..models.battle import Battle, BattleOutcome
from ..models.cell import Cell
from ..models.unit import Faction, Unit
from .combat import AttackEvent, attack, choose_target
from .pathfinding import find_route, is_adjacent_to_enemy
from .victory import check_victory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveEvent:
    """Record of a unit taking one step.

    Attributes:
        origin: Cell the unit left
        dest: Cell the unit entered
        faction: Faction of the moving unit
    """

    origin: Cell
    dest: Cell
    faction: Faction


@dataclass
class RoundResult:
    """Everything that happened during one round.

    Attributes:
        round_number: 1-based number of the round that was played
        completed: False if the battle ended before every unit acted
        moves: Steps taken, in order
        attacks: Attacks made, in order
    """

    round_number: int
    completed: bool
    moves: list[MoveEvent] = field(default_factory=list)
    attacks: list[AttackEvent] = field(default_factory=list)

    @property
    def idle(self) -> bool:
        """True if no unit moved or attacked."""
        return not self.moves and not self.attacks

    @property
    def kills(self) -> list[AttackEvent]:
        return [event for event in self.attacks if event.killed]


class RoundExecutor:
    """Orchestrates rounds and whole battles.

    The executor holds no battle state of its own; the same instance can
    drive any number of battles one after another.
    """

    def __init__(self, renderer: Optional[MapRenderer] = None):
        """Initialize executor.

        Args:
            renderer: Renderer used for DEBUG-level round dumps
        """
        self.renderer = renderer or MapRenderer()

    # =========================================================================
    # INDEPENDENT PHASE METHODS
    # =========================================================================

    def execute_phase_movement(self, battle: Battle, unit: Unit) -> Optional[MoveEvent]:
        """Move a unit one step toward the nearest in-range square.

        Units already next to an enemy stay put, as do units with no
        reachable in-range square.

        Args:
            battle: Current battle state
            unit: Acting unit

        Returns:
            MoveEvent if the unit moved, None otherwise
        """
        origin = unit.position
        if is_adjacent_to_enemy(battle.grid, battle.units, origin):
            return None

        route = find_route(battle.grid, battle.units, origin)
        if route is None:
            return None

        battle.units.move(origin, route.step)
        return MoveEvent(origin=origin, dest=route.step, faction=unit.faction)

    def execute_phase_attack(self, battle: Battle, unit: Unit) -> Optional[AttackEvent]:
        """Attack the weakest adjacent enemy from the unit's current cell.

        Args:
            battle: Current battle state
            unit: Acting unit (after its movement phase)

        Returns:
            AttackEvent if an attack happened, None otherwise
        """
        target = choose_target(battle.grid, battle.units, unit.position)
        if target is None:
            return None
        return attack(battle.units, unit.position, target)

    # =========================================================================
    # ORCHESTRATION METHODS
    # =========================================================================

    def execute_round(
        self,
        battle: Battle,
        halt_on: Optional[Callable[[AttackEvent], bool]] = None,
    ) -> RoundResult:
        """Play one round.

        The visiting order is fixed from a reading-order snapshot taken at
        the start of the round. Units killed before their turn are skipped,
        and units that moved are never visited twice.

        Args:
            battle: Current battle state
            halt_on: Optional predicate checked after every attack; when it
                returns True the round stops at once and is not counted

        Returns:
            RoundResult; battle.completed_rounds is incremented only when
            result.completed is True

        Raises:
            ValueError: If the battle has already ended
        """
        if battle.is_over:
            raise ValueError("Battle is already over")

        result = RoundResult(round_number=battle.completed_rounds + 1, completed=False)
        turn_order = battle.units.units()

        for unit in turn_order:
            if battle.units.at(unit.position) is not unit:
                # Killed earlier this round
                continue
            if check_victory(battle, unit.faction):
                logger.info(
                    f"{unit.faction.name} wins during round {result.round_number} "
                    f"after {battle.completed_rounds} completed rounds"
                )
                return result

            move = self.execute_phase_movement(battle, unit)
            if move is not None:
                result.moves.append(move)

            hit = self.execute_phase_attack(battle, unit)
            if hit is not None:
                result.attacks.append(hit)
                if halt_on is not None and halt_on(hit):
                    logger.debug(
                        f"Round {result.round_number} halted after attack on {hit.target}"
                    )
                    return result

        battle.completed_rounds += 1
        result.completed = True

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"After round {battle.completed_rounds}:\n{self.renderer.render(battle)}"
            )
        return result

    def run(self, battle: Battle) -> BattleOutcome:
        """Play rounds until one faction is eliminated.

        Args:
            battle: Battle state to run (mutated in place)

        Returns:
            BattleOutcome with completed rounds and surviving hit points

        Raises:
            StalemateError: If a full round passes with no movement and no
                attacks while both factions are still alive
        """
        logger.info(
            f"Starting battle: {battle.units.living_by_faction(Faction.ELF)} elves vs "
            f"{battle.units.living_by_faction(Faction.GOBLIN)} goblins"
        )
        while not battle.is_over:
            result = self.execute_round(battle)
            if result.completed and result.idle:
                raise StalemateError(battle.completed_rounds)

        outcome = battle.outcome()
        logger.info(
            f"Battle over: {outcome.winner.name} wins after {outcome.completed_rounds} rounds "
            f"with {outcome.remaining_hit_points} hit points left (outcome {outcome.score})"
        )
        return outcome
