"""Search for the smallest attack power that wins without losses."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import StalemateError
from ..models.battle import Battle, BattleOutcome
from ..models.unit import Faction
from ..schemas.config import BattleConfig
from .map_loader import load_battle
from .round_executor import RoundExecutor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PowerSearchResult:
    """Result of a flawless-victory search.

    Attributes:
        faction: Faction whose attack power was raised
        attack_power: Smallest power giving a win with no casualties
        outcome: Outcome of the battle at that power
        battle: Final state of the winning trial battle
    """

    faction: Faction
    attack_power: int
    outcome: BattleOutcome
    battle: Battle


def find_flawless_attack_power(
    text: str,
    faction: Faction = Faction.ELF,
    config: Optional[BattleConfig] = None,
    executor: Optional[RoundExecutor] = None,
) -> PowerSearchResult:
    """Raise one faction's attack power until it wins without losing a unit.

    Powers are tried one at a time, starting at the faction's configured
    power. Each trial battle is loaded fresh from `text` and abandoned as
    soon as a unit of `faction` dies.

    Args:
        text: Map text
        faction: Faction that must win flawlessly
        config: Base combat constants (defaults to BattleConfig())
        executor: Round executor to drive trial battles

    Returns:
        PowerSearchResult for the first successful power

    Raises:
        ValueError: If no power up to config.max_attack_power succeeds
        StalemateError: If a trial battle can never finish
    """
    config = config or BattleConfig()
    executor = executor or RoundExecutor()

    def lost(event):
        return event.killed and event.target_faction is faction

    for power in range(config.attack_power(faction), config.max_attack_power + 1):
        battle = load_battle(text, config.with_attack_power(faction, power))
        lost_unit = False
        while not battle.is_over:
            result = executor.execute_round(battle, halt_on=lost)
            if result.kills and lost(result.kills[-1]):
                lost_unit = True
                break
            if result.completed and result.idle:
                raise StalemateError(battle.completed_rounds)

        if lost_unit or battle.winner is not faction:
            logger.info(f"{faction.name} attack power {power}: lost a unit")
            continue

        outcome = battle.outcome()
        logger.info(
            f"{faction.name} attack power {power}: flawless win after "
            f"{outcome.completed_rounds} rounds (outcome {outcome.score})"
        )
        return PowerSearchResult(
            faction=faction, attack_power=power, outcome=outcome, battle=battle
        )

    raise ValueError(
        f"No {faction.name} attack power up to {config.max_attack_power} wins without losses"
    )
