"""Victory condition checking.

A battle ends the moment a unit about to act finds no living enemies
anywhere on the map. The acting unit's faction wins.
"""

from ..models.battle import Battle
from ..models.unit import Faction


def check_victory(battle: Battle, acting_faction: Faction) -> bool:
    """Check whether the acting unit's enemies have all been eliminated.

    Args:
        battle: Current battle state
        acting_faction: Faction of the unit about to take its turn

    Returns:
        True if the battle is over (battle.winner is set), False otherwise
    """
    if battle.units.living_by_faction(acting_faction.enemy) == 0:
        battle.winner = acting_faction
        return True
    return False
