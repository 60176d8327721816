"""Attack phase: target selection and damage.

This module handles:
1. Picking the adjacent enemy with the fewest hit points (reading order on ties)
2. Applying the attacker's power to that enemy
3. Removing the enemy from the registry when its hit points reach zero
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import InvariantViolation
from ..models.cell import Cell
from ..models.grid import Grid
from ..models.registry import UnitRegistry
from ..models.unit import Faction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackEvent:
    """Record of one attack.

    Attributes:
        attacker: Cell of the attacking unit
        target: Cell of the unit that was hit
        attacker_faction: Faction of the attacker
        target_faction: Faction of the unit that was hit
        damage: Hit points removed (the attacker's power)
        remaining_hit_points: Target hit points after the hit (may be <= 0)
        killed: True if the target was removed from the battle
    """

    attacker: Cell
    target: Cell
    attacker_faction: Faction
    target_faction: Faction
    damage: int
    remaining_hit_points: int
    killed: bool


def choose_target(grid: Grid, units: UnitRegistry, cell: Cell) -> Optional[Cell]:
    """Select which adjacent enemy the unit at `cell` attacks.

    Args:
        grid: Battle terrain
        units: Current unit registry
        cell: Cell of the acting unit

    Returns:
        Cell of the enemy with the fewest hit points, the reading-order-first
        one among equals, or None if no enemy is adjacent
    """
    actor = units.at(cell)
    if actor is None:
        raise InvariantViolation(f"No unit at {cell} to choose a target")

    candidates = []
    for neighbor in grid.neighbors(cell):
        other = units.at(neighbor)
        if other is not None and other.is_enemy_of(actor):
            candidates.append((other.hit_points, neighbor))

    if not candidates:
        return None
    return min(candidates)[1]


def attack(units: UnitRegistry, attacker_cell: Cell, target_cell: Cell) -> AttackEvent:
    """Hit the unit at `target_cell` with the unit at `attacker_cell`.

    A target whose hit points drop to zero or below is removed immediately,
    freeing its cell for units acting later in the same round.

    Args:
        units: Current unit registry
        attacker_cell: Cell of the attacking unit
        target_cell: Cell of the enemy being attacked

    Returns:
        AttackEvent describing the hit
    """
    attacker = units.at(attacker_cell)
    target = units.at(target_cell)
    if attacker is None or target is None:
        raise InvariantViolation(f"Attack from {attacker_cell} to {target_cell} needs two units")
    if not attacker.is_enemy_of(target):
        raise InvariantViolation(f"Unit at {attacker_cell} cannot attack an ally at {target_cell}")

    target.hit_points -= attacker.attack_power
    killed = target.hit_points <= 0
    if killed:
        units.remove(target_cell)
        logger.debug(f"{attacker.faction.name} at {attacker_cell} killed {target.faction.name} at {target_cell}")

    return AttackEvent(
        attacker=attacker_cell,
        target=target_cell,
        attacker_faction=attacker.faction,
        target_faction=target.faction,
        damage=attacker.attack_power,
        remaining_hit_points=target.hit_points,
        killed=killed,
    )
