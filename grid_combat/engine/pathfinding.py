"""Movement phase: choosing where a unit steps next.

This module handles:
1. Finding in-range squares (vacant cells adjacent to a living enemy)
2. Layered breadth-first flood fill from the acting unit
3. Choosing the nearest in-range square, ties broken by reading order
4. Walking back from that square to pick the first step

The two tie-breaks happen in that order: the destination is fixed first
(distance, then reading order), and only then is the first step chosen
(distance layer, then reading order) among shortest paths to it.
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
class Route:
    """Result of route planning for one unit.

    Attributes:
        destination: Chosen in-range square
        step: Cell the unit moves into this turn (adjacent to its origin)
        distance: Number of steps from origin to destination
    """

    destination: Cell
    step: Cell
    distance: int


def in_range_cells(grid: Grid, units: UnitRegistry, enemy: Faction) -> set[Cell]:
    """Return every vacant open cell adjacent to a living unit of `enemy`.

    Args:
        grid: Battle terrain
        units: Current unit registry
        enemy: Faction being hunted

    Returns:
        Set of target cells (unordered)
    """
    targets = set()
    for unit in units.units():
        if unit.faction is not enemy:
            continue
        for cell in grid.neighbors(unit.position):
            if units.is_vacant(cell):
                targets.add(cell)
    return targets


def is_adjacent_to_enemy(grid: Grid, units: UnitRegistry, cell: Cell) -> bool:
    """Return True if the unit at `cell` touches at least one enemy."""
    actor = units.at(cell)
    if actor is None:
        raise InvariantViolation(f"No unit at {cell}")
    for neighbor in grid.neighbors(cell):
        other = units.at(neighbor)
        if other is not None and other.is_enemy_of(actor):
            return True
    return False


def find_route(grid: Grid, units: UnitRegistry, origin: Cell) -> Optional[Route]:
    """Plan the next step for the unit standing at `origin`.

    Flood-fills outward one distance layer at a time through vacant cells
    only. Filling stops after the first layer that contains an in-range
    square, so every numbered cell lies within the minimum distance.

    The caller should not ask for a route when the unit is already next to
    an enemy; it attacks instead.

    Args:
        grid: Battle terrain
        units: Current unit registry
        origin: Cell of the acting unit

    Returns:
        Route to the chosen destination, or None if no in-range square is
        reachable (including when no enemy is alive)
    """
    actor = units.at(origin)
    if actor is None:
        raise InvariantViolation(f"No unit at {origin} to route")

    targets = in_range_cells(grid, units, actor.faction.enemy)
    if not targets:
        return None

    distances: dict[Cell, int] = {origin: 0}
    frontier = [origin]
    reached: list[Cell] = []
    distance = 0

    while frontier and not reached:
        distance += 1
        next_frontier = []
        for cell in frontier:
            for neighbor in grid.neighbors(cell):
                if neighbor in distances or not units.is_vacant(neighbor):
                    continue
                distances[neighbor] = distance
                next_frontier.append(neighbor)
                if neighbor in targets:
                    reached.append(neighbor)
        frontier = next_frontier

    if not reached:
        return None

    destination = min(reached)
    step = _first_step(grid, distances, destination, distance)
    logger.debug(
        f"{actor.faction.name} at {origin}: destination {destination} "
        f"({distance} steps), first step {step}"
    )
    return Route(destination=destination, step=step, distance=distance)


def _first_step(
    grid: Grid, distances: dict[Cell, int], destination: Cell, distance: int
) -> Cell:
    """Walk back from the destination to the cells adjacent to the origin.

    At each layer keep every visited neighbor exactly one step closer to
    the origin; at layer 1 this is the set of all first steps that start a
    shortest path to the destination, and the reading-order-first one wins.

    Args:
        grid: Battle terrain
        distances: Flood-fill distances from the origin
        destination: Chosen in-range square
        distance: Distance of the destination from the origin

    Returns:
        First step (a cell at distance 1)
    """
    layer = {destination}
    for level in range(distance - 1, 0, -1):
        layer = {
            neighbor
            for cell in layer
            for neighbor in grid.neighbors(cell)
            if distances.get(neighbor) == level
        }
        if not layer:
            raise InvariantViolation(f"No backtrack step at distance {level} toward {destination}")
    return min(layer)
