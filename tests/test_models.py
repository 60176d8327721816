"""Tests for cells, grid terrain and unit models."""

import itertools

import pytest

from grid_combat.engine.map_loader import load_battle
from grid_combat.models.cell import Cell, reading_order
from grid_combat.models.grid import Grid, Terrain
from grid_combat.models.unit import Faction, Unit

O = Terrain.OPEN
W = Terrain.WALL


def test_reading_order_is_row_then_column():
    """Test that cells sort by row first, then column."""
    cells = [Cell(2, 0), Cell(0, 5), Cell(1, 1), Cell(0, 1), Cell(1, 0)]

    assert reading_order(cells) == [Cell(0, 1), Cell(0, 5), Cell(1, 0), Cell(1, 1), Cell(2, 0)]


def test_reading_order_is_strict_total_order():
    """Test antisymmetry, totality and transitivity over a small board."""
    cells = [Cell(r, c) for r in range(3) for c in range(3)]

    for a, b in itertools.product(cells, repeat=2):
        # Exactly one of a < b, a == b, b < a
        assert [a < b, a == b, b < a].count(True) == 1

    for a, b, c in itertools.product(cells, repeat=3):
        if a < b and b < c:
            assert a < c


def test_reading_order_returns_new_list():
    """Test that reading_order accepts sets and does not mutate input."""
    cells = {Cell(1, 1), Cell(0, 0)}

    ordered = reading_order(cells)

    assert ordered == [Cell(0, 0), Cell(1, 1)]
    assert isinstance(ordered, list)


def test_grid_neighbors_order_up_left_right_down():
    """Test that neighbors come back in reading order."""
    grid = Grid(rows=((O, O, O), (O, O, O), (O, O, O)))

    assert grid.neighbors(Cell(1, 1)) == [Cell(0, 1), Cell(1, 0), Cell(1, 2), Cell(2, 1)]


def test_grid_neighbors_clipped_at_edges():
    """Test that out-of-range cells are excluded, not wrapped."""
    grid = Grid(rows=((O, O), (O, O)))

    assert grid.neighbors(Cell(0, 0)) == [Cell(0, 1), Cell(1, 0)]
    assert grid.neighbors(Cell(1, 1)) == [Cell(0, 1), Cell(1, 0)]


def test_grid_is_open():
    """Test terrain queries, including out-of-range cells."""
    grid = Grid(rows=((W, O), (O, W)))

    assert grid.is_open(Cell(0, 1))
    assert not grid.is_open(Cell(0, 0))
    assert not grid.is_open(Cell(-1, 0))
    assert not grid.is_open(Cell(0, 2))


def test_grid_open_cells_in_reading_order():
    """Test open cell enumeration."""
    grid = Grid(rows=((W, O, O), (O, W, O)))

    assert list(grid.open_cells()) == [Cell(0, 1), Cell(0, 2), Cell(1, 0), Cell(1, 2)]


def test_grid_rejects_ragged_rows():
    """Test that a non-rectangular grid cannot be built."""
    with pytest.raises(ValueError):
        Grid(rows=((O, O), (O,)))


def test_grid_dimensions():
    """Test width and height."""
    battle = load_battle("#####\n#E.G#\n#####\n")

    assert battle.grid.width == 5
    assert battle.grid.height == 3


def test_faction_enemy():
    """Test that each faction's enemy is the other one."""
    assert Faction.ELF.enemy is Faction.GOBLIN
    assert Faction.GOBLIN.enemy is Faction.ELF


def test_faction_from_symbol():
    """Test map symbol lookup."""
    assert Faction.from_symbol("E") is Faction.ELF
    assert Faction.from_symbol("G") is Faction.GOBLIN
    with pytest.raises(ValueError):
        Faction.from_symbol("X")


def test_unit_validation():
    """Test that units must be created alive and armed."""
    with pytest.raises(ValueError):
        Unit(position=Cell(1, 1), faction=Faction.ELF, hit_points=0, attack_power=3)
    with pytest.raises(ValueError):
        Unit(position=Cell(1, 1), faction=Faction.ELF, hit_points=200, attack_power=0)
    with pytest.raises(ValueError):
        Unit(position=Cell(1, 1), faction="E", hit_points=200, attack_power=3)


def test_unit_is_enemy_of():
    """Test enemy relationship between units."""
    elf = Unit(position=Cell(1, 1), faction=Faction.ELF, hit_points=200, attack_power=3)
    goblin = Unit(position=Cell(1, 2), faction=Faction.GOBLIN, hit_points=200, attack_power=3)
    other_elf = Unit(position=Cell(1, 3), faction=Faction.ELF, hit_points=200, attack_power=3)

    assert elf.is_enemy_of(goblin)
    assert not elf.is_enemy_of(other_elf)
