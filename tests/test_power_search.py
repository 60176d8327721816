"""Tests for the flawless-victory attack power search."""

import pytest

from grid_combat.engine.power_search import find_flawless_attack_power
from grid_combat.engine.round_executor import RoundExecutor
from grid_combat.models.unit import Faction
from grid_combat.schemas.config import BattleConfig

BATTLE_1 = """\
#######
#.G...#
#...EG#
#.#.#G#
#..G#E#
#.....#
#######
"""


def test_finds_smallest_flawless_power():
    """Test the known minimum elf power for the first canonical battle."""
    result = find_flawless_attack_power(BATTLE_1)

    assert result.faction is Faction.ELF
    assert result.attack_power == 15
    assert result.outcome.winner is Faction.ELF
    assert result.outcome.completed_rounds == 29
    assert result.outcome.remaining_hit_points == 172
    assert result.outcome.score == 4988


def test_search_starts_at_configured_power():
    """Test that an already sufficient power is returned unchanged."""
    result = find_flawless_attack_power(BATTLE_1, config=BattleConfig(elf_attack_power=200))

    assert result.attack_power == 200
    assert result.outcome.winner is Faction.ELF


def test_search_gives_up_at_max_power():
    """Test that the search stops at the configured ceiling."""
    with pytest.raises(ValueError):
        find_flawless_attack_power(BATTLE_1, config=BattleConfig(max_attack_power=10))


def test_already_flawless_faction():
    """Test a battle the faction wins untouched at default power."""
    result = find_flawless_attack_power(
        "#######\n#E..G.#\n#######\n",
        faction=Faction.GOBLIN,
        config=BattleConfig(goblin_attack_power=200),
    )

    assert result.attack_power == 200
    assert result.outcome.winner is Faction.GOBLIN
    assert result.outcome.remaining_hit_points == 200


def test_search_ceiling_follows_initial_hit_points():
    """Test that powers above the default 200 are tried when units are tougher."""
    config = BattleConfig(initial_hit_points=1000, goblin_attack_power=500)

    result = find_flawless_attack_power("####\n#EG#\n####\n", config=config)

    # Two elf hits must kill before the second goblin hit lands
    assert result.attack_power == 500
    assert result.outcome.completed_rounds == 2
    assert result.outcome.remaining_hit_points == 500


def test_result_keeps_final_battle():
    """Test that the winning trial battle is returned in its final state."""
    result = find_flawless_attack_power(BATTLE_1)

    assert result.battle.is_over
    assert result.battle.winner is Faction.ELF
    assert result.battle.outcome() == result.outcome


class RecordingExecutor(RoundExecutor):
    def __init__(self):
        super().__init__()
        self.rounds = []

    def execute_round(self, battle, halt_on=None):
        result = super().execute_round(battle, halt_on=halt_on)
        self.rounds.append(result)
        return result


def test_trial_abandoned_at_first_casualty():
    """Test that a losing trial stops inside the round where the unit died."""
    executor = RecordingExecutor()

    find_flawless_attack_power(BATTLE_1, executor=executor)

    losing_rounds = 0
    for result in executor.rounds:
        elf_kills = [e for e in result.kills if e.target_faction is Faction.ELF]
        if elf_kills:
            losing_rounds += 1
            assert not result.completed
            assert result.attacks[-1] is elf_kills[0]
    # Powers 3 to 14 each lose an elf
    assert losing_rounds == 12
