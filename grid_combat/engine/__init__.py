"""Game engine components."""

from .combat import AttackEvent, attack, choose_target
from .map_loader import MapParseError, load_battle, load_battle_file
from .pathfinding import Route, find_route, in_range_cells
from .power_search import PowerSearchResult, find_flawless_attack_power
from .round_executor import MoveEvent, RoundExecutor, RoundResult
from .victory import check_victory

__all__ = [
    "AttackEvent",
    "MapParseError",
    "MoveEvent",
    "PowerSearchResult",
    "Route",
    "RoundExecutor",
    "RoundResult",
    "attack",
    "check_victory",
    "choose_target",
    "find_flawless_attack_power",
    "find_route",
    "in_range_cells",
    "load_battle",
    "load_battle_file",
]
