"""Battle configuration constants."""

# Unit defaults
INITIAL_HIT_POINTS = 200
DEFAULT_ATTACK_POWER = 3

# Map symbols (unit symbols live on Faction)
WALL_SYMBOL = "#"
OPEN_SYMBOL = "."
