"""Exceptions raised by the combat engine."""


class InvariantViolation(AssertionError):
    """Raised when a caller breaks an engine contract.

    These are programming errors (moving onto an occupied cell, removing a
    unit that is not there) and are never caught inside the engine.
    """


class StalemateError(RuntimeError):
    """Raised when a round changes nothing while both factions survive."""

    def __init__(self, completed_rounds: int):
        """Initialize stalemate error.

        Args:
            completed_rounds: Rounds completed before the fixed point was detected
        """
        self.completed_rounds = completed_rounds
        super().__init__(
            f"Battle reached a stalemate after {completed_rounds} rounds: "
            "no unit can move or attack"
        )
