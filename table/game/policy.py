"""Decision policies for automated seat play."""

from abc import ABC, abstractmethod
from random import Random

from table.seats import Seat, SeatAction

# Actions an automated policy may choose; Double is never automatic
AUTO_ACTIONS = (SeatAction.HIT, SeatAction.STAND)


class DecisionPolicy(ABC):
    """Chooses the next action for the seat whose turn it is."""

    @abstractmethod
    def choose(self, seat: Seat) -> SeatAction:
        """Return HIT or STAND for the seat."""
        ...


class RandomPolicy(DecisionPolicy):
    """Picks Hit or Stand uniformly at random."""

    def __init__(self, rng: Random | None = None) -> None:
        self._rng = rng or Random()

    def choose(self, seat: Seat) -> SeatAction:
        return self._rng.choice(AUTO_ACTIONS)


class FixedPolicy(DecisionPolicy):
    """Always returns the same action."""

    def __init__(self, action: SeatAction = SeatAction.STAND) -> None:
        if action not in AUTO_ACTIONS:
            raise ValueError(f"Automated play cannot choose {action}")
        self._action = action

    def choose(self, seat: Seat) -> SeatAction:
        return self._action
