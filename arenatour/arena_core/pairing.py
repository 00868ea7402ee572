"""
Arena pairings as seen by the scoring core.

Pairings are produced elsewhere (the pairing engine decides who plays whom);
the sheet builders only read the handful of facts exposed here.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


QUICK_GAME_TURNS = 20  # below this, a draw counts as a quick draw
NOT_SO_QUICK_TURNS = 14  # from here on, a berserk bonus is earned


class PairingStatus(Enum):
    CREATED = "created"
    STARTED = "started"
    FINISHED = "finished"


class Variant(Enum):
    """Chess variant of the arena, with its long-game threshold in turns."""

    STANDARD = ("standard", 60)
    CHESS960 = ("chess960", 60)
    HORDE = ("horde", 60)
    ANTICHESS = ("antichess", 40)
    CRAZYHOUSE = ("crazyhouse", 40)
    KING_OF_THE_HILL = ("kingOfTheHill", 40)
    THREE_CHECK = ("threeCheck", 20)
    ATOMIC = ("atomic", 20)
    RACING_KINGS = ("racingKings", 20)

    def __init__(self, key: str, long_game_turns: int):
        self.key = key
        self.long_game_turns = long_game_turns


@dataclass(frozen=True)
class Pairing:
    """A game between two arena participants."""

    user1: str
    user2: str
    winner: Optional[str] = None
    turns: Optional[int] = None
    berserk1: bool = False
    berserk2: bool = False
    status: PairingStatus = PairingStatus.FINISHED
    variant: Variant = Variant.STANDARD

    def __post_init__(self):
        if self.winner is not None and self.winner not in (self.user1, self.user2):
            raise ValueError(
                f"Winner {self.winner} did not play in {self.user1} vs {self.user2}"
            )

    @property
    def finished(self) -> bool:
        return self.status == PairingStatus.FINISHED

    @property
    def draw(self) -> bool:
        return self.finished and self.winner is None

    @property
    def _turns(self) -> int:
        return self.turns or 0

    @property
    def quick_finish(self) -> bool:
        return self.finished and self.turns is not None and self._turns < QUICK_GAME_TURNS

    @property
    def quick_draw(self) -> bool:
        """Drawn before move 20, treated as an early draw claim."""
        return self.draw and self.turns is not None and self._turns < QUICK_GAME_TURNS

    @property
    def not_so_quick_finish(self) -> bool:
        """Long enough for a berserk to count."""
        return self.finished and self._turns >= NOT_SO_QUICK_TURNS

    @property
    def long_game(self) -> bool:
        """Long enough to be exempt from draw streak suppression."""
        return self._turns >= self.variant.long_game_turns

    def contains(self, user_id: str) -> bool:
        return user_id in (self.user1, self.user2)

    def opponent_of(self, user_id: str) -> Optional[str]:
        if user_id == self.user1:
            return self.user2
        if user_id == self.user2:
            return self.user1
        return None

    def berserk_of(self, user_id: str) -> bool:
        if user_id == self.user1:
            return self.berserk1
        if user_id == self.user2:
            return self.berserk2
        return False

    def won_by(self, user_id: str) -> bool:
        return self.winner is not None and self.winner == user_id

    def lost_by(self, user_id: str) -> bool:
        return self.winner is not None and self.winner != user_id
