"""
Builder for creating arena pairing histories with a fluent API.

This module provides a builder for one participant's chronological list of
pairings, and shortcuts to turn that history into sheets either from scratch
or by replaying it one game at a time. It is mostly used by tests and
fixtures; it has no database dependencies.
"""

from typing import List, Optional

from arenatour.arena_core.pairing import Pairing, Variant
from arenatour.arena_core.score import Result
from arenatour.arena_core.sheet import (
    EMPTY_SHEET,
    Sheet,
    add_result,
    build_from_scratch,
)
from arenatour.arena_core.version import Version


DEFAULT_TURNS = 40

# Letters accepted by ArenaHistoryBuilder.sequence()
SEQUENCE_RESULTS = {
    "W": Result.WIN,
    "D": Result.DRAW,
    "L": Result.LOSS,
    "Q": Result.DQ,
}


class ArenaHistoryBuilder:
    """Builder for a participant's pairing history, oldest game first."""

    def __init__(self, user: str = "me", variant: Variant = Variant.STANDARD):
        self.user = user
        self.variant = variant
        self._pairings: List[Pairing] = []
        self._next_opponent = 1

    def _opponent(self, opponent: Optional[str]) -> str:
        if opponent is not None:
            return opponent
        name = f"opponent{self._next_opponent}"
        self._next_opponent += 1
        return name

    def game(
        self,
        result: Result,
        berserk: bool = False,
        turns: Optional[int] = None,
        opponent: Optional[str] = None,
        opponent_berserk: bool = False,
    ) -> "ArenaHistoryBuilder":
        """Add a finished game with the given result for the participant.

        A DQ is a draw with fewer turns than a quick draw allows, so its
        default length is 10 turns.
        """
        opponent = self._opponent(opponent)

        if result == Result.WIN:
            winner = self.user
        elif result == Result.LOSS:
            winner = opponent
        else:
            winner = None

        if turns is None:
            turns = 10 if result == Result.DQ else DEFAULT_TURNS
        elif result == Result.DQ and turns >= 20:
            raise ValueError(f"A quick draw cannot last {turns} turns")
        elif result == Result.DRAW and turns < 20:
            raise ValueError(f"A {turns} turn draw is a quick draw, use quick_draw()")

        self._pairings.append(
            Pairing(
                user1=self.user,
                user2=opponent,
                winner=winner,
                turns=turns,
                berserk1=berserk,
                berserk2=opponent_berserk,
                variant=self.variant,
            )
        )
        return self

    def win(self, **kwargs) -> "ArenaHistoryBuilder":
        return self.game(Result.WIN, **kwargs)

    def loss(self, **kwargs) -> "ArenaHistoryBuilder":
        return self.game(Result.LOSS, **kwargs)

    def draw(self, **kwargs) -> "ArenaHistoryBuilder":
        return self.game(Result.DRAW, **kwargs)

    def quick_draw(self, **kwargs) -> "ArenaHistoryBuilder":
        return self.game(Result.DQ, **kwargs)

    def pairing(self, pairing: Pairing) -> "ArenaHistoryBuilder":
        """Add an already built pairing."""
        if not pairing.contains(self.user):
            raise ValueError(f"{self.user} did not play in {pairing}")
        self._pairings.append(pairing)
        return self

    def sequence(self, results: str, **kwargs) -> "ArenaHistoryBuilder":
        """Add several games at once, e.g. "WWLDQ" (oldest first).

        Spaces are ignored; extra keyword arguments apply to every game.
        """
        for letter in results.replace(" ", "").upper():
            if letter not in SEQUENCE_RESULTS:
                raise ValueError(f"Unknown result letter: {letter}")
            self.game(SEQUENCE_RESULTS[letter], **kwargs)
        return self

    def pairings(self) -> List[Pairing]:
        """Return the history built so far, oldest first."""
        return list(self._pairings)

    def rebuild(
        self, version: Version = Version.V2, streakable: bool = True
    ) -> Sheet:
        """Build the sheet from scratch from the whole history."""
        return build_from_scratch(self.user, self._pairings, version, streakable)

    def replay(self, streakable: bool = True, sheet: Sheet = EMPTY_SHEET) -> Sheet:
        """Build the sheet by adding the games one at a time."""
        for pairing in self._pairings:
            sheet = add_result(sheet, self.user, pairing, streakable)
        return sheet

    def sheets(self, streakable: bool = True) -> List[Sheet]:
        """Every intermediate sheet of a replay, after each game."""
        sheets = []
        sheet = EMPTY_SHEET
        for pairing in self._pairings:
            sheet = add_result(sheet, self.user, pairing, streakable)
            sheets.append(sheet)
        return sheets
