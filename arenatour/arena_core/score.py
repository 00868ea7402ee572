"""
Scores of single arena games.

A score classifies one finished game from one participant's point of view:
the result, a streak flag and the berserk status. The three fields are kept
as plain enums in memory and only packed into a small integer at the storage
boundary.

Packed layout (part of the storage contract, do not change):

    bits 0-1: flag
    bits 2-3: berserk
    bits 4-5: result
"""

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Optional


FLAG_SHIFT = 0
BERSERK_SHIFT = 2
RESULT_SHIFT = 4
FIELD_MASK = 0x3
MAX_ENCODED = 0x3F


class Result(IntEnum):
    """Outcome of a game for the participant owning the sheet."""

    WIN = 0
    DRAW = 1
    LOSS = 2
    DQ = 3  # draw claimed too early, scored like a disqualification


class Flag(IntEnum):
    """Streak modifier applied to a win or a draw."""

    NULL = 0
    NORMAL = 1
    STREAK_STARTER = 2
    DOUBLE = 3


class Berserk(IntEnum):
    """Whether the participant berserked, and whether it earns the bonus."""

    NO = 0
    VALID = 1
    INVALID = 2


@dataclass(frozen=True)
class Score:
    """One game's contribution to a sheet."""

    result: Result
    flag: Flag = Flag.NORMAL
    berserk: Berserk = Berserk.NO

    @property
    def value(self) -> int:
        """Points earned by this game, berserk bonus included."""
        if self.result == Result.WIN:
            base = 4 if self.flag == Flag.DOUBLE else 2
        elif self.result == Result.DRAW:
            if self.flag == Flag.DOUBLE:
                base = 2
            elif self.flag == Flag.NULL:
                base = 0
            else:
                base = 1
        else:
            base = 0

        bonus = 1 if self.result == Result.WIN and self.berserk == Berserk.VALID else 0
        return base + bonus

    @property
    def is_win(self) -> Optional[bool]:
        """True for a win, False for a loss, None when the game was drawn or DQ'd."""
        if self.result == Result.WIN:
            return True
        if self.result == Result.LOSS:
            return False
        return None

    @property
    def is_draw(self) -> bool:
        return self.result == Result.DRAW

    @property
    def is_berserk(self) -> bool:
        return self.berserk != Berserk.NO

    def with_flag(self, flag: Flag) -> "Score":
        """Return a new Score with the flag replaced (immutable pattern)."""
        return replace(self, flag=flag)

    @property
    def encoded(self) -> int:
        return (
            (self.flag << FLAG_SHIFT)
            | (self.berserk << BERSERK_SHIFT)
            | (self.result << RESULT_SHIFT)
        )

    @classmethod
    def decode(cls, encoded: int) -> "Score":
        """
        Rebuild a Score from its packed integer form.

        Raises:
            ValueError: if the integer is not a valid packed score.
        """
        if isinstance(encoded, bool) or not isinstance(encoded, int):
            raise ValueError(f"Packed score must be an int, got {encoded!r}")
        if encoded < 0 or encoded > MAX_ENCODED:
            raise ValueError(f"Packed score {encoded} is out of range 0-{MAX_ENCODED}")

        berserk_code = (encoded >> BERSERK_SHIFT) & FIELD_MASK
        if berserk_code > max(Berserk):
            raise ValueError(
                f"Packed score {encoded} has unknown berserk code {berserk_code}"
            )

        return cls(
            result=Result((encoded >> RESULT_SHIFT) & FIELD_MASK),
            flag=Flag((encoded >> FLAG_SHIFT) & FIELD_MASK),
            berserk=Berserk(berserk_code),
        )

    def __str__(self) -> str:
        return f"{self.result.name}/{self.flag.name}/{self.berserk.name}"
