"""
Arena scoring sheets.

A sheet is the ordered list of a participant's game scores, most recent game
first. It can be built from scratch from the whole pairing history, or grown
one game at a time as results come in. Both paths must score every game
the same:

- from scratch, a win is marked as a streak starter only if the next game is
  also won (or there is no next game yet)
- incrementally, every win that could start a streak is marked as a streak
  starter straight away, and the mark is taken back when the next game is not
  a win

Incremental updates for one participant must be applied in game order, one at
a time, each on the sheet returned by the previous call.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from arenatour.arena_core.pairing import Pairing
from arenatour.arena_core.score import Berserk, Flag, Result, Score
from arenatour.arena_core.version import Version

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sheet:
    """Scores of one participant, most recent first."""

    scores: Tuple[Score, ...] = ()

    @property
    def total(self) -> int:
        return sum(score.value for score in self.scores)

    @property
    def on_fire(self) -> bool:
        return is_on_fire(self.scores)

    def __len__(self) -> int:
        return len(self.scores)

    def __iter__(self) -> Iterator[Score]:
        return iter(self.scores)

    def encoded(self) -> List[int]:
        """Packed scores for storage, most recent first."""
        return [score.encoded for score in self.scores]

    @classmethod
    def decode(cls, encoded: Iterable[int]) -> "Sheet":
        """Rebuild a sheet from stored packed scores (most recent first)."""
        return cls(tuple(Score.decode(value) for value in encoded))


EMPTY_SHEET = Sheet()


def is_on_fire(scores: Sequence[Score]) -> bool:
    """Whether the two most recent games were both won."""
    return (
        len(scores) >= 2
        and scores[0].result == Result.WIN
        and scores[1].result == Result.WIN
    )


def is_draw_streak(scores: Sequence[Score]) -> bool:
    """
    Whether the games since the last win are losses preceded by a draw.

    Walks back from the most recent game: a draw (or DQ) means a streak, a win
    means none, and losses are skipped over.
    """
    for score in scores:
        is_win = score.is_win
        if is_win is None:
            return True
        if is_win:
            return False
    return False


def berserk_of(user_id: str, pairing: Pairing) -> Berserk:
    if not pairing.berserk_of(user_id):
        return Berserk.NO
    return Berserk.VALID if pairing.not_so_quick_finish else Berserk.INVALID


def build_from_scratch(
    user_id: str,
    pairings: Sequence[Pairing],
    version: Version,
    streakable: bool,
) -> Sheet:
    """
    Compute the sheet of a participant from their whole pairing history.

    Args:
        user_id: Participant owning the sheet
        pairings: Every pairing of the participant, oldest first
        version: Scoring rule generation of the tournament
        streakable: Whether win streaks double points in this tournament

    Returns:
        Sheet with the most recent game first
    """
    scores: Tuple[Score, ...] = ()
    nexts: List[Optional[Pairing]] = list(pairings[1:]) + [None]

    for pairing, next_pairing in zip(pairings, nexts):
        berserk = berserk_of(user_id, pairing)

        if pairing.winner is None and pairing.quick_draw:
            score = Score(Result.DQ, Flag.NORMAL, berserk)
        elif pairing.winner is None:
            if streakable and is_on_fire(scores):
                flag = Flag.DOUBLE
            elif (
                version != Version.V1
                and not pairing.long_game
                and is_draw_streak(scores)
            ):
                flag = Flag.NULL
            else:
                flag = Flag.NORMAL
            score = Score(Result.DRAW, flag, berserk)
        elif pairing.winner == user_id:
            if not streakable:
                flag = Flag.NORMAL
            elif is_on_fire(scores):
                flag = Flag.DOUBLE
            elif scores and scores[0].flag == Flag.STREAK_STARTER:
                flag = Flag.STREAK_STARTER
            elif next_pairing is None or next_pairing.won_by(user_id):
                flag = Flag.STREAK_STARTER
            else:
                flag = Flag.NORMAL
            score = Score(Result.WIN, flag, berserk)
        else:
            score = Score(Result.LOSS, Flag.NORMAL, berserk)

        scores = (score,) + scores

    logger.debug(
        "Rebuilt sheet of %s from %d pairings (%s, streakable=%s)",
        user_id,
        len(pairings),
        version.name,
        streakable,
    )
    return Sheet(scores)


def add_result(
    sheet: Sheet, user_id: str, pairing: Pairing, streakable: bool
) -> Sheet:
    """
    Add the result of the participant's latest pairing to their sheet.

    Wins are optimistically flagged as streak starters. If the previous game
    carries that flag and this one is not a win, the previous score is demoted
    back to normal before the new score is prepended.
    """
    scores = sheet.scores
    berserk = berserk_of(user_id, pairing)

    if pairing.winner is None and pairing.quick_draw:
        score = Score(Result.DQ, Flag.NORMAL, berserk)
    elif pairing.winner is None:
        # No Version gate here, unlike build_from_scratch
        if streakable and is_on_fire(scores):
            flag = Flag.DOUBLE
        elif not pairing.long_game and is_draw_streak(scores):
            flag = Flag.NULL
        else:
            flag = Flag.NORMAL
        score = Score(Result.DRAW, flag, berserk)
    elif pairing.winner == user_id:
        if not streakable:
            flag = Flag.NORMAL
        elif is_on_fire(scores):
            flag = Flag.DOUBLE
        else:
            flag = Flag.STREAK_STARTER
        score = Score(Result.WIN, flag, berserk)
    else:
        score = Score(Result.LOSS, Flag.NORMAL, berserk)

    previous = scores[0] if scores else None
    if (
        previous is not None
        and previous.flag == Flag.STREAK_STARTER
        and not pairing.won_by(user_id)
    ):
        logger.debug("Streak of %s broken, demoting previous win", user_id)
        scores = (previous.with_flag(Flag.NORMAL),) + scores[1:]

    return Sheet((score,) + scores)
