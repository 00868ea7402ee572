"""
Fluent assertion interface for testing arena sheets.

Results are written with one letter per game, most recent first, the same
order as the sheet itself: W(in), D(raw), L(oss), Q(uick draw / DQ).
"""

from dataclasses import dataclass
from typing import Optional

from arenatour.arena_core.score import Berserk, Flag, Result, Score
from arenatour.arena_core.sheet import Sheet


RESULT_LETTERS = {
    Result.WIN: "W",
    Result.DRAW: "D",
    Result.LOSS: "L",
    Result.DQ: "Q",
}


def describe(sheet: Sheet) -> str:
    return "[" + ", ".join(str(score) for score in sheet.scores) + "]"


# Use the built-in AssertionError for proper test framework integration


@dataclass
class SheetAssertion:
    """Fluent interface for asserting the content of a sheet."""

    sheet: Sheet

    def total(self, expected: int) -> "SheetAssertion":
        """Assert the total points of the sheet."""
        if self.sheet.total != expected:
            raise AssertionError(
                f"Expected total {expected}, got {self.sheet.total} for {describe(self.sheet)}"
            )
        return self

    def on_fire(self, expected: bool = True) -> "SheetAssertion":
        if self.sheet.on_fire != expected:
            raise AssertionError(
                f"Expected on_fire={expected} for {describe(self.sheet)}"
            )
        return self

    def length(self, expected: int) -> "SheetAssertion":
        if len(self.sheet) != expected:
            raise AssertionError(
                f"Expected {expected} scores, got {len(self.sheet)}"
            )
        return self

    def results(self, expected: str) -> "SheetAssertion":
        """Assert the results, one letter per game, most recent first."""
        actual = "".join(RESULT_LETTERS[score.result] for score in self.sheet.scores)
        if actual != expected.replace(" ", "").upper():
            raise AssertionError(f"Expected results {expected}, got {actual}")
        return self

    def flags(self, *expected: Flag) -> "SheetAssertion":
        """Assert the flags of every score, most recent first."""
        actual = tuple(score.flag for score in self.sheet.scores)
        if actual != tuple(expected):
            raise AssertionError(
                f"Expected flags {[f.name for f in expected]}, "
                f"got {[f.name for f in actual]}"
            )
        return self

    def values(self, *expected: int) -> "SheetAssertion":
        """Assert the point value of every score, most recent first."""
        actual = tuple(score.value for score in self.sheet.scores)
        if actual != tuple(expected):
            raise AssertionError(f"Expected values {list(expected)}, got {list(actual)}")
        return self

    def score(
        self,
        index: int,
        result: Optional[Result] = None,
        flag: Optional[Flag] = None,
        berserk: Optional[Berserk] = None,
        value: Optional[int] = None,
    ) -> "SheetAssertion":
        """Assert fields of a single score (index 0 is the most recent game)."""
        if index >= len(self.sheet):
            raise AssertionError(
                f"No score at index {index}, sheet has {len(self.sheet)} scores"
            )

        actual: Score = self.sheet.scores[index]
        checks = [
            ("result", result, actual.result),
            ("flag", flag, actual.flag),
            ("berserk", berserk, actual.berserk),
            ("value", value, actual.value),
        ]
        for name, wanted, got in checks:
            if wanted is not None and wanted != got:
                raise AssertionError(
                    f"Score {index} expected {name} {wanted!r}, got {got!r}"
                )
        return self

    def same_points_as(self, other: Sheet) -> "SheetAssertion":
        """Assert game by game equal results, berserk states and values.

        Flags of older wins may still differ between a rebuilt and a replayed
        sheet (STREAK_STARTER against NORMAL), which is worth the same.
        """
        def points(sheet):
            return [(s.result, s.berserk, s.value) for s in sheet.scores]

        if points(self.sheet) != points(other):
            raise AssertionError(
                f"Sheets score differently:\n  {describe(self.sheet)}\n  {describe(other)}"
            )
        if self.sheet.on_fire != other.on_fire:
            raise AssertionError("Sheets disagree on on_fire")
        if self.sheet.scores and self.sheet.scores[0].flag != other.scores[0].flag:
            raise AssertionError(
                f"Latest flags differ: {self.sheet.scores[0].flag.name} "
                f"against {other.scores[0].flag.name}"
            )
        return self

    def equals(self, other: Sheet) -> "SheetAssertion":
        if self.sheet != other:
            raise AssertionError(
                f"Sheets differ:\n  {describe(self.sheet)}\n  {describe(other)}"
            )
        return self


def assert_sheet(sheet: Sheet) -> SheetAssertion:
    """Entry point for sheet assertions."""
    return SheetAssertion(sheet)

