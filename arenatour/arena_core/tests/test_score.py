"""
Tests for single game scores and their packed storage form.
"""

import itertools
import unittest

from arenatour.arena_core.score import Berserk, Flag, Result, Score


class ScoreValueTests(unittest.TestCase):
    """Test the point table."""

    def test_win_values(self):
        self.assertEqual(Score(Result.WIN, Flag.DOUBLE, Berserk.NO).value, 4)
        self.assertEqual(Score(Result.WIN, Flag.NORMAL, Berserk.NO).value, 2)
        self.assertEqual(Score(Result.WIN, Flag.STREAK_STARTER, Berserk.NO).value, 2)
        self.assertEqual(Score(Result.WIN, Flag.NULL, Berserk.NO).value, 2)

    def test_berserk_bonus_only_for_valid_wins(self):
        self.assertEqual(Score(Result.WIN, Flag.NORMAL, Berserk.VALID).value, 3)
        self.assertEqual(Score(Result.WIN, Flag.DOUBLE, Berserk.VALID).value, 5)
        self.assertEqual(Score(Result.WIN, Flag.NORMAL, Berserk.INVALID).value, 2)
        self.assertEqual(Score(Result.DRAW, Flag.NORMAL, Berserk.VALID).value, 1)
        self.assertEqual(Score(Result.LOSS, Flag.NORMAL, Berserk.VALID).value, 0)

    def test_draw_values(self):
        self.assertEqual(Score(Result.DRAW, Flag.DOUBLE, Berserk.NO).value, 2)
        self.assertEqual(Score(Result.DRAW, Flag.NULL, Berserk.NO).value, 0)
        self.assertEqual(Score(Result.DRAW, Flag.NORMAL, Berserk.NO).value, 1)
        self.assertEqual(Score(Result.DRAW, Flag.STREAK_STARTER, Berserk.NO).value, 1)

    def test_loss_and_dq_are_worthless(self):
        for flag, berserk in itertools.product(Flag, Berserk):
            self.assertEqual(Score(Result.LOSS, flag, berserk).value, 0)
            self.assertEqual(Score(Result.DQ, flag, berserk).value, 0)

    def test_every_combination_has_a_value(self):
        for result, flag, berserk in itertools.product(Result, Flag, Berserk):
            value = Score(result, flag, berserk).value
            self.assertIn(value, range(0, 6))


class ScorePredicateTests(unittest.TestCase):

    def test_is_win(self):
        self.assertIs(Score(Result.WIN).is_win, True)
        self.assertIs(Score(Result.LOSS).is_win, False)
        self.assertIsNone(Score(Result.DRAW).is_win)
        self.assertIsNone(Score(Result.DQ).is_win)

    def test_is_draw(self):
        self.assertTrue(Score(Result.DRAW).is_draw)
        self.assertFalse(Score(Result.DQ).is_draw)
        self.assertFalse(Score(Result.WIN).is_draw)

    def test_is_berserk(self):
        self.assertFalse(Score(Result.WIN, berserk=Berserk.NO).is_berserk)
        self.assertTrue(Score(Result.WIN, berserk=Berserk.VALID).is_berserk)
        self.assertTrue(Score(Result.LOSS, berserk=Berserk.INVALID).is_berserk)

    def test_with_flag_returns_a_new_score(self):
        original = Score(Result.WIN, Flag.STREAK_STARTER, Berserk.VALID)
        demoted = original.with_flag(Flag.NORMAL)

        self.assertEqual(demoted, Score(Result.WIN, Flag.NORMAL, Berserk.VALID))
        self.assertEqual(original.flag, Flag.STREAK_STARTER)

    def test_scores_are_immutable(self):
        score = Score(Result.WIN)
        with self.assertRaises(AttributeError):
            score.flag = Flag.DOUBLE


class ScoreEncodingTests(unittest.TestCase):
    """Test the packed integer form used for storage."""

    def test_bit_layout(self):
        self.assertEqual(Score(Result.WIN, Flag.NULL, Berserk.NO).encoded, 0)
        self.assertEqual(Score(Result.WIN, Flag.DOUBLE, Berserk.NO).encoded, 0b000011)
        self.assertEqual(Score(Result.WIN, Flag.NULL, Berserk.INVALID).encoded, 0b001000)
        self.assertEqual(Score(Result.DRAW, Flag.NORMAL, Berserk.NO).encoded, 0b010001)
        self.assertEqual(Score(Result.LOSS, Flag.NORMAL, Berserk.VALID).encoded, 0b100101)
        self.assertEqual(Score(Result.DQ, Flag.DOUBLE, Berserk.INVALID).encoded, 0b111011)

    def test_decode_recovers_every_score(self):
        seen = set()
        for result, flag, berserk in itertools.product(Result, Flag, Berserk):
            score = Score(result, flag, berserk)
            decoded = Score.decode(score.encoded)
            self.assertEqual(
                (decoded.result, decoded.flag, decoded.berserk),
                (result, flag, berserk),
            )
            seen.add(score.encoded)

        # 4 results x 4 flags x 3 berserk states, all distinct
        self.assertEqual(len(seen), 48)

    def test_decode_rejects_out_of_range(self):
        for encoded in (-1, 64, 1000):
            with self.assertRaises(ValueError):
                Score.decode(encoded)

    def test_decode_rejects_unused_berserk_code(self):
        with self.assertRaises(ValueError):
            Score.decode(0b001100)

    def test_decode_rejects_non_integers(self):
        for encoded in ("3", 3.0, None, True):
            with self.assertRaises(ValueError):
                Score.decode(encoded)


if __name__ == "__main__":
    unittest.main()
