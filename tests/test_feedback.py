"""Tests for numbrle.core.feedback – cell scoring, key colors and share text."""

from __future__ import annotations

from numbrle.core.feedback import (
    SHARE_EMOJI,
    SHARE_FOOTER,
    CellState,
    keyboard_states,
    score_guess,
    share_text,
)

C = CellState.CORRECT
P = CellState.PRESENT
A = CellState.ABSENT
E = CellState.EMPTY


# ---------------------------------------------------------------------------
# score_guess
# ---------------------------------------------------------------------------

class TestScoreGuess:
    def test_exact_match_all_correct(self):
        assert score_guess("6×7=42", 42) == [C] * 6

    def test_swapped_operands(self):
        # Reference is 6×7=42: a winning guess can still show yellow.
        assert score_guess("7×6=42", 42) == [P, C, P, C, C, C]

    def test_absent_characters(self):
        # Reference is 00+5=5.
        assert score_guess("10÷2=5", 5) == [A, C, A, A, C, C]

    def test_consumed_characters_not_reused(self):
        # The 4 and 2 on the right already matched, so the copies on the left are absent.
        assert score_guess("4×2=42", 42) == [A, C, A, C, C, C]

    def test_present_consumes_first_unused(self):
        # Reference 00+5=5 has two zeros, so the third zero of the guess is absent.
        assert score_guess("500=05", 5) == [P, C, P, P, A, C]

    def test_short_guess_leaves_empty_cells(self):
        assert score_guess("6×", 42) == [C, C, E, E, E, E]

    def test_fallback_reference(self):
        # Reference for 19 has no operator: 019=19.
        assert score_guess("019=19", 19) == [C] * 6

    def test_always_six_cells(self):
        assert len(score_guess("", 42)) == 6


# ---------------------------------------------------------------------------
# keyboard_states
# ---------------------------------------------------------------------------

class TestKeyboardStates:
    def test_no_guesses(self):
        assert keyboard_states([], 42) == {}

    def test_single_guess(self):
        states = keyboard_states(["7×6=42"], 42)
        assert states == {"7": P, "×": C, "6": P, "=": C, "4": C, "2": C}

    def test_present_upgraded_to_correct(self):
        states = keyboard_states(["7×6=42", "6×7=42"], 42)
        assert states["7"] is C
        assert states["6"] is C

    def test_correct_never_downgraded(self):
        states = keyboard_states(["6×7=42", "4×2=42"], 42)
        assert states["4"] is C
        assert states["2"] is C

    def test_absent_recorded(self):
        states = keyboard_states(["10÷2=5"], 5)
        assert states["1"] is A
        assert states["÷"] is A


# ---------------------------------------------------------------------------
# share_text
# ---------------------------------------------------------------------------

class TestShareText:
    def test_single_win(self):
        text = share_text(["6×7=42"], 42, 1)
        assert text == "Numbrle #1 1/6\n\n🟩🟩🟩🟩🟩🟩\n\nnumbrle.vercel.app"

    def test_content_lines(self):
        text = share_text(["6×7=42"], 42, 12)
        lines = [line for line in text.split("\n") if line]
        assert lines[0] == "Numbrle #12 1/6"
        assert lines[1] == "🟩" * 6
        assert lines[-1] == SHARE_FOOTER
        assert len(lines) == 3

    def test_rows_use_emoji_per_state(self):
        text = share_text(["7×6=42"], 42, 3)
        assert "🟨🟩🟨🟩🟩🟩" in text

    def test_multiple_rows(self):
        text = share_text(["7×6=42", "6×7=42"], 42, 3)
        assert text.startswith("Numbrle #3 2/6\n\n")
        assert "🟨🟩🟨🟩🟩🟩\n🟩🟩🟩🟩🟩🟩" in text

    def test_custom_footer(self):
        text = share_text(["6×7=42"], 42, 1, footer="example.org")
        assert text.endswith("\n\nexample.org")

    def test_emoji_map(self):
        assert SHARE_EMOJI[C] == "🟩"
        assert SHARE_EMOJI[P] == "🟨"
        assert SHARE_EMOJI[A] == "⬛"
        assert SHARE_EMOJI[E] == "⬜"
