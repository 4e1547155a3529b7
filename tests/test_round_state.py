"""
Unit tests for RoundState.
"""

import pytest
from hypothesis import given, strategies as st

from console_wordle.config.game_settings import BOARD_ROWS
from console_wordle.models.errors import (
    InvalidGuessCharacters, InvalidGuessLength, RoundAlreadyComplete, RoundNotStarted,
)
from console_wordle.models.game import LetterStatus, RoundStatus
from console_wordle.services.round_state import RoundState

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


class TestRoundLifecycle:

    def test_start_has_empty_history(self):
        round_state = RoundState()
        round_state.start("crane")
        assert round_state.secret == "CRANE"
        assert round_state.history == []
        assert round_state.status == RoundStatus.IN_PROGRESS
        assert round_state.remaining_attempts == BOARD_ROWS

    def test_submit_before_start(self):
        with pytest.raises(RoundNotStarted):
            RoundState().submit_guess("CRANE")

    def test_end_to_end_crane(self):
        """Secret CRANE, guesses ABIDE, ALGAE, CRANE."""
        round_state = RoundState("CRANE")

        evaluation, status = round_state.submit_guess("ABIDE")
        assert evaluation == [P, A, A, A, C]
        assert status == RoundStatus.IN_PROGRESS

        evaluation, status = round_state.submit_guess("ALGAE")
        assert evaluation == [P, A, A, A, C]
        assert status == RoundStatus.IN_PROGRESS

        evaluation, status = round_state.submit_guess("CRANE")
        assert evaluation == [C] * 5
        assert status == RoundStatus.WON

        assert round_state.won
        assert round_state.is_complete
        assert round_state.guesses_taken == 3
        assert [record.guess for record in round_state.history] == ["ABIDE", "ALGAE", "CRANE"]

    def test_win_on_first_guess(self):
        round_state = RoundState("SPEED")
        _, status = round_state.submit_guess("SPEED")
        assert status == RoundStatus.WON
        assert round_state.guesses_taken == 1

    def test_win_on_last_attempt(self):
        round_state = RoundState("CRANE")
        for _ in range(BOARD_ROWS - 1):
            round_state.submit_guess("ABIDE")
        _, status = round_state.submit_guess("CRANE")
        assert status == RoundStatus.WON
        assert round_state.guesses_taken == BOARD_ROWS

    def test_lost_after_all_attempts(self):
        round_state = RoundState("CRANE")
        statuses = [round_state.submit_guess("ABIDE")[1] for _ in range(BOARD_ROWS)]
        assert statuses[:-1] == [RoundStatus.IN_PROGRESS] * (BOARD_ROWS - 1)
        assert statuses[-1] == RoundStatus.LOST
        assert not round_state.won
        assert round_state.remaining_attempts == 0

    @pytest.mark.parametrize("finish", ["CRANE", None])
    def test_guess_after_round_over(self, finish):
        round_state = RoundState("CRANE")
        if finish:
            round_state.submit_guess(finish)
        else:
            for _ in range(BOARD_ROWS):
                round_state.submit_guess("ABIDE")
        with pytest.raises(RoundAlreadyComplete):
            round_state.submit_guess("CRANE")
        assert round_state.guesses_taken <= BOARD_ROWS

    def test_start_begins_a_fresh_round(self):
        round_state = RoundState("CRANE")
        round_state.submit_guess("CRANE")
        round_state.start("ABIDE")
        assert round_state.status == RoundStatus.IN_PROGRESS
        assert round_state.history == []
        assert round_state.secret == "ABIDE"

    def test_custom_attempt_limit(self):
        round_state = RoundState("CRANE", max_attempts=2)
        round_state.submit_guess("ABIDE")
        _, status = round_state.submit_guess("ALGAE")
        assert status == RoundStatus.LOST

    def test_history_is_a_copy(self):
        round_state = RoundState("CRANE")
        round_state.submit_guess("ABIDE")
        round_state.history.clear()
        assert round_state.guesses_taken == 1


class TestGuessValidation:

    @pytest.mark.parametrize("guess", ["CRAN", "CRANES", "", "   "])
    def test_wrong_length(self, guess):
        round_state = RoundState("CRANE")
        with pytest.raises(InvalidGuessLength):
            round_state.submit_guess(guess)
        assert round_state.guesses_taken == 0

    @pytest.mark.parametrize("guess", ["CR4NE", "CRAN!", "C ANE", "CRÄNE"])
    def test_non_letters(self, guess):
        round_state = RoundState("CRANE")
        with pytest.raises(InvalidGuessCharacters):
            round_state.submit_guess(guess)
        assert round_state.guesses_taken == 0

    def test_guess_is_normalized(self):
        round_state = RoundState("CRANE")
        _, status = round_state.submit_guess("  crane\n")
        assert status == RoundStatus.WON
        assert round_state.history[0].guess == "CRANE"

    def test_bad_secret(self):
        with pytest.raises(InvalidGuessLength):
            RoundState("CRANES")
        with pytest.raises(InvalidGuessCharacters):
            RoundState("CRAN3")


class TestRoundProperties:

    @given(
        st.text(alphabet="AB", min_size=5, max_size=5),
        st.lists(st.text(alphabet="AB", min_size=5, max_size=5), min_size=1, max_size=10),
    )
    def test_won_iff_some_guess_matches_within_limit(self, secret, guesses):
        round_state = RoundState(secret)
        played = []
        for guess in guesses:
            if round_state.is_complete:
                with pytest.raises(RoundAlreadyComplete):
                    round_state.submit_guess(guess)
                break
            round_state.submit_guess(guess)
            played.append(guess)

        assert round_state.won == (secret in played)
        if secret in played:
            assert round_state.guesses_taken == played.index(secret) + 1
        elif len(played) == BOARD_ROWS:
            assert round_state.status == RoundStatus.LOST
        else:
            assert round_state.status == RoundStatus.IN_PROGRESS
