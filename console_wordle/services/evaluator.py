"""
Guess Evaluator

Implements the Wordle letter evaluation algorithm.
"""

from collections import Counter
from typing import List, Optional, Sequence

from ..models.errors import InvalidGuessLength
from ..models.game import LetterStatus


def evaluate(secret: Sequence[str], guess: Sequence[str]) -> List[LetterStatus]:
    """
    Classifies each letter of a guess against the secret.

    Exact matches are granted first and each consumes one occurrence of its
    letter. Remaining positions are then scanned left to right and marked
    PRESENT while unconsumed occurrences of that letter are left, ABSENT
    otherwise. A letter therefore never earns more CORRECT/PRESENT marks
    than it has occurrences in the secret.

    Args:
        secret: The secret word (string or sequence of letters)
        guess: The guessed word, same length as the secret

    Returns:
        List[LetterStatus]: One classification per guess position

    Raises:
        InvalidGuessLength: If the guess and secret lengths differ
    """
    secret_chars = [char.upper() for char in secret]
    guess_chars = [char.upper() for char in guess]

    if len(guess_chars) != len(secret_chars):
        raise InvalidGuessLength(len(secret_chars), len(guess_chars))

    result: List[Optional[LetterStatus]] = [None] * len(guess_chars)
    remaining = Counter(secret_chars)

    # First pass: exact position matches
    for i, (g_char, s_char) in enumerate(zip(guess_chars, secret_chars)):
        if g_char == s_char:
            result[i] = LetterStatus.CORRECT
            remaining[g_char] -= 1

    # Second pass: misplaced letters, earliest position gets the credit
    for i, g_char in enumerate(guess_chars):
        if result[i] is not None:
            continue
        if remaining[g_char] > 0:
            result[i] = LetterStatus.PRESENT
            remaining[g_char] -= 1
        else:
            result[i] = LetterStatus.ABSENT

    return result


def is_solved(evaluation: Sequence[LetterStatus]) -> bool:
    """True if every position of an evaluation is CORRECT."""
    return bool(evaluation) and all(status == LetterStatus.CORRECT for status in evaluation)
