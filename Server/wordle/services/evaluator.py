"""
Guess Evaluator

Pure comparison of a guess against the target word.
"""

from typing import List, Optional

from ..models.game import LetterStatus


def evaluate_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Implements the two-pass Wordle letter evaluation.

    Exact matches are marked first and consumed, so a repeated guess letter
    is only marked misplaced while unmatched copies remain in the target.

    Args:
        guess: The submitted word
        target: The hidden word, same length as guess

    Returns:
        One LetterStatus per position

    Raises:
        ValueError: If the two words differ in length
    """
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' and target differ in length")

    result: List[Optional[LetterStatus]] = [None] * len(guess)

    # Working copy to track letter consumption
    target_chars: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target_chars[i]:
            result[i] = LetterStatus.CORRECT
            target_chars[i] = None

    # Second pass: present elsewhere or absent
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue
        if letter in target_chars:
            result[i] = LetterStatus.MISPLACED
            # Consume the first remaining occurrence only
            target_chars[target_chars.index(letter)] = None
        else:
            result[i] = LetterStatus.WRONG

    return result  # type: ignore[return-value]
