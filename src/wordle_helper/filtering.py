"""filtering.py

Narrow the dictionary to words consistent with every guess so far.

Each guess is checked on its own (correct, then present, then absent) and a
word survives only if it passes all of them, so the order of guesses doesn't
matter. UNKNOWN letters carry no information and are skipped.
"""

from typing import Iterable, List

from .models import Guess, GuessHistory, LetterState


def _passes_correct(word: str, guess: Guess) -> bool:
    return all(
        word[i] == gl.letter
        for i, gl in enumerate(guess.letters)
        if gl.state is LetterState.CORRECT
    )


def _passes_present(word: str, guess: Guess) -> bool:
    # present means "in the word, but not here"
    return all(
        gl.letter in word and word[i] != gl.letter
        for i, gl in enumerate(guess.letters)
        if gl.state is LetterState.PRESENT
    )


def _passes_absent(word: str, guess: Guess) -> bool:
    for i, gl in enumerate(guess.letters):
        if gl.state is not LetterState.ABSENT:
            continue
        if guess.confirmed_elsewhere(i):
            # duplicate letter: only this slot is ruled out
            if word[i] == gl.letter:
                return False
        elif gl.letter in word:
            return False
    return True


def matches_guess(word: str, guess: Guess) -> bool:
    """Check a single (uppercase) word against one guess's feedback."""
    return _passes_correct(word, guess) and _passes_present(word, guess) and _passes_absent(word, guess)


def is_consistent(word: str, history: GuessHistory) -> bool:
    return all(matches_guess(word, g) for g in history)


def filter_words(words: Iterable[str], history: GuessHistory) -> List[str]:
    """Return every word consistent with all guesses, uppercased, in input order.

    An empty history keeps everything.
    """
    history = tuple(history)
    upper = (w.upper() for w in words)
    return [w for w in upper if is_consistent(w, history)]
