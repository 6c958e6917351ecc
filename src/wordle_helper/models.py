"""models.py

Guesses and per-letter feedback as entered by the player.

A Guess is five GuessLetters plus an id used only to address it (toggle,
remove). Everything here is immutable; edits hand back new objects so the
session can replace its history wholesale.
"""

from __future__ import annotations

import enum
import re
import uuid
from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence, Tuple

WORD_LENGTH = 5
VOWELS = frozenset("AEIOU")


class LetterState(enum.Enum):
    UNKNOWN = "unknown"
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def confirms_letter(self) -> bool:
        """True for states that say the letter is in the answer."""
        return self in (LetterState.CORRECT, LetterState.PRESENT)

    def next(self) -> "LetterState":
        i = _TOGGLE_ORDER.index(self)
        return _TOGGLE_ORDER[(i + 1) % len(_TOGGLE_ORDER)]


_TOGGLE_ORDER = (LetterState.UNKNOWN, LetterState.CORRECT, LetterState.PRESENT, LetterState.ABSENT)

# g/y/b as typed after playing, 2/1/0 like the numeric patterns, ./? for "not set yet"
_PATTERN_CHARS = {
    "g": LetterState.CORRECT,
    "y": LetterState.PRESENT,
    "b": LetterState.ABSENT,
    "2": LetterState.CORRECT,
    "1": LetterState.PRESENT,
    "0": LetterState.ABSENT,
    ".": LetterState.UNKNOWN,
    "?": LetterState.UNKNOWN,
}


def parse_pattern(s: str) -> Tuple[LetterState, ...]:
    """Convert a string like 'bygyb', '02120' or 'g..y.' into five LetterStates."""
    s = s.strip().lower()
    if re.fullmatch(r"[gyb.?]{5}", s) or re.fullmatch(r"[012.?]{5}", s):
        return tuple(_PATTERN_CHARS[ch] for ch in s)
    raise ValueError("Pattern must be 5 chars of [g,y,b] or [2,1,0] ('.' = unknown). Example: 'bygyb' or '02120'.")


def normalize_word(word: str) -> str:
    """Uppercase and validate a guess; raises ValueError if it isn't 5 letters."""
    w = word.strip().upper()
    if len(w) != WORD_LENGTH or not w.isalpha():
        raise ValueError(f"Guess must be exactly {WORD_LENGTH} letters, got {word!r}.")
    return w


@dataclass(frozen=True)
class GuessLetter:
    letter: str
    state: LetterState = LetterState.UNKNOWN

    def toggled(self) -> "GuessLetter":
        return replace(self, state=self.state.next())


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Guess:
    letters: Tuple[GuessLetter, ...]
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if len(self.letters) != WORD_LENGTH:
            raise ValueError(f"A guess has exactly {WORD_LENGTH} letters, got {len(self.letters)}.")

    @classmethod
    def from_word(cls, word: str, states: Sequence[LetterState] | None = None) -> "Guess":
        w = normalize_word(word)
        if states is None:
            states = [LetterState.UNKNOWN] * WORD_LENGTH
        if len(states) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} letter states, got {len(states)}.")
        return cls(letters=tuple(GuessLetter(ch, st) for ch, st in zip(w, states)))

    @property
    def word(self) -> str:
        return "".join(gl.letter for gl in self.letters)

    @property
    def states(self) -> Tuple[LetterState, ...]:
        return tuple(gl.state for gl in self.letters)

    def toggled(self, index: int) -> "Guess":
        """Return a copy with the letter at index moved to its next state."""
        if not 0 <= index < WORD_LENGTH:
            raise ValueError(f"Letter index must be 0-{WORD_LENGTH - 1}, got {index}.")
        letters = tuple(gl.toggled() if i == index else gl for i, gl in enumerate(self.letters))
        return replace(self, letters=letters)

    def with_states(self, states: Sequence[LetterState]) -> "Guess":
        if len(states) != WORD_LENGTH:
            raise ValueError(f"Expected {WORD_LENGTH} letter states, got {len(states)}.")
        letters = tuple(replace(gl, state=st) for gl, st in zip(self.letters, states))
        return replace(self, letters=letters)

    def confirmed_elsewhere(self, index: int) -> bool:
        """Is the letter at index marked correct/present at some other position of this guess?

        This is Wordle's duplicate-letter rule: a gray tile for a letter that is
        green or yellow elsewhere in the same row only means "no more copies",
        not "not in the word".
        """
        letter = self.letters[index].letter
        return any(
            i != index and gl.letter == letter and gl.state.confirms_letter
            for i, gl in enumerate(self.letters)
        )


GuessHistory = Tuple[Guess, ...]


def history_from_pairs(pairs: Iterable[Tuple[str, str]]) -> GuessHistory:
    """Build a history from (word, pattern) pairs, e.g. [("crane", "bbygb")]."""
    return tuple(Guess.from_word(word, parse_pattern(pattern)) for word, pattern in pairs)
