"""controller.py

HelperSession owns the guess history and the dictionary. Every edit replaces
the history, re-filters the full dictionary, re-runs the suggester and hands
the resulting HelperView to the render callback, all before returning.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .filtering import filter_words
from .known_info import extract_known_info
from .models import Guess, GuessHistory, LetterState, parse_pattern
from .scoring import DEFAULT_CONFIG, ScoringConfig, suggest_best_word

MAX_GUESSES = 6
# above this many matches only the first DISPLAY_LIMIT are listed
DISPLAY_THRESHOLD = 100
DISPLAY_LIMIT = 50

LogFn = Callable[[str], None]


@dataclass(frozen=True)
class Suggestion:
    word: Optional[str]
    rationale: str


@dataclass(frozen=True)
class HelperView:
    guesses: GuessHistory
    candidate_count: int
    shown_candidates: Tuple[str, ...]
    hidden_count: int
    suggestion: Suggestion
    dictionary_size: int
    dictionary_source: str

    @property
    def can_add_guess(self) -> bool:
        return len(self.guesses) < MAX_GUESSES


RenderFn = Callable[[HelperView], None]


def displayed_candidates(candidates: Sequence[str]) -> Tuple[Tuple[str, ...], int]:
    """(words to list, how many were left off)."""
    if len(candidates) > DISPLAY_THRESHOLD:
        return tuple(candidates[:DISPLAY_LIMIT]), len(candidates) - DISPLAY_LIMIT
    return tuple(candidates), 0


def explain_suggestion(
    word: Optional[str],
    candidates: Sequence[str],
    history: GuessHistory,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> str:
    n = len(candidates)
    if n == 0:
        return "No words match your current constraints. Check your guesses!"
    if n <= config.direct_answer_max and word is not None:
        return f"Only {n} possible word{'s' if n != 1 else ''} left."
    if word is None:
        return "No guess fits everything known so far; try one of the listed words."

    known = extract_known_info(history)
    tested = known.present_letters | known.absent_letters
    fresh = len(set(word) - tested)
    line = f"Tries {fresh} new letter{'s' if fresh != 1 else ''} against {n} possible words"
    if word in candidates:
        line += " and could be the answer"
    return line + "."


class HelperSession:
    def __init__(
        self,
        words: Sequence[str],
        *,
        source: str = "",
        config: ScoringConfig = DEFAULT_CONFIG,
        render: Optional[RenderFn] = None,
        log: Optional[LogFn] = None,
    ):
        self.words: Tuple[str, ...] = tuple(words)
        self.source = source
        self.config = config
        self.render = render
        self.log = log

        self.history: GuessHistory = ()
        self.candidates: List[str] = list(self.words)
        self.suggestion = Suggestion(None, "")
        self._recompute()

    # -- edits -----------------------------------------------------------

    def add_guess(self, word: str, states: Optional[Sequence[LetterState]] = None) -> Guess:
        """Append a guess; its letters start UNKNOWN unless states are given."""
        if len(self.history) >= MAX_GUESSES:
            raise ValueError(f"Maximum {MAX_GUESSES} guesses reached.")
        guess = Guess.from_word(word, states)
        self._replace_history(self.history + (guess,))
        return guess

    def toggle_letter(self, guess_id: str, index: int) -> Guess:
        pos = self._position_of(guess_id)
        updated = self.history[pos].toggled(index)
        self._replace_history(self.history[:pos] + (updated,) + self.history[pos + 1:])
        return updated

    def set_feedback(self, guess_id: str, pattern: str | Sequence[LetterState]) -> Guess:
        """Set all five states at once from 'bygyb'-style text or a state sequence."""
        states = parse_pattern(pattern) if isinstance(pattern, str) else tuple(pattern)
        pos = self._position_of(guess_id)
        updated = self.history[pos].with_states(states)
        self._replace_history(self.history[:pos] + (updated,) + self.history[pos + 1:])
        return updated

    def remove_guess(self, guess_id: str) -> None:
        pos = self._position_of(guess_id)
        self._replace_history(self.history[:pos] + self.history[pos + 1:])

    # -- derived state ---------------------------------------------------

    def view(self) -> HelperView:
        shown, hidden = displayed_candidates(self.candidates)
        return HelperView(
            guesses=self.history,
            candidate_count=len(self.candidates),
            shown_candidates=shown,
            hidden_count=hidden,
            suggestion=self.suggestion,
            dictionary_size=len(self.words),
            dictionary_source=self.source,
        )

    def _position_of(self, guess_id: str) -> int:
        for i, g in enumerate(self.history):
            if g.id == guess_id:
                return i
        raise ValueError(f"No guess with id {guess_id!r}.")

    def _replace_history(self, history: GuessHistory) -> None:
        self.history = history
        self._recompute()

    def _recompute(self) -> None:
        before = len(self.candidates)
        self.candidates = filter_words(self.words, self.history)
        word = suggest_best_word(self.candidates, self.words, self.history, self.config)
        self.suggestion = Suggestion(word, explain_suggestion(word, self.candidates, self.history, self.config))
        if self.log is not None:
            self.log(f"session: candidates {before} -> {len(self.candidates)}, suggestion={word}")
        if self.render is not None:
            self.render(self.view())
