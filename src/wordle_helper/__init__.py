"""Wordle helper package."""

from .controller import HelperSession, HelperView, Suggestion
from .dictionary import WordList, load_dictionary, load_words_from_file
from .filtering import filter_words
from .frequency import LetterFrequencyStat, calculate_frequencies
from .known_info import KnownLetterInfo, extract_known_info
from .models import Guess, GuessHistory, GuessLetter, LetterState, parse_pattern
from .scoring import (
    Disqualified,
    Scored,
    ScoringConfig,
    rank_words,
    score_word,
    suggest_best_word,
)

__all__ = [
    "Disqualified",
    "Guess",
    "GuessHistory",
    "GuessLetter",
    "HelperSession",
    "HelperView",
    "KnownLetterInfo",
    "LetterFrequencyStat",
    "LetterState",
    "Scored",
    "ScoringConfig",
    "Suggestion",
    "WordList",
    "calculate_frequencies",
    "extract_known_info",
    "filter_words",
    "load_dictionary",
    "load_words_from_file",
    "parse_pattern",
    "rank_words",
    "score_word",
    "suggest_best_word",
]
