"""scoring.py

Heuristic next-guess suggestions.

This is deliberately a single pass: every word in the pool gets an additive
score from letter frequencies over the remaining candidates plus a handful of
bonuses. No expected-information computation over feedback patterns.

Words that contradict what we already know are Disqualified rather than given a
huge negative score, so callers can drop them without a magic cutoff.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

import tqdm

from .frequency import LetterFrequencyStat, calculate_frequencies, frequency_table
from .known_info import KnownLetterInfo, extract_known_info
from .models import VOWELS, WORD_LENGTH, GuessHistory

DEFAULT_OPENERS = ("SLATE", "CRANE", "TRACE", "CRATE", "STARE", "AROSE", "RAISE", "ADIEU")


@dataclass(frozen=True)
class ScoringConfig:
    distinct_letters_bonus: float = 50.0
    fresh_slot_bonus: float = 30.0
    new_letter_weight: float = 1.5
    known_letter_weight: float = 0.5
    position_weight: float = 2.0
    new_vowel_bonus: float = 15.0
    vowel_balance_bonus: float = 20.0
    vowel_balance_range: Tuple[int, int] = (2, 3)
    opener_bonus: float = 100.0
    # opener bonus only while at least this many candidates remain
    opener_min_candidates: int = 1000
    openers: Tuple[str, ...] = DEFAULT_OPENERS
    # with this few candidates left, just suggest the first one
    direct_answer_max: int = 3
    # above this many candidates, score the whole dictionary
    full_dictionary_threshold: int = 50
    max_pool_size: int = 5000


DEFAULT_CONFIG = ScoringConfig()


@dataclass(frozen=True)
class Disqualified:
    reason: str = ""


@dataclass(frozen=True)
class Scored:
    value: float


ScoreOutcome = Union[Disqualified, Scored]


def disqualify_reason(word: str, known: KnownLetterInfo) -> Optional[str]:
    """Why word can't be the answer given known, or None if it still can."""
    letters = set(word)
    absent = sorted(known.absent_letters & letters)
    if absent:
        return f"contains absent letter {absent[0]}"
    missing = sorted(known.present_letters - letters)
    if missing:
        return f"missing present letter {missing[0]}"
    for i, ch in sorted(known.correct_positions.items()):
        if word[i] != ch:
            return f"needs {ch} at position {i + 1}"
    for ch, positions in known.wrong_positions.items():
        for i in positions:
            if word[i] == ch:
                return f"{ch} can't be at position {i + 1}"
    return None


def score_word(
    word: str,
    frequencies: Dict[str, LetterFrequencyStat],
    known: KnownLetterInfo,
    candidates: Sequence[str],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ScoreOutcome:
    reason = disqualify_reason(word, known)
    if reason is not None:
        return Disqualified(reason)

    score = 0.0
    if len(set(word)) == WORD_LENGTH:
        score += config.distinct_letters_bonus

    for i, ch in enumerate(word):
        if ch in known.present_letters:
            # reward moving a known letter into a slot we haven't tried
            if i not in known.wrong_positions.get(ch, ()) and known.correct_positions.get(i) != ch:
                score += config.fresh_slot_bonus

        stat = frequencies.get(ch)
        freq = stat.frequency if stat else 0
        if ch in known.present_letters:
            score += config.known_letter_weight * freq
        else:
            pos_freq = stat.position_frequency[i] if stat else 0
            score += config.new_letter_weight * freq + config.position_weight * pos_freq
            if ch in VOWELS:
                score += config.new_vowel_bonus

    lo, hi = config.vowel_balance_range
    if lo <= sum(1 for ch in word if ch in VOWELS) <= hi:
        score += config.vowel_balance_bonus

    if (
        len(candidates) >= config.opener_min_candidates
        and not known.correct_positions
        and word in config.openers
    ):
        score += config.opener_bonus

    return Scored(score)


def scoring_pool(
    candidates: Sequence[str],
    dictionary: Sequence[str],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> List[str]:
    """Words to score.

    While many candidates remain this is the head of the dictionary (guesses need
    not be possible answers), topped up with any candidates the cap cut off so
    there is always something that can qualify. Otherwise just the candidates.
    """
    if len(candidates) <= config.full_dictionary_threshold:
        return list(candidates[: config.max_pool_size])
    pool = list(dictionary[: config.max_pool_size])
    seen = set(pool)
    pool.extend(w for w in candidates if w not in seen)
    return pool


def rank_words(
    candidates: Sequence[str],
    dictionary: Sequence[str],
    history: GuessHistory,
    config: ScoringConfig = DEFAULT_CONFIG,
    top_k: int = 10,
    show_progress: bool = False,
) -> List[Tuple[str, float]]:
    """Top top_k (word, score) pairs, best first. Words are compared uppercased."""
    candidates = [w.upper() for w in candidates]
    if not candidates:
        return []

    # if candidates are tiny, just return them
    if len(candidates) <= config.direct_answer_max:
        return [(w, 0.0) for w in candidates][:top_k]

    known = extract_known_info(history)
    frequencies = frequency_table(calculate_frequencies(candidates))
    pool = scoring_pool(candidates, [w.upper() for w in dictionary], config)

    iterator = tqdm.tqdm(pool, desc="Scoring guesses", unit="word") if show_progress else pool
    scored: List[Tuple[str, float]] = []
    for w in iterator:
        outcome = score_word(w, frequencies, known, candidates, config)
        if isinstance(outcome, Scored):
            scored.append((w, outcome.value))

    scored.sort(key=lambda x: x[1], reverse=True)
    return scored[:top_k]


def suggest_best_word(
    candidates: Sequence[str],
    dictionary: Sequence[str],
    history: GuessHistory,
    config: ScoringConfig = DEFAULT_CONFIG,
    show_progress: bool = False,
) -> Optional[str]:
    """The single best next guess, or None if nothing qualifies."""
    ranked = rank_words(candidates, dictionary, history, config, top_k=1, show_progress=show_progress)
    return ranked[0][0] if ranked else None
