"""frequency.py

Letter statistics over the remaining candidates, used by the scorer.
"""

from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .models import VOWELS, WORD_LENGTH


@dataclass(frozen=True)
class LetterFrequencyStat:
    letter: str
    frequency: int  # number of candidates containing the letter at least once
    position_frequency: Tuple[int, ...]  # per-slot occurrence counts
    is_vowel: bool


def calculate_frequencies(candidates: Iterable[str]) -> List[LetterFrequencyStat]:
    """One stat per distinct letter, most frequent first (ties alphabetical).

    A word adds 1 to a letter's frequency however many times it uses it, but
    every occurrence counts towards the per-position slots.
    """
    doc_freq: Counter = Counter()
    pos_freq: Dict[str, List[int]] = defaultdict(lambda: [0] * WORD_LENGTH)

    for word in candidates:
        doc_freq.update(set(word))
        for i, ch in enumerate(word):
            pos_freq[ch][i] += 1

    stats = [
        LetterFrequencyStat(
            letter=ch,
            frequency=n,
            position_frequency=tuple(pos_freq[ch]),
            is_vowel=ch in VOWELS,
        )
        for ch, n in doc_freq.items()
    ]
    stats.sort(key=lambda s: (-s.frequency, s.letter))
    return stats


def frequency_table(stats: Iterable[LetterFrequencyStat]) -> Dict[str, LetterFrequencyStat]:
    return {s.letter: s for s in stats}
