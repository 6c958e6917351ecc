"""known_info.py

Fold a guess history into what we know about the answer's letters.
"""

from dataclasses import dataclass, field
from typing import Dict, Set

from .models import GuessHistory, LetterState


@dataclass
class KnownLetterInfo:
    correct_positions: Dict[int, str] = field(default_factory=dict)
    present_letters: Set[str] = field(default_factory=set)
    absent_letters: Set[str] = field(default_factory=set)
    # letter -> positions it is known not to occupy (from yellow tiles)
    wrong_positions: Dict[str, Set[int]] = field(default_factory=dict)


def extract_known_info(history: GuessHistory) -> KnownLetterInfo:
    """Collect correct slots, present/absent letters and ruled-out slots.

    A gray letter that is green or yellow elsewhere in the same guess is not
    recorded as absent (duplicate-letter feedback). Facts only accumulate;
    later guesses never retract anything.
    """
    info = KnownLetterInfo()
    for guess in history:
        for i, gl in enumerate(guess.letters):
            if gl.state is LetterState.CORRECT:
                info.correct_positions[i] = gl.letter
                info.present_letters.add(gl.letter)
            elif gl.state is LetterState.PRESENT:
                info.present_letters.add(gl.letter)
                info.wrong_positions.setdefault(gl.letter, set()).add(i)
            elif gl.state is LetterState.ABSENT:
                if not guess.confirmed_elsewhere(i):
                    info.absent_letters.add(gl.letter)
    return info
