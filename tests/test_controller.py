from itertools import permutations

import pytest

from wordle_helper.controller import (
    DISPLAY_LIMIT,
    MAX_GUESSES,
    HelperSession,
    displayed_candidates,
)
from wordle_helper.models import LetterState, parse_pattern

WORDS = ["SHALE", "WHALE", "PLATE", "FABLE", "AMPLE", "CABLE", "ANKLE"]


def test_new_session_lists_whole_dictionary():
    session = HelperSession(WORDS, source="test")
    view = session.view()
    assert view.candidate_count == len(WORDS)
    assert view.guesses == ()
    assert view.dictionary_size == len(WORDS)
    assert view.dictionary_source == "test"
    assert view.suggestion.word is not None


def test_each_edit_renders_once():
    views = []
    session = HelperSession(WORDS, render=views.append)
    assert len(views) == 1

    guess = session.add_guess("crane")
    assert len(views) == 2
    # all letters unknown, nothing filtered yet
    assert views[-1].candidate_count == len(WORDS)

    session.set_feedback(guess.id, "bbybg")
    assert len(views) == 3
    assert session.candidates == ["FABLE", "AMPLE"]
    assert views[-1].shown_candidates == ("FABLE", "AMPLE")


def test_toggle_and_remove_recompute_candidates():
    session = HelperSession(WORDS)
    guess = session.add_guess("crane", parse_pattern("bbyb."))

    # E: unknown -> correct
    updated = session.toggle_letter(guess.id, 4)
    assert updated.states[4] is LetterState.CORRECT
    assert session.candidates == ["FABLE", "AMPLE"]

    # -> present: E can't be last any more
    session.toggle_letter(guess.id, 4)
    assert session.candidates == []
    assert session.suggestion.word is None
    assert "No words match" in session.suggestion.rationale

    session.remove_guess(guess.id)
    assert session.history == ()
    assert session.candidates == WORDS


def test_history_is_replaced_not_mutated():
    session = HelperSession(WORDS)
    guess = session.add_guess("crane")
    before = session.history
    session.toggle_letter(guess.id, 0)
    assert before[0].states[0] is LetterState.UNKNOWN
    assert session.history is not before


def test_bad_edits_raise_value_error():
    session = HelperSession(WORDS)
    with pytest.raises(ValueError):
        session.add_guess("cran")
    with pytest.raises(ValueError):
        session.toggle_letter("nope", 0)
    with pytest.raises(ValueError):
        session.remove_guess("nope")

    guess = session.add_guess("crane")
    with pytest.raises(ValueError):
        session.toggle_letter(guess.id, 7)
    with pytest.raises(ValueError):
        session.set_feedback(guess.id, "gg")


def test_guess_limit():
    session = HelperSession(WORDS)
    for _ in range(MAX_GUESSES):
        session.add_guess("fable")
    assert not session.view().can_add_guess
    with pytest.raises(ValueError):
        session.add_guess("ample")


def test_few_candidates_rationale():
    session = HelperSession(WORDS)
    session.add_guess("crane", parse_pattern("bbybg"))
    assert session.suggestion.word == "FABLE"
    assert session.suggestion.rationale == "Only 2 possible words left."


def test_many_candidates_rationale():
    words = ["".join(p) for p in permutations("ABCDEFG", 5)][:60]
    session = HelperSession(words)
    assert session.suggestion.rationale.startswith("Tries ")
    assert "against 60 possible words" in session.suggestion.rationale


def test_display_cap():
    words = ["".join(p) for p in permutations("ABCDEFG", 5)]
    shown, hidden = displayed_candidates(words[:150])
    assert shown == tuple(words[:DISPLAY_LIMIT])
    assert hidden == 100

    shown, hidden = displayed_candidates(words[:100])
    assert len(shown) == 100
    assert hidden == 0
