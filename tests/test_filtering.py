from wordle_helper.filtering import filter_words, matches_guess
from wordle_helper.models import Guess, LetterState, history_from_pairs

WORDS = ["SHALE", "WHALE", "PLATE", "FABLE", "AMPLE", "CABLE", "ANKLE"]


def test_empty_history_keeps_every_word():
    assert filter_words(WORDS, ()) == WORDS


def test_all_correct_keeps_only_that_word():
    history = history_from_pairs([("crane", "ggggg")])
    assert filter_words(["CRANE"], history) == ["CRANE"]
    assert filter_words(["CRANE", "CRATE", "TRACE"], history) == ["CRANE"]


def test_unknown_letters_carry_no_constraint():
    history = (Guess.from_word("crane"),)
    assert filter_words(WORDS, history) == WORDS


def test_filter_is_idempotent():
    history = history_from_pairs([("crane", "bbybg")])
    once = filter_words(WORDS, history)
    assert filter_words(once, history) == once


def test_crane_feedback():
    # C, R, N gray; A yellow (so not in slot 3); E green at the end
    history = history_from_pairs([("crane", "bbybg")])
    remaining = filter_words(WORDS, history)

    assert remaining == ["FABLE", "AMPLE"]
    # these all put A where it was yellow
    for w in ("SHALE", "WHALE", "PLATE"):
        assert w not in remaining
    assert "CABLE" not in remaining  # has C
    assert "ANKLE" not in remaining  # has N


def test_present_letter_must_appear_elsewhere():
    guess = Guess.from_word("crane", [LetterState.UNKNOWN, LetterState.UNKNOWN, LetterState.PRESENT,
                                      LetterState.UNKNOWN, LetterState.UNKNOWN])
    assert matches_guess("ABIDE", guess)
    assert not matches_guess("SHALE", guess)  # A in the same slot
    assert not matches_guess("BLOOD", guess)  # no A at all


def test_duplicate_letter_gray_only_rules_out_its_slot():
    # secret SPEND, guessed SPEED: the second E comes back gray
    history = history_from_pairs([("speed", "gggbg")])
    remaining = filter_words(["SPEND", "SPEED", "SPELD"], history)
    assert remaining == ["SPEND", "SPELD"]


def test_sassy_first_s_correct_other_copies_gray():
    history = history_from_pairs([("sassy", "gbbbb")])
    remaining = filter_words(["SHORT", "SOLID", "SUSHI", "SLOSH", "MOIST"], history)
    assert remaining == ["SHORT", "SOLID"]


def test_sassy_gray_s_does_not_ban_the_letter():
    # only the second S is marked, so a word with a single S in the green slot passes
    states = [LetterState.CORRECT, LetterState.UNKNOWN, LetterState.ABSENT,
              LetterState.UNKNOWN, LetterState.UNKNOWN]
    history = (Guess.from_word("sassy", states),)
    remaining = filter_words(["SHORT", "SUSHI", "PROMS"], history)
    assert remaining == ["SHORT"]


def test_sassy_second_s_allowed_outside_gray_slots():
    # S at index 4 sits under SASSY's gray Y, not under a gray S
    history = history_from_pairs([("sassy", "gbbbb")])
    assert filter_words(["SHIPS", "SHIES"], history) == ["SHIPS", "SHIES"]
    assert filter_words(["SHISH"], history) == []


def test_lowercase_words_come_back_uppercase():
    history = history_from_pairs([("crane", "bbybg")])
    assert filter_words(["fable", "Ample", "shale"], history) == ["FABLE", "AMPLE"]


def test_triple_letter_mixed_states_resolve_per_position():
    # E green at 1, yellow at 2, gray at 4: each slot is judged on its own
    states = [LetterState.UNKNOWN, LetterState.CORRECT, LetterState.PRESENT,
              LetterState.UNKNOWN, LetterState.ABSENT]
    history = (Guess.from_word("geese", states),)
    # E at 1, no E at 2 or 4
    assert filter_words(["REVEL", "TEPEE", "HELLO", "EERIE"], history) == ["REVEL", "HELLO"]


def test_guess_order_does_not_matter():
    a = history_from_pairs([("crane", "bbybg"), ("ample", "ybbbg")])
    b = tuple(reversed(a))
    assert filter_words(WORDS, a) == filter_words(WORDS, b)
