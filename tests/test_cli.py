import pytest

from wordle_helper import cli
from wordle_helper.controller import HelperSession
from wordle_helper.models import LetterState

WORDS = ["SHALE", "WHALE", "PLATE", "FABLE", "AMPLE", "CABLE", "ANKLE"]


def asker(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def test_word_then_pattern_adds_guess():
    session = HelperSession(WORDS)
    assert cli.handle_command(session, "crane", asker("bbybg"))
    assert session.history[0].word == "CRANE"
    assert session.candidates == ["FABLE", "AMPLE"]


def test_enter_uses_suggestion_and_blank_pattern_leaves_unknown():
    session = HelperSession(WORDS)
    suggested = session.suggestion.word
    cli.handle_command(session, "", asker(""))
    assert session.history[0].word == suggested
    assert session.history[0].states == (LetterState.UNKNOWN,) * 5


def test_number_picks_listed_word():
    session = HelperSession(WORDS)
    cli.handle_command(session, "2", asker("....."))
    assert session.history[0].word == "WHALE"


def test_toggle_and_remove_commands():
    session = HelperSession(WORDS)
    cli.handle_command(session, "crane", asker(""))
    cli.handle_command(session, "toggle 1 5", asker())
    assert session.history[0].states[4] is LetterState.CORRECT

    cli.handle_command(session, "remove 1", asker())
    assert session.history == ()


def test_bad_pattern_does_not_add_guess():
    session = HelperSession(WORDS)
    with pytest.raises(ValueError):
        cli.handle_command(session, "crane", asker("xyz"))
    assert session.history == ()


@pytest.mark.parametrize("line", ["toggle 1", "toggle 9 1", "remove x", "99", "abc"])
def test_bad_commands_raise_value_error(line):
    session = HelperSession(WORDS)
    with pytest.raises(ValueError):
        cli.handle_command(session, line, asker(""))


def test_quit():
    assert cli.handle_command(HelperSession(WORDS), "quit", asker()) is False


def test_format_view_caps_long_lists():
    words = [f"{a}{b}CDE" for a in "ABFGHIJKLM" for b in "NOPQRSTUVWXYZ"]
    lines = cli.format_view(HelperSession(words).view())
    assert f"Possible words ({len(words)}):" in lines
    assert f"  +{len(words) - 50} more..." in lines


def test_cli_session(monkeypatch, capsys):
    answers = iter(["crane", "bbybg", "fable", "ggggg"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    assert cli.main(["--offline", "--top", "1"]) == 0
    out = capsys.readouterr().out
    assert "=== Wordle Helper ===" in out
    assert "Solved in 2 turns!" in out


def test_cli_stops_on_eof(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert cli.main(["--offline"]) == 0


def test_cli_missing_word_file(capsys, tmp_path):
    assert cli.main(["--words", str(tmp_path / "missing.txt")]) == 1
