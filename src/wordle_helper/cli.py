#!/usr/bin/env python3
"""cli.py

Interactive Wordle helper. You play Wordle elsewhere; after each guess you type
the word and the colours you got, and the helper lists the words still possible
and suggests what to try next.

Feedback format:
- 5 chars of g (green), y (yellow), b (black/gray), or 2/1/0
- '.' leaves a letter unknown (you can toggle it later)
  Example: "bygyb"

Commands at the guess prompt:
  <word>          add a guess, then enter its feedback
  <Enter>         use the suggested word
  <number>        use that word from the candidate list
  toggle G P      cycle letter P (1-5) of guess G: unknown -> green -> yellow -> gray
  remove G        drop guess G
  quit

Usage:
  wordle-helper
  wordle-helper --words my_words.txt
  wordle-helper --offline --verbose
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Callable, List, Optional

from . import dictionary
from .controller import HelperSession, HelperView
from .models import LetterState, normalize_word, parse_pattern
from .scoring import rank_words

_TILE = {
    LetterState.CORRECT: "[{}]",
    LetterState.PRESENT: "({})",
    LetterState.ABSENT: " {} ",
    LetterState.UNKNOWN: " {}?",
}

def format_view(view: HelperView) -> List[str]:
    """Plain-text rendering of the session, one line per entry."""
    lines: List[str] = []
    if view.guesses:
        lines.append("Your guesses ([green] (yellow) gray ?unset):")
        for n, g in enumerate(view.guesses, start=1):
            tiles = "".join(_TILE[gl.state].format(gl.letter) for gl in g.letters)
            lines.append(f"  {n}. {tiles}")
        if not view.can_add_guess:
            lines.append("Maximum 6 guesses reached")

    lines.append(f"Possible words ({view.candidate_count}):")
    if view.candidate_count == 0:
        lines.append("  No words match your current constraints. Check your guesses!")
    else:
        if view.hidden_count:
            lines.append(f"  Too many possibilities ({view.candidate_count} words). Add more guesses to narrow it down!")
        numbered = [f"{i}:{w}" for i, w in enumerate(view.shown_candidates, start=1)]
        for start in range(0, len(numbered), 8):
            lines.append("  " + " ".join(numbered[start:start + 8]))
        if view.hidden_count:
            lines.append(f"  +{view.hidden_count} more...")

    s = view.suggestion
    if s.word:
        lines.append(f"Suggested guess: {s.word}  ({s.rationale})")
    else:
        lines.append(s.rationale)
    return lines


def _parse_guess_number(session: HelperSession, text: str) -> str:
    try:
        n = int(text)
    except ValueError:
        raise ValueError(f"Guess number must be an integer, got {text!r}.")
    if not 1 <= n <= len(session.history):
        raise ValueError(f"No guess #{n}; you have {len(session.history)}.")
    return session.history[n - 1].id


def handle_command(session: HelperSession, line: str, ask: Callable[[str], str]) -> bool:
    """Apply one line of input. Returns False when the user wants to stop."""
    parts = line.split()
    if not parts:
        word = session.suggestion.word
        if word is None:
            raise ValueError("Nothing to suggest; type a guess.")
        parts = [word]

    cmd = parts[0].lower()
    if cmd == "quit":
        return False
    if cmd == "toggle":
        if len(parts) != 3:
            raise ValueError("Usage: toggle <guess number> <letter position 1-5>")
        guess_id = _parse_guess_number(session, parts[1])
        try:
            pos = int(parts[2]) - 1
        except ValueError:
            raise ValueError(f"Letter position must be 1-5, got {parts[2]!r}.")
        session.toggle_letter(guess_id, pos)
        return True
    if cmd == "remove":
        if len(parts) != 2:
            raise ValueError("Usage: remove <guess number>")
        session.remove_guess(_parse_guess_number(session, parts[1]))
        return True

    word = parts[0]
    if word.isdigit():
        shown = session.view().shown_candidates
        i = int(word)
        if not 1 <= i <= len(shown):
            raise ValueError(f"Pick a listed word between 1 and {len(shown)}.")
        word = shown[i - 1]

    word = normalize_word(word)
    if not session.view().can_add_guess:
        raise ValueError("Maximum 6 guesses reached.")
    # validate the pattern before adding so a typo doesn't leave a stray guess
    pat_s = ask(f"Feedback for {word} (g/y/b or 2/1/0, Enter = set later): ").strip()
    states = parse_pattern(pat_s) if pat_s else None
    session.add_guess(word, states)
    return True


def cli(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Wordle helper (interactive CLI).")
    ap.add_argument("--words", type=str, default=None,
                    help="Path to a word list (5-letter words, one per line) instead of downloading one.")
    ap.add_argument("--url", type=str, default=dictionary.DEFAULT_WORDS_URL,
                    help="JSON endpoint returning {\"words\": [...]}.")
    ap.add_argument("--offline", action="store_true", help="Skip the download and use the bundled word list.")
    ap.add_argument("--timeout", type=float, default=dictionary.DEFAULT_TIMEOUT_S,
                    help="Seconds to wait for the word list download.")
    ap.add_argument("--top", type=int, default=5, help="How many ranked suggestions to show each turn.")
    ap.add_argument("--verbose", action="store_true", help="Print progress details.")
    ap.add_argument("--debug", action="store_true", help="Very verbose logs.")
    args = ap.parse_args(argv)

    verbose = bool(args.verbose or args.debug)
    debug = bool(args.debug)

    start_t = time.time()

    def log(msg: str) -> None:
        if not verbose:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] {msg}")

    def log_debug(msg: str) -> None:
        if not debug:
            return
        dt = time.time() - start_t
        print(f"[{dt:7.2f}s] DEBUG {msg}")

    if args.words:
        try:
            word_list = dictionary.load_dictionary_file(args.words, log=log)
        except (OSError, ValueError) as e:
            print(f"Could not load {args.words}: {e}", file=sys.stderr)
            return 1
    elif args.offline:
        word_list = dictionary.fallback_word_list()
        log(f"dictionary: offline, using {len(word_list)} bundled words")
    else:
        word_list = dictionary.load_dictionary(args.url, timeout=args.timeout, log=log)

    def render(view: HelperView) -> None:
        print("")
        for line in format_view(view):
            print(line)

    session = HelperSession(word_list.words, source=word_list.source, log=log_debug)

    print("\n=== Wordle Helper ===")
    print(f"Using {len(word_list)} words from {word_list.source}")
    print("Feedback input: 5 letters [g,y,b] or digits [2,1,0]. Example: bygyb or 02120")
    print("Commands: <word>, <Enter> for suggestion, <number> from list, toggle G P, remove G, quit.")
    render(session.view())
    session.render = render

    while True:
        if args.top > 1 and len(session.candidates) > session.config.direct_answer_max:
            ranked = rank_words(session.candidates, session.words, session.history, session.config, top_k=args.top)
            if len(ranked) > 1:
                print("Top suggestions: " + ", ".join(f"{w} ({h:.1f})" for w, h in ranked))

        try:
            line = input("\nGuess> ")
        except EOFError:
            break
        try:
            if not handle_command(session, line, input):
                break
        except ValueError as e:
            print(f"{e}\n")
            continue

        if session.history and all(st is LetterState.CORRECT for st in session.history[-1].states):
            print(f"Solved in {len(session.history)} turns!")
            break

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return cli(argv)


if __name__ == "__main__":
    raise SystemExit(main())
