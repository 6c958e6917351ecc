#!/usr/bin/env python3
"""simulate.py

Plays the helper against known secrets and prints summary statistics.
Optionally writes a matplotlib graph to disk.

Each game drives a HelperSession the way a player would: take the suggestion,
enter the real Wordle feedback for it, repeat.

Examples:
  wordle-helper-sim --words words.txt --limit 200
  wordle-helper-sim --offline --max-turns 6 --plot results.png

Notes:
- Use --plot to require matplotlib (pip install wordle-helper[plot]).
"""

from __future__ import annotations

import argparse
import statistics
import sys
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import tqdm

from . import dictionary
from .controller import MAX_GUESSES, HelperSession
from .models import LetterState
from .scoring import DEFAULT_CONFIG, ScoringConfig


@dataclass(frozen=True)
class GameResult:
    secret: str
    solved: bool
    guesses: Tuple[str, ...]
    # remaining candidates after each guess was entered
    candidates_after: Tuple[int, ...] = ()
    # turns where the suggester had nothing and the first candidate was played
    fallback_turns: int = 0

    @property
    def turns(self) -> int:
        return len(self.guesses)

    @property
    def first_guess(self) -> str:
        return self.guesses[0] if self.guesses else ""

    @property
    def final_candidates(self) -> int:
        return self.candidates_after[-1] if self.candidates_after else 0


# compute Wordle-style feedback for guess given the secret word
def wordle_feedback(secret: str, guess: str) -> Tuple[LetterState, ...]:
    """Feedback the game would show; handles repeated letters correctly."""
    # first pass: greens
    res = [LetterState.ABSENT] * len(guess)
    secret_counts = Counter(secret)

    for i, (s_ch, g_ch) in enumerate(zip(secret, guess)):
        if g_ch == s_ch:
            res[i] = LetterState.CORRECT
            secret_counts[g_ch] -= 1

    # second pass: yellows (only for non-greens)
    for i, g_ch in enumerate(guess):
        if res[i] is LetterState.ABSENT and secret_counts[g_ch] > 0:
            res[i] = LetterState.PRESENT
            secret_counts[g_ch] -= 1

    return tuple(res)


def simulate_game(
    *,
    secret: str,
    words: Sequence[str],
    config: ScoringConfig = DEFAULT_CONFIG,
    max_turns: int = MAX_GUESSES,
) -> GameResult:
    secret = secret.upper()
    session = HelperSession(words, config=config)

    guesses: List[str] = []
    after: List[int] = []
    fallbacks = 0
    solved = False
    while len(guesses) < max_turns:
        guess = session.suggestion.word
        if guess is None:
            if not session.candidates:
                break
            guess = session.candidates[0]
            fallbacks += 1

        guesses.append(guess)
        if guess == secret:
            solved = True
            after.append(1)
            break

        session.add_guess(guess, wordle_feedback(secret, guess))
        after.append(len(session.candidates))

    return GameResult(
        secret=secret,
        solved=solved,
        guesses=tuple(guesses),
        candidates_after=tuple(after),
        fallback_turns=fallbacks,
    )


@dataclass
class SimulationStats:
    games: int = 0
    solved_turns: List[int] = field(default_factory=list)
    failed: List[GameResult] = field(default_factory=list)
    openers: Counter = field(default_factory=Counter)
    fallback_games: int = 0
    # per turn, candidate counts left after that guess (across all games still playing)
    narrowing: Dict[int, List[int]] = field(default_factory=dict)


def tally(results: Iterable[GameResult]) -> SimulationStats:
    stats = SimulationStats()
    for r in results:
        stats.games += 1
        if r.solved:
            stats.solved_turns.append(r.turns)
        else:
            stats.failed.append(r)
        if r.first_guess:
            stats.openers[r.first_guess] += 1
        if r.fallback_turns:
            stats.fallback_games += 1
        for turn, left in enumerate(r.candidates_after, start=1):
            stats.narrowing.setdefault(turn, []).append(left)
    return stats


def summarize(results: Iterable[GameResult]) -> str:
    stats = tally(results)
    if not stats.games:
        return "No results."

    def pct(n: int) -> str:
        return f"{n / stats.games * 100:.1f}%"

    solved = len(stats.solved_turns)
    lines = [f"Games: {stats.games}, solved {solved} ({pct(solved)}), unsolved {len(stats.failed)}"]

    if stats.solved_turns:
        by_turn = Counter(stats.solved_turns)
        lines.append(
            f"Turns to solve: mean {statistics.mean(stats.solved_turns):.2f}, "
            f"worst {max(stats.solved_turns)} "
            f"[" + " ".join(f"{t}:{by_turn[t]}" for t in sorted(by_turn)) + "]"
        )

    if stats.narrowing:
        avg = " -> ".join(
            f"{statistics.mean(stats.narrowing[t]):.1f}" for t in sorted(stats.narrowing)
        )
        lines.append(f"Avg candidates left after each guess: {avg}")

    opener, count = stats.openers.most_common(1)[0]
    lines.append(f"Opening suggestion: {opener} in {count} of {stats.games} games")

    if stats.fallback_games:
        lines.append(f"No suggestion, played first candidate: {stats.fallback_games} games ({pct(stats.fallback_games)})")

    if stats.failed:
        stuck = ", ".join(f"{r.secret}({r.final_candidates} left)" for r in stats.failed[:10])
        lines.append(f"Unsolved (up to 10): {stuck}")

    return "\n".join(lines)


def plot_results(*, stats: SimulationStats, max_turns: int, out_path: str) -> None:
    """Two panels: how many games finished on each turn, and how fast candidates shrink."""
    # matplotlib is an optional extra, only needed here
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt  # noqa: E402

    turns = list(range(1, max_turns + 1))
    by_turn = Counter(stats.solved_turns)

    fig, (left, right) = plt.subplots(1, 2, figsize=(11, 4))

    left.bar(turns, [by_turn.get(t, 0) for t in turns], color="#6CA965", label="solved")
    left.bar([max_turns + 1], [len(stats.failed)], color="#787C7F", label="unsolved")
    left.set_xticks(turns + [max_turns + 1])
    left.set_xticklabels([str(t) for t in turns] + ["X"])
    left.set_xlabel("Turn")
    left.set_ylabel("Games")
    left.legend(loc="upper left")

    steps = sorted(stats.narrowing)
    right.plot(steps, [statistics.mean(stats.narrowing[t]) for t in steps], marker="o", color="#C8B653")
    right.set_yscale("log")
    right.set_xlabel("Guesses entered")
    right.set_ylabel("Avg candidates left")

    fig.suptitle(f"{stats.games} games, {stats.fallback_games} with no suggestion at some turn")
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Run Wordle helper simulations and print statistics.")
    ap.add_argument("--words", type=str, default=None, help="Word list file (5-letter words, one per line).")
    ap.add_argument("--url", type=str, default=dictionary.DEFAULT_WORDS_URL, help="JSON word list endpoint.")
    ap.add_argument("--offline", action="store_true", help="Use the bundled word list.")
    ap.add_argument("--secrets", type=str, default=None, help="Secrets to test (defaults to the word list).")
    ap.add_argument("--limit", type=int, default=0, help="Limit number of secrets (0 = no limit).")
    ap.add_argument("--max-turns", type=int, default=MAX_GUESSES, help="Max turns per game.")
    ap.add_argument("--no-progress", action="store_true", help="Disable progress bars.")
    ap.add_argument("--plot", type=str, default=None, help="Write a matplotlib graph to this path (e.g. results.png).")
    args = ap.parse_args(argv)

    if args.max_turns > MAX_GUESSES:
        print(f"--max-turns can't exceed {MAX_GUESSES}.", file=sys.stderr)
        return 2

    if args.words:
        try:
            word_list = dictionary.load_dictionary_file(args.words)
        except (OSError, ValueError) as e:
            print(f"Could not load {args.words}: {e}", file=sys.stderr)
            return 2
    elif args.offline:
        word_list = dictionary.fallback_word_list()
    else:
        word_list = dictionary.load_dictionary(args.url, log=print)

    if args.secrets:
        try:
            secrets = dictionary.load_words_from_file(args.secrets)
        except OSError as e:
            print(f"Could not load {args.secrets}: {e}", file=sys.stderr)
            return 2
    else:
        secrets = list(word_list.words)

    if args.limit and args.limit > 0:
        secrets = secrets[: args.limit]

    known = set(word_list.words)
    skipped = 0
    results: List[GameResult] = []

    iterator = secrets if args.no_progress else tqdm.tqdm(secrets, desc="Simulating", unit="game")
    for secret in iterator:
        if secret not in known:
            skipped += 1
            continue
        results.append(simulate_game(secret=secret, words=word_list.words, max_turns=args.max_turns))

    if skipped:
        print(f"Skipped {skipped} secrets not in the word list.")

    print(summarize(results))

    if args.plot:
        try:
            plot_results(stats=tally(results), max_turns=args.max_turns, out_path=args.plot)
            print(f"Wrote plot: {args.plot}")
        except ModuleNotFoundError as e:
            print(f"Plot requested but missing dependency: {e}. Install matplotlib to use --plot.", file=sys.stderr)
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
