"""dictionary.py

Where the word list comes from.

At start-up we make a single GET to a JSON endpoint returning
{"words": ["...", ...]}. Anything going wrong (network, non-2xx, bad JSON,
wrong shape, empty list) falls back to the bundled list; that's a recovery,
not an error, so it's only logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

import requests

from .fallback_words import FALLBACK_WORDS
from .models import WORD_LENGTH

DEFAULT_WORDS_URL = "https://darkermango.github.io/5-Letter-words/words.json"
DEFAULT_TIMEOUT_S = 10.0

SOURCE_FALLBACK = "fallback"

LogFn = Callable[[str], None]


@dataclass(frozen=True)
class WordList:
    words: Tuple[str, ...]
    source: str  # url, file path, or "fallback"

    def __len__(self) -> int:
        return len(self.words)


def normalize_words(raw: Iterable[str]) -> List[str]:
    """Uppercase, keep 5-letter alphabetic words, drop duplicates keeping order."""
    seen = set()
    out = []
    for w in raw:
        if not isinstance(w, str):
            continue
        w = w.strip().upper()
        if len(w) == WORD_LENGTH and w.isalpha() and w not in seen:
            seen.add(w)
            out.append(w)
    return out


# load_words_from_file loads a list of 5-letter words from a file, one per line
def load_words_from_file(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        return normalize_words(f)


def fetch_words(url: str = DEFAULT_WORDS_URL, timeout: float = DEFAULT_TIMEOUT_S) -> List[str]:
    """Download the word list. Raises on any failure, including an unusable payload."""
    response = requests.get(url, timeout=timeout)
    # Raises an HTTPError if the HTTP request returned an unsuccessful status code.
    response.raise_for_status()
    payload = response.json()

    raw = payload.get("words") if isinstance(payload, dict) else None
    if not isinstance(raw, list) or not raw:
        raise ValueError("Invalid API response: expected a non-empty 'words' array")

    words = normalize_words(raw)
    if not words:
        raise ValueError("Invalid API response: no usable 5-letter words")
    return words


def fallback_word_list() -> WordList:
    return WordList(words=tuple(FALLBACK_WORDS), source=SOURCE_FALLBACK)


def load_dictionary(
    url: str = DEFAULT_WORDS_URL,
    *,
    timeout: float = DEFAULT_TIMEOUT_S,
    log: Optional[LogFn] = None,
) -> WordList:
    """Fetch the remote list once; use the bundled list on any failure."""
    if log is not None:
        log(f"dictionary: fetching {url}")
    try:
        words = fetch_words(url, timeout=timeout)
    except (requests.exceptions.RequestException, ValueError) as e:
        # requests' JSONDecodeError is a ValueError too
        if log is not None:
            log(f"dictionary: fetch failed ({e}); using fallback word list")
        return fallback_word_list()

    if log is not None:
        log(f"dictionary: loaded {len(words)} words from {url}")
    return WordList(words=tuple(words), source=url)


def load_dictionary_file(path: str, *, log: Optional[LogFn] = None) -> WordList:
    words = load_words_from_file(path)
    if not words:
        raise ValueError(f"Loaded 0 usable words from {path}. Check the file.")
    if log is not None:
        log(f"dictionary: loaded {len(words)} words from {path}")
    return WordList(words=tuple(words), source=path)
