"""Dictionary loading for the word-sum search.

Words are normalized once when the list is built (trimmed, lower-cased, empty
lines dropped). Lookups afterwards are exact matches.
"""
from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List

DEFAULT_WORDFREQ_LANG = "en"


def normalize_words(words: Iterable[str]) -> Iterator[str]:
    for raw in words:
        word = raw.strip().lower()
        if word:
            yield word


class WordList:
    """Read-only set of normalized dictionary words."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordList":
        return cls(normalize_words(words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"WordList({len(self._words):,} words)"


def load_lines(path: Path) -> List[str]:
    with path.open("r", encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def load_word_list(path: Path) -> WordList:
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")
    return WordList.from_words(load_lines(path))


def load_wordfreq_word_list(limit: int, lang: str = DEFAULT_WORDFREQ_LANG) -> WordList:
    """Build a WordList from the ``limit`` most frequent words known to wordfreq."""
    from wordfreq import top_n_list

    if limit < 1:
        raise ValueError(f"wordfreq limit must be positive, got {limit}")
    return WordList.from_words(top_n_list(lang, limit, wordlist="best"))
