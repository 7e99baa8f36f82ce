"""
Word-sum finder - sums.py

Finds every pair of dictionary words whose cipher values add up to a third
dictionary word:

    word(i) + word(j) = word(i + j),   i <= j < max_sum // 2

Two phases:
  1. One linear scan over [0, max_sum) marks which integers decode to a word.
  2. A nested scan over the marked integers only checks each pair's sum
     against the marks from phase 1.

Both addends are kept strictly below max_sum // 2, even where a smaller
partner would keep the sum under max_sum.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, List, NamedTuple, Optional, Tuple
from tqdm import tqdm

from cipher import Cipher
from dictionary import WordList


# ============================================================================ #
#                              HELPERS                                         #
# ============================================================================ #

def progress(iterable, desc="", total=None, disable=False):
    return tqdm(iterable, desc=desc, total=total, disable=disable,
                ascii=" ▖▘▝▗▚▞█", bar_format='{desc}: |{bar:30}| {n_fmt}/{total_fmt}')


# ============================================================================ #
#                              DATA STRUCTURES                                 #
# ============================================================================ #

@dataclass(frozen=True)
class Word:
    value: int     # integer value (base 10)
    numbers: str   # value written in the cipher's base
    letters: str   # numbers decoded through the cipher


class Triplet(NamedTuple):
    first: Word
    second: Word
    total: Word

    def as_row(self) -> Tuple[str, str, str, str, str, str]:
        return (
            self.first.numbers, self.first.letters,
            self.second.numbers, self.second.letters,
            self.total.numbers, self.total.letters,
        )

    def __str__(self) -> str:
        return f"{self.first.letters} + {self.second.letters} = {self.total.letters}"


# ============================================================================ #
#                              SEARCH                                          #
# ============================================================================ #

def scan_valid_words(
    max_sum: int,
    cipher: Cipher,
    word_list: WordList,
    *,
    show_progress: bool = False,
) -> Tuple[List[Optional[Word]], List[int]]:
    """
    Returns:
        lookup: lookup[k] is the Word for k if k decodes to a dictionary word, else None
        valid_numbers: the valid k values in ascending order
    """
    if max_sum <= 0:
        return [], []

    lookup: List[Optional[Word]] = [None] * max_sum
    valid_numbers: List[int] = []

    for k in progress(range(max_sum), "Scanning values", disable=not show_progress):
        numbers, letters = cipher.from_int(k)
        if letters in word_list:
            lookup[k] = Word(k, numbers, letters)
            valid_numbers.append(k)

    return lookup, valid_numbers


def iter_valid_sums(
    max_sum: int,
    cipher: Cipher,
    word_list: WordList,
    *,
    show_progress: bool = False,
) -> Iterator[Triplet]:
    """Yield Triplets ordered by first addend, then second addend."""
    lookup, valid_numbers = scan_valid_words(max_sum, cipher, word_list, show_progress=show_progress)
    max_number = max_sum // 2

    # addends that can be used at all, still ascending
    addends = [k for k in valid_numbers if k < max_number]

    for idx, i in enumerate(progress(addends, "Pairing addends", disable=not show_progress)):
        first = lookup[i]
        for j in islice(addends, idx, None):
            total = lookup[i + j]
            if total is not None:
                yield Triplet(first, lookup[j], total)


def find_valid_sums(
    max_sum: int,
    cipher: Cipher,
    word_list: WordList,
    *,
    show_progress: bool = False,
) -> List[Triplet]:
    return list(iter_valid_sums(max_sum, cipher, word_list, show_progress=show_progress))
