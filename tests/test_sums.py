# tests/test_sums.py
"""Tests for the word-sum search."""

import random

import pytest

from cipher import Cipher, parse_base
from dictionary import WordList
from sums import Triplet, Word, find_valid_sums, iter_valid_sums, scan_valid_words


@pytest.fixture
def binary_cipher():
    # a=1, b=0
    return Cipher.from_key("ab")


@pytest.fixture
def binary_words():
    # 1=a, 2=ab, 3=aa, 5=aba, 7=aaa
    return WordList.from_words(["a", "AB", "aa", "aba", "aaa"])


def values(triplets):
    return [(t.first.value, t.second.value, t.total.value) for t in triplets]


# === Scan ===

def test_scan_valid_words(binary_cipher, binary_words):
    lookup, valid_numbers = scan_valid_words(8, binary_cipher, binary_words)

    assert valid_numbers == [1, 2, 3, 5, 7]
    assert len(lookup) == 8
    assert lookup[0] is None
    assert lookup[5] == Word(5, "101", "aba")


def test_scan_empty_bound(binary_cipher, binary_words):
    assert scan_valid_words(0, binary_cipher, binary_words) == ([], [])
    assert scan_valid_words(-3, binary_cipher, binary_words) == ([], [])


# === Search ===

def test_find_valid_sums_binary(binary_cipher, binary_words):
    triplets = find_valid_sums(8, binary_cipher, binary_words)

    assert values(triplets) == [(1, 1, 2), (1, 2, 3), (2, 3, 5)]
    assert [str(t) for t in triplets] == ["a + a = ab", "a + ab = aa", "ab + aa = aba"]


def test_find_valid_sums_rows(binary_cipher, binary_words):
    triplets = find_valid_sums(8, binary_cipher, binary_words)

    assert triplets[2].as_row() == ("10", "ab", "11", "aa", "101", "aba")


@pytest.mark.parametrize("max_sum", [0, -1, -100])
def test_find_valid_sums_non_positive_bound(binary_cipher, binary_words, max_sum):
    assert find_valid_sums(max_sum, binary_cipher, binary_words) == []


def test_find_valid_sums_tiny_bound(binary_cipher, binary_words):
    # addends must be below 1
    assert find_valid_sums(2, binary_cipher, binary_words) == []


def test_find_valid_sums_empty_word_list(binary_cipher):
    assert find_valid_sums(100, binary_cipher, WordList()) == []


def test_addends_stay_below_half_bound(binary_cipher):
    # 1=a, 5=aba, 6=aab: 1 + 5 = 6 < 8, but 5 is not below 8 // 2
    words = WordList.from_words(["a", "aba", "aab"])

    assert find_valid_sums(8, binary_cipher, words) == []
    assert values(find_valid_sums(12, binary_cipher, words)) == [(1, 5, 6)]


def test_binary_example_dictionary(binary_cipher):
    # "ba" would be 01, which never comes out of the numeral conversion
    words = WordList.from_words(["ab", "ba", "aba"])

    _, valid_numbers = scan_valid_words(8, binary_cipher, words)

    assert valid_numbers == [2, 5]
    # 2 + 2 = 4 = "abb", and 5 is not below 8 // 2
    assert find_valid_sums(8, binary_cipher, words) == []


def test_leading_zero_changes_mapping():
    cipher = Cipher.from_key("ab", leading0=True)
    # a=0, b=1: 1=b, 2=ba, 3=bb
    words = WordList.from_words(["b", "ba", "bb"])

    assert values(find_valid_sums(8, cipher, words)) == [(1, 1, 2), (1, 2, 3)]


def test_iter_valid_sums_is_lazy(binary_cipher, binary_words):
    it = iter_valid_sums(8, binary_cipher, binary_words)

    assert isinstance(next(it), Triplet)


def test_find_valid_sums_deterministic(binary_cipher, binary_words):
    first = find_valid_sums(64, binary_cipher, binary_words)
    second = find_valid_sums(64, binary_cipher, binary_words)

    assert first == second


def test_find_valid_sums_show_progress(binary_cipher, binary_words):
    assert find_valid_sums(8, binary_cipher, binary_words, show_progress=True) == \
        find_valid_sums(8, binary_cipher, binary_words)


# === Properties against a brute-force reference ===

@pytest.mark.parametrize("key, leading0", [
    ("wanderlust", False),
    ("wanderlust", True),
    ("abc", False),
    ("cipherwotsky", True),
])
def test_find_valid_sums_matches_reference(key, leading0):
    rng = random.Random(key)
    cipher = Cipher.from_key(key, leading0)
    max_sum = 600

    chosen = rng.sample(range(max_sum), 150)
    words = WordList.from_words(cipher.from_int(k)[1] for k in chosen)
    valid = {k for k in range(max_sum) if cipher.from_int(k)[1] in words}

    half = max_sum // 2
    expected = [
        (i, j, i + j)
        for i in sorted(valid) if i < half
        for j in sorted(valid) if i <= j < half and i + j in valid
    ]

    triplets = find_valid_sums(max_sum, cipher, words)

    assert values(triplets) == expected
    assert len(triplets) > 0
    for t in triplets:
        for word in t:
            assert word.letters in words
            assert cipher.decode(word.numbers) == word.letters
            assert parse_base(word.numbers, cipher.base) == word.value
        assert t.first.value + t.second.value == t.total.value
        assert t.first.value <= t.second.value < half
        assert t.total.value < max_sum
