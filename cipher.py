"""
Letter <-> numeral substitution cipher - cipher.py

A key of L distinct letters defines a base-L number system: every letter is
assigned one of the symbols 0-9a-z, so any integer written in base L can be
read back as a string of key letters.

Example: key "ab" with 0 last -> a=1, b=0, so 5 = 101 (base 2) = "aba"
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Tuple
import string

# ============================================================================ #
#                              CONFIGURATION                                   #
# ============================================================================ #

DIGITS = string.digits + string.ascii_lowercase
MAX_KEY_LENGTH = len(DIGITS) - 1  # keys must be strictly shorter than 36


# ============================================================================ #
#                              ERRORS                                          #
# ============================================================================ #

class CipherError(ValueError):
    """Base class for cipher and numeral errors."""


class KeyTooLongError(CipherError):
    def __init__(self, length: int):
        super().__init__(f"key has {length} letters, must be at most {MAX_KEY_LENGTH}")
        self.length = length


class KeyTooShortError(CipherError):
    def __init__(self, length: int):
        super().__init__(f"key has {length} letters, need at least 2 for a base-2 cipher")
        self.length = length


class DuplicateKeyLetterError(CipherError):
    def __init__(self, letter: str):
        super().__init__(f"key contains repeat letter {letter!r}")
        self.letter = letter


class UnmappedSymbolError(CipherError):
    def __init__(self, symbol: str):
        super().__init__(f"symbol {symbol!r} is not part of the cipher")
        self.symbol = symbol


class InvalidNumeralError(CipherError):
    def __init__(self, numeral: str, base: int):
        super().__init__(f"invalid base-{base} numeral {numeral!r}")
        self.numeral = numeral
        self.base = base


# ============================================================================ #
#                              NUMERALS                                        #
# ============================================================================ #

def to_base(value: int, base: int) -> str:
    """Format ``value`` in ``base`` using 0-9a-z, without leading zeros."""
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be between 2 and {len(DIGITS)}, got {base}")
    if value == 0:
        return "0"
    if value < 0:
        return "-" + to_base(-value, base)

    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(DIGITS[rem])
    return "".join(reversed(out))


def parse_base(numeral: str, base: int) -> int:
    """Parse a 0-9a-z numeral in ``base``. Accepts a single leading sign."""
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be between 2 and {len(DIGITS)}, got {base}")

    body = numeral[1:] if numeral[:1] in ("+", "-") else numeral
    allowed = DIGITS[:base]
    # int() would also take '_', whitespace and 0x-style prefixes
    if not body or any(ch not in allowed for ch in body.lower()):
        raise InvalidNumeralError(numeral, base)
    return int(numeral, base)


def base_add(n1: str, n2: str, base: int) -> str:
    return to_base(parse_base(n1, base) + parse_base(n2, base), base)


def base_times(n1: str, n2: str, base: int) -> str:
    return to_base(parse_base(n1, base) * parse_base(n2, base), base)


# ============================================================================ #
#                              CIPHER                                          #
# ============================================================================ #

def make_numbers(length: int, leading0: bool = False) -> List[str]:
    """
    Value symbols handed out to the key letters, in key order.

    The non-zero symbols come first in counting order (1-9 then a-z), and '0'
    is placed at the front when ``leading0`` is set, otherwise at the back.
    """
    if length >= len(DIGITS):
        raise KeyTooLongError(length)
    numbers = list(DIGITS[1:length])
    if leading0:
        return ["0"] + numbers
    return numbers + ["0"]


@dataclass(frozen=True, eq=False)
class Cipher:
    letter_to_value: Mapping[str, str]
    value_to_letter: Mapping[str, str]
    base: int

    def __post_init__(self):
        if len(self.letter_to_value) != self.base or len(self.value_to_letter) != self.base:
            raise CipherError(f"cipher maps {len(self.letter_to_value)} letters but base is {self.base}")
        if set(self.value_to_letter) != set(DIGITS[:self.base]):
            raise CipherError(f"cipher values do not match the base-{self.base} digits")
        for letter, value in self.letter_to_value.items():
            if self.value_to_letter.get(value) != letter:
                raise CipherError(f"mapping is not a bijection at {letter!r} -> {value!r}")

    @classmethod
    def from_key(cls, key: str, leading0: bool = False) -> "Cipher":
        if len(key) >= len(DIGITS):
            raise KeyTooLongError(len(key))
        seen = set()
        for letter in key:
            if letter in seen:
                raise DuplicateKeyLetterError(letter)
            seen.add(letter)
        if len(key) < 2:
            raise KeyTooShortError(len(key))

        numbers = make_numbers(len(key), leading0)
        letter_to_value = MappingProxyType(dict(zip(key, numbers)))
        value_to_letter = MappingProxyType(dict(zip(numbers, key)))
        return cls(letter_to_value, value_to_letter, len(key))

    @property
    def key(self) -> str:
        return "".join(self.letter_to_value)

    def encode(self, letters: str) -> str:
        try:
            return "".join(self.letter_to_value[ch] for ch in letters)
        except KeyError as exc:
            raise UnmappedSymbolError(exc.args[0]) from None

    def decode(self, numbers: str) -> str:
        try:
            return "".join(self.value_to_letter[ch] for ch in numbers)
        except KeyError as exc:
            raise UnmappedSymbolError(exc.args[0]) from None

    def from_int(self, value: int) -> Tuple[str, str]:
        """Return (numbers, letters) for a non-negative integer."""
        if self.base == 10:
            numbers = str(value)
        else:
            numbers = to_base(value, self.base)
        return numbers, self.decode(numbers)

    def describe(self) -> str:
        return " ".join(f"{letter}={value}" for letter, value in self.letter_to_value.items())
