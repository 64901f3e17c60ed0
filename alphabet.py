# alphabet.py
# Symbol alphabet, rolling-hash settings and the input checks shared by every search.

from dataclasses import dataclass
from math import gcd

# Printable ASCII (' '..'~') plus carriage return and line feed.
PRINTABLE_SYMBOLS = "".join(chr(code) for code in range(32, 127)) + "\r\n"
DELIMITER = "\0"

DEFAULT_INDENT = 5


class PatternError(ValueError):
    """Base class for inputs no search algorithm accepts."""


class EmptyPatternError(PatternError):
    def __init__(self):
        super().__init__("empty pattern")


class PatternTooLongError(PatternError):
    def __init__(self, pattern_length, base_length):
        self.pattern_length = pattern_length
        self.base_length = base_length
        super().__init__(
            f"pattern longer than base ({pattern_length} > {base_length} symbols)"
        )


class AlphabetError(PatternError):
    """Raised when a sequence holds symbols outside the alphabet."""

    def __init__(self, label, symbols):
        self.label = label
        self.symbols = symbols
        shown = ", ".join(repr(s) for s in symbols)
        super().__init__(f"{label} contains symbols outside the alphabet: {shown}")


@dataclass(frozen=True)
class Alphabet:
    symbols: str = PRINTABLE_SYMBOLS
    delimiter: str = DELIMITER

    def __post_init__(self):
        if not self.symbols:
            raise ValueError("alphabet needs at least one symbol")
        if len(self.delimiter) != 1:
            raise ValueError("delimiter must be a single symbol")
        if self.delimiter in self.symbols:
            raise ValueError(f"delimiter {self.delimiter!r} is part of the alphabet")

    @property
    def size(self) -> int:
        return len(set(self.symbols))

    def __contains__(self, symbol):
        return len(symbol) == 1 and symbol in self.symbols

    def invalid_symbols(self, sequence: str) -> list:
        return sorted(set(sequence) - set(self.symbols))


@dataclass(frozen=True)
class HashConfig:
    """
    Polynomial hash settings. Values are reduced modulo `modulus`, and the
    window slide divides by `multiplier` through its modular inverse, so the
    two must be coprime.
    """
    multiplier: int = 257
    modulus: int = 1_000_000_007

    def __post_init__(self):
        if self.multiplier < 1:
            raise ValueError("multiplier must be at least 1")
        if self.modulus < 2:
            raise ValueError("modulus must be at least 2")
        if gcd(self.multiplier, self.modulus) != 1:
            raise ValueError(
                f"multiplier {self.multiplier} has no inverse modulo {self.modulus}"
            )

    @property
    def inverse(self) -> int:
        return pow(self.multiplier, -1, self.modulus)


DEFAULT_ALPHABET = Alphabet()
DEFAULT_HASH_CONFIG = HashConfig()


def validate_inputs(base: str, pattern: str, alphabet: Alphabet = DEFAULT_ALPHABET):
    """Rejects inputs outside the search contract before any algorithm runs."""
    if not pattern:
        raise EmptyPatternError()
    if len(pattern) > len(base):
        raise PatternTooLongError(len(pattern), len(base))
    for label, sequence in (("pattern", pattern), ("base", base)):
        invalid = alphabet.invalid_symbols(sequence)
        if invalid:
            raise AlphabetError(label, invalid)
