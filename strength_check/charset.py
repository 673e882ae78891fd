import re
from dataclasses import dataclass

LOWERCASE = re.compile(r'[a-z]')
UPPERCASE = re.compile(r'[A-Z]')
DIGITS = re.compile(r'[0-9]')
SYMBOLS = re.compile(r'[^a-zA-Z0-9]')

# Pool size each character class adds to the assumed alphabet
POOL_SIZES = {
    'lowercase': 26,
    'uppercase': 26,
    'numbers': 10,
    'symbols': 33,
}


@dataclass(frozen=True)
class CharacterClassPresence:
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False

    @property
    def alphabet_size(self) -> int:
        """Sum of the pool sizes of every class present (0 when none are)."""
        size = 0
        if self.has_lower: size += POOL_SIZES['lowercase']
        if self.has_upper: size += POOL_SIZES['uppercase']
        if self.has_digit: size += POOL_SIZES['numbers']
        if self.has_symbol: size += POOL_SIZES['symbols']
        return size


def classify(text: str) -> CharacterClassPresence:
    """Report which of the four ASCII character classes appear in text."""
    text = text or ''
    return CharacterClassPresence(
        has_lower=bool(LOWERCASE.search(text)),
        has_upper=bool(UPPERCASE.search(text)),
        has_digit=bool(DIGITS.search(text)),
        has_symbol=bool(SYMBOLS.search(text)),
    )
